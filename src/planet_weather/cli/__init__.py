"""Command-line front end for the planet weather models."""
