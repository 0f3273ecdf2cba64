"""Command-line front end for staticmcp."""
