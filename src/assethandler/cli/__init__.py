"""Command line interface for the asset handler."""
