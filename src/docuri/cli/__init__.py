"""Command line interface for docuri."""
