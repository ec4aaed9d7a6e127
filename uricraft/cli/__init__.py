"""Command line interface for uricraft."""
