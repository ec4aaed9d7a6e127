"""Adapters connecting uricraft to the terminal."""
