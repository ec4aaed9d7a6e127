"""
Endpoint uri templates and assembly.

This package parses endpoint syntax strings into immutable templates and
assembles canonical endpoint uris from them.
"""

from __future__ import annotations

from .assembler import UriAssembler, build_query, build_uri, resolve_path
from .template import PathToken, UriTemplate

__all__ = [
    "PathToken",
    "UriTemplate",
    "UriAssembler",
    "build_uri",
    "build_query",
    "resolve_path",
]
