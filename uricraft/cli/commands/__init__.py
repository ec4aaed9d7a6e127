"""CLI command modules."""

from .syntaxes import add_syntax_commands, syntaxes_group

__all__ = [
    "add_syntax_commands",
    "syntaxes_group",
]
