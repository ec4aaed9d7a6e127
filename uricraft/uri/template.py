"""
Endpoint syntax templates.

A syntax string such as ``acme2:name/path:port`` is decomposed into its scheme
and an ordered sequence of path tokens. Each token remembers the separator that
precedes it in the syntax so that an omitted optional token can be dropped
together with its own separator without touching its neighbours.

Parsing is purely syntactic; mandatory/default metadata is bound afterwards
from ``PathParameter`` descriptions.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from ..domain.models import (
    PathParameter,
    TemplateError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
)

SEPARATORS = (":", "/")

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_SEGMENT_RE = re.compile(r"([:/])([^:/]*)")


@dataclass(frozen=True)
class PathToken:
    """A positional placeholder and the separator written before it."""

    separator: str
    name: str
    mandatory: bool = False
    default_value: Any = None


@dataclass(frozen=True)
class UriTemplate:
    """Immutable parsed form of an endpoint syntax string."""

    syntax: str
    scheme: str
    tokens: tuple[PathToken, ...]

    @classmethod
    def parse(
        cls,
        syntax: str,
        parameters: Iterable[PathParameter | Mapping[str, Any]] | None = None,
    ) -> UriTemplate:
        """
        Parse a syntax string and optionally bind placeholder metadata.

        Args:
            syntax: Syntax string, e.g. ``scheme:name/path:port``
            parameters: Metadata for some or all of the placeholders

        Returns:
            The parsed template

        Raises:
            TemplateSyntaxError: If the syntax string is malformed
            UnknownPlaceholderError: If metadata names an unknown placeholder
        """
        if not isinstance(syntax, str) or not syntax.strip():
            raise TemplateSyntaxError(str(syntax), "syntax must be a non-empty string")

        scheme, sep, _ = syntax.partition(":")
        if not sep:
            raise TemplateSyntaxError(syntax, "expected ':' after the scheme")
        if not _SCHEME_RE.match(scheme):
            raise TemplateSyntaxError(syntax, f"invalid scheme {scheme!r}")

        base = syntax[len(scheme) :]
        segments = _SEGMENT_RE.findall(base)
        # findall skips nothing only when the whole base is separator/name pairs
        if "".join(s + n for s, n in segments) != base:
            raise TemplateSyntaxError(syntax, "unexpected characters in path")

        tokens: list[PathToken] = []
        seen: set[str] = set()
        for separator, name in segments:
            if not name:
                raise TemplateSyntaxError(
                    syntax, f"empty placeholder after {separator!r}"
                )
            if not _NAME_RE.match(name):
                raise TemplateSyntaxError(syntax, f"invalid placeholder name {name!r}")
            if name in seen:
                raise TemplateSyntaxError(syntax, f"duplicate placeholder {name!r}")
            seen.add(name)
            tokens.append(PathToken(separator=separator, name=name))

        template = cls(syntax=syntax, scheme=scheme, tokens=tuple(tokens))
        if parameters is not None:
            template = template.bind(parameters)
        return template

    @property
    def base(self) -> str:
        """The syntax without its scheme, e.g. ``:name:port``."""
        return self.syntax[len(self.scheme) :]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(token.name for token in self.tokens)

    def syntax_for(self, scheme: str) -> str:
        """Return the syntax as seen when building for ``scheme``."""
        return scheme + self.base

    def token(self, name: str) -> PathToken | None:
        for token in self.tokens:
            if token.name == name:
                return token
        return None

    def bind(
        self, parameters: Iterable[PathParameter | Mapping[str, Any]]
    ) -> UriTemplate:
        """
        Return a copy of this template carrying mandatory/default metadata.

        Every described placeholder must exist in the syntax; placeholders
        without a description stay optional with no default.

        Raises:
            UnknownPlaceholderError: If a name is not part of the syntax
            TemplateError: If a placeholder is described twice
        """
        described: dict[str, PathParameter] = {}
        for param in parameters:
            if not isinstance(param, PathParameter):
                param = PathParameter(**param)
            if param.name in described:
                raise TemplateError(
                    f"Option {param.name} is described twice for syntax {self.syntax}"
                )
            if param.name not in self.names:
                raise UnknownPlaceholderError(param.name, self.syntax)
            described[param.name] = param

        tokens = []
        for token in self.tokens:
            param = described.get(token.name)
            if param is None:
                tokens.append(replace(token, mandatory=False, default_value=None))
            else:
                tokens.append(
                    replace(
                        token, mandatory=param.required, default_value=param.default
                    )
                )
        return replace(self, tokens=tuple(tokens))

    def __str__(self) -> str:
        return self.syntax
