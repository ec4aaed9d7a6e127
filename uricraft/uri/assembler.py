"""
Endpoint uri assembly.

Builds ``scheme:path[?query]`` strings from a ``UriTemplate`` and a mapping
of parameter values. Path placeholders are resolved in template order; every
parameter not consumed by the path is serialized as a sorted query string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import quote, quote_plus, urlencode

from ..domain.models import MissingParameterError, canonical_value
from .template import UriTemplate

logger = logging.getLogger(__name__)

SPACE_ENCODINGS = {"percent": quote, "plus": quote_plus}


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def resolve_path(
    scheme: str, template: UriTemplate, parameters: Mapping[str, Any]
) -> tuple[str, frozenset[str]]:
    """
    Resolve the path placeholders of ``template`` against ``parameters``.

    Returns:
        Tuple of (uri without query, names consumed by the path)

    Raises:
        MissingParameterError: If a mandatory placeholder has no value
    """
    parts = [scheme]
    consumed: set[str] = set()

    for token in template.tokens:
        if token.name in parameters:
            consumed.add(token.name)
        value = parameters.get(token.name)

        if _is_absent(value):
            if token.mandatory:
                raise MissingParameterError(token.name, template.syntax_for(scheme))
            # Drop the optional placeholder together with its own separator
            continue

        parts.append(token.separator + canonical_value(value))

    return "".join(parts), frozenset(consumed)


def build_query(
    parameters: Mapping[str, Any],
    exclude: frozenset[str] = frozenset(),
    space_encoding: str = "percent",
) -> str:
    """
    Serialize the parameters not listed in ``exclude`` as a query string.

    Keys are sorted; values are percent-encoded. Returns an empty string when
    nothing remains, otherwise the query prefixed with ``?``.
    """
    residual = sorted(
        (key, canonical_value(value))
        for key, value in parameters.items()
        if key not in exclude and value is not None
    )
    if not residual:
        return ""
    return "?" + urlencode(residual, safe="", quote_via=SPACE_ENCODINGS[space_encoding])


class UriAssembler:
    """Stateless builder turning templates and parameters into endpoint uris."""

    def __init__(self, space_encoding: str = "percent") -> None:
        if space_encoding not in SPACE_ENCODINGS:
            raise ValueError(
                f"Unsupported space encoding: {space_encoding!r} "
                f"(expected one of {sorted(SPACE_ENCODINGS)})"
            )
        self.space_encoding = space_encoding

    def build(
        self, scheme: str, template: UriTemplate, parameters: Mapping[str, Any]
    ) -> str:
        """
        Build the endpoint uri for ``scheme`` from ``template``.

        Args:
            scheme: Scheme written at the start of the uri
            template: Parsed endpoint syntax
            parameters: Parameter values; never modified

        Returns:
            The assembled uri

        Raises:
            MissingParameterError: If a mandatory placeholder has no value
        """
        # Read-only view so neither phase can touch the caller's mapping
        lookup = MappingProxyType(dict(parameters))

        path, consumed = resolve_path(scheme, template, lookup)
        query = build_query(lookup, consumed, self.space_encoding)

        uri = path + query
        logger.debug(f"Built endpoint uri for {template.syntax_for(scheme)}: {uri}")
        return uri


_DEFAULT_ASSEMBLER = UriAssembler()


def build_uri(scheme: str, template: UriTemplate, parameters: Mapping[str, Any]) -> str:
    """Build an endpoint uri with the default assembler."""
    return _DEFAULT_ASSEMBLER.build(scheme, template, parameters)
