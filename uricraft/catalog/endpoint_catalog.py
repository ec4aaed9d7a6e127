"""Endpoint Catalog: central source for endpoint syntaxes and path metadata.

Reads TOML from `endpoint_catalog.toml` (or any catalog file with the same
layout), validates with Pydantic, provides scheme lookup helpers and a small
verification utility.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..domain.models import PathParameter, TemplateError, UnknownSchemeError
from ..uri.template import UriTemplate

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "endpoint_catalog.toml"


class EndpointDefinition(BaseModel):
    scheme: str = Field(min_length=1)
    alternative_schemes: list[str] = Field(default_factory=list)
    syntax: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    path_parameters: list[PathParameter] = Field(default_factory=list)

    @field_validator("scheme", "alternative_schemes")
    @classmethod
    def _normalize_scheme(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [s.strip().lower() for s in v]
        return v.strip().lower()

    @property
    def schemes(self) -> list[str]:
        return [self.scheme, *self.alternative_schemes]

    def to_template(self) -> UriTemplate:
        """Parse the syntax and bind the declared path parameters."""
        return UriTemplate.parse(self.syntax, self.path_parameters)


class EndpointCatalogData(BaseModel):
    endpoints: list[EndpointDefinition] = Field(default_factory=list)


@dataclass
class _CatalogCache:
    mtime_ns: int
    data: EndpointCatalogData


_CACHE: dict[Path, _CatalogCache] = {}


def builtin_catalog_path() -> Path:
    return Path(__file__).with_name(CATALOG_FILENAME)


def _catalog_mtime_ns(path: Path) -> int:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError as exc:
        raise FileNotFoundError(
            f"Endpoint catalog not found at {path}. Create it with [[endpoints]] entries."
        ) from exc


def load_catalog(path: str | Path | None = None) -> EndpointCatalogData:
    """Load and validate an endpoint catalog with simple mtime-based caching.

    Args:
        path: Catalog file to read. Defaults to the built-in catalog.
    """
    path = Path(path) if path is not None else builtin_catalog_path()
    mtime_ns = _catalog_mtime_ns(path)

    cached = _CACHE.get(path)
    if cached and cached.mtime_ns == mtime_ns:
        return cached.data

    try:
        parsed = tomllib.loads(path.read_bytes().decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(
            f"Failed to parse TOML at {path}: {exc}. Please check syntax near the indicated line."
        ) from exc

    try:
        data = EndpointCatalogData(**parsed)
    except ValidationError as exc:
        raise ValueError(f"Endpoint catalog validation failed for {path}: {exc}") from exc

    logger.debug(f"Loaded {len(data.endpoints)} endpoint definitions from {path}")
    _CACHE[path] = _CatalogCache(mtime_ns=mtime_ns, data=data)
    return data


def clear_cache() -> None:
    _CACHE.clear()


def _index_by_scheme(data: EndpointCatalogData) -> dict[str, EndpointDefinition]:
    idx: dict[str, EndpointDefinition] = {}
    for definition in data.endpoints:
        for scheme in definition.schemes:
            idx.setdefault(scheme, definition)
    return idx


def get_definition(
    scheme: str, data: EndpointCatalogData | None = None
) -> EndpointDefinition:
    """Look up a definition by scheme or alternative scheme (case-insensitive)."""
    data = data if data is not None else load_catalog()
    idx = _index_by_scheme(data)
    key = scheme.strip().lower()
    if key not in idx:
        raise UnknownSchemeError(scheme, sorted(idx))
    return idx[key]


def get_template(scheme: str, data: EndpointCatalogData | None = None) -> UriTemplate:
    return get_definition(scheme, data).to_template()


def verify_catalog(data: EndpointCatalogData | None = None) -> dict[str, Any]:
    """Lightweight verification: duplicates, template errors, metadata sanity."""
    results: dict[str, Any] = {
        "total_endpoints": 0,
        "duplicates": [],
        "schemes": [],
    }

    data = data if data is not None else load_catalog()
    results["total_endpoints"] = len(data.endpoints)
    seen: set[str] = set()

    for definition in data.endpoints:
        for scheme in definition.schemes:
            if scheme in seen:
                results["duplicates"].append(scheme)
            else:
                seen.add(scheme)

        try:
            template = definition.to_template()
        except TemplateError as exc:
            results.setdefault("issues", []).append(f"{definition.scheme}: {exc}")
            continue

        if template.scheme.lower() != definition.scheme:
            results.setdefault("issues", []).append(
                f"{definition.scheme}: syntax starts with scheme {template.scheme!r}"
            )
        for param in definition.path_parameters:
            if param.required and param.default is not None:
                results.setdefault("issues", []).append(
                    f"{definition.scheme}: required option {param.name} declares a default"
                )

    results["schemes"] = sorted(seen)
    return results
