"""Endpoint catalog and scheme registry for uricraft."""

from .endpoint_catalog import (
    EndpointCatalogData,
    EndpointDefinition,
    get_definition,
    get_template,
    load_catalog,
    verify_catalog,
)
from .registry import (
    EndpointRegistry,
    TemplateUriFactory,
    configured_catalogs,
    create_registry,
)

__all__ = [
    "EndpointCatalogData",
    "EndpointDefinition",
    "load_catalog",
    "get_definition",
    "get_template",
    "verify_catalog",
    "EndpointRegistry",
    "TemplateUriFactory",
    "configured_catalogs",
    "create_registry",
]
