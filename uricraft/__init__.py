"""
uricraft - canonical endpoint uri assembly.

Parses endpoint syntax strings such as ``jms:destinationType:destinationName``
into immutable templates and builds ``scheme:path[?query]`` uris from them.
"""

__version__ = "0.1.0"

from .catalog import EndpointRegistry, create_registry, load_catalog
from .domain.models import (
    EndpointUriError,
    MissingParameterError,
    PathParameter,
    TemplateError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
    UnknownSchemeError,
    UriCraftError,
)
from .uri import PathToken, UriAssembler, UriTemplate, build_uri

__all__ = [
    "__version__",
    "UriTemplate",
    "PathToken",
    "UriAssembler",
    "build_uri",
    "EndpointRegistry",
    "create_registry",
    "load_catalog",
    "PathParameter",
    "UriCraftError",
    "TemplateError",
    "TemplateSyntaxError",
    "UnknownPlaceholderError",
    "EndpointUriError",
    "MissingParameterError",
    "UnknownSchemeError",
]
