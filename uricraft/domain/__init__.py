"""Domain models and errors for uricraft."""

from .models import (
    EndpointUriError,
    MissingParameterError,
    ParameterValue,
    PathParameter,
    TemplateError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
    UnknownSchemeError,
    UriCraftError,
    canonical_value,
)

__all__ = [
    "UriCraftError",
    "TemplateError",
    "TemplateSyntaxError",
    "UnknownPlaceholderError",
    "EndpointUriError",
    "MissingParameterError",
    "UnknownSchemeError",
    "PathParameter",
    "ParameterValue",
    "canonical_value",
]
