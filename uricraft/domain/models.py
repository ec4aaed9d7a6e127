"""
Domain models for the uricraft system.

This module contains the exception hierarchy and the Pydantic models shared
by the template, assembler and catalog layers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Scalar values accepted for path and query parameters
ParameterValue = str | int | float | bool | None


class UriCraftError(Exception):
    """Base exception for uricraft domain errors."""

    pass


class TemplateError(UriCraftError):
    """Raised when an endpoint template cannot be constructed."""

    pass


class TemplateSyntaxError(TemplateError):
    """Raised when a syntax string cannot be parsed into a template."""

    def __init__(self, syntax: str, reason: str) -> None:
        self.syntax = syntax
        self.reason = reason
        super().__init__(f"Invalid endpoint syntax {syntax!r}: {reason}")


class UnknownPlaceholderError(TemplateError):
    """Raised when metadata names a placeholder the syntax does not contain."""

    def __init__(self, name: str, syntax: str) -> None:
        self.name = name
        self.syntax = syntax
        super().__init__(
            f"Option {name} is not a path placeholder of endpoint syntax {syntax}"
        )


class EndpointUriError(UriCraftError, ValueError):
    """Base class for failures raised while building an endpoint uri."""

    pass


class MissingParameterError(EndpointUriError):
    """Raised when a mandatory path placeholder has no value."""

    def __init__(self, name: str, syntax: str) -> None:
        self.name = name
        self.syntax = syntax
        super().__init__(
            f"Option {name} is required when creating endpoint uri with syntax {syntax}"
        )


class UnknownSchemeError(UriCraftError, LookupError):
    """Raised when no endpoint definition or factory exists for a scheme."""

    def __init__(self, scheme: str, known: list[str] | None = None) -> None:
        self.scheme = scheme
        self.known = known or []
        message = f"No endpoint uri factory registered for scheme {scheme!r}"
        if self.known:
            message += f" (known schemes: {', '.join(self.known)})"
        super().__init__(message)


class PathParameter(BaseModel):
    """
    Describes one path placeholder of an endpoint syntax.

    ``default`` is descriptive metadata (shown in listings and docs). It is
    never substituted into a built uri.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Placeholder name")
    required: bool = Field(
        False, description="Whether building a uri fails when the value is missing"
    )
    default: str | int | float | bool | None = Field(
        None, description="Documented default value of the option"
    )
    description: str = Field("", description="Human readable description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that carry separators or surrounding whitespace."""
        if v != v.strip() or ":" in v or "/" in v:
            raise ValueError(f"Invalid placeholder name: {v!r}")
        return v


def canonical_value(value: Any) -> str:
    """Return the canonical text form of a parameter value."""
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
