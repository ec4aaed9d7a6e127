"""Pydantic models for uricraft configuration."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogConfig(BaseModel):
    """Configuration for the endpoint catalogs loaded into the registry."""

    include_builtin: bool = Field(
        default=True, description="Register the endpoint syntaxes shipped with uricraft"
    )

    extra_files: list[str] = Field(
        default_factory=list,
        description="Additional catalog TOML files; later files override earlier schemes",
    )

    @field_validator("extra_files", mode="before")
    @classmethod
    def validate_extra_files(cls, v: Any) -> Any:
        """Accept a single path where a list is expected (e.g. from env vars)."""
        if isinstance(v, str):
            return [v] if v.strip() else []
        return v


class QueryConfig(BaseModel):
    """Configuration for query string serialization."""

    space_encoding: Literal["percent", "plus"] = Field(
        default="percent",
        description="Encode spaces in query values as '%20' (percent) or '+' (plus)",
    )


class UriCraftConfig(BaseModel):
    """Main configuration model for uricraft."""

    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Endpoint catalog configuration"
    )

    query: QueryConfig = Field(
        default_factory=QueryConfig, description="Query serialization configuration"
    )

    @field_validator("catalog")
    @classmethod
    def validate_catalog_sources(cls, v: Any) -> Any:
        """Ensure at least one catalog source is configured."""
        if not v.include_builtin and not v.extra_files:
            raise ValueError(
                "catalog.extra_files must be set when catalog.include_builtin is false"
            )
        return v

    def get_nested_value(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'query.space_encoding')."""
        keys = key.split(".")
        value = self.model_dump()

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
