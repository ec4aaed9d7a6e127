"""
Registry of endpoint uri factories keyed by scheme.

One generic ``TemplateUriFactory`` serves every catalog entry; custom
factories implementing ``EndpointUriFactoryPort`` can be registered next to
them and take precedence over earlier registrations for the same scheme.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ..config.models import UriCraftConfig
from ..domain.models import UnknownSchemeError
from ..ports.uri_factory_port import EndpointUriFactoryPort
from ..uri.assembler import UriAssembler
from ..uri.template import UriTemplate
from .endpoint_catalog import EndpointCatalogData, load_catalog

logger = logging.getLogger(__name__)


class TemplateUriFactory:
    """Builds uris for a fixed set of schemes from one template."""

    def __init__(
        self,
        template: UriTemplate,
        schemes: Iterable[str] | None = None,
        assembler: UriAssembler | None = None,
    ) -> None:
        self.template = template
        self.schemes = tuple(s.lower() for s in (schemes or [template.scheme]))
        self.assembler = assembler or UriAssembler()

    def is_enabled(self, scheme: str) -> bool:
        return scheme.lower() in self.schemes

    def build_uri(self, scheme: str, parameters: Mapping[str, Any]) -> str:
        return self.assembler.build(scheme, self.template, parameters)

    def __repr__(self) -> str:
        return f"TemplateUriFactory(syntax={self.template.syntax!r}, schemes={self.schemes!r})"


class EndpointRegistry:
    """Resolves a scheme to the factory that builds its endpoint uris."""

    def __init__(self) -> None:
        self._factories: list[EndpointUriFactoryPort] = []
        self._schemes: dict[str, EndpointUriFactoryPort] = {}

    def register(
        self, factory: EndpointUriFactoryPort, schemes: Iterable[str] | None = None
    ) -> EndpointUriFactoryPort:
        """
        Register a factory.

        Args:
            factory: Factory to register
            schemes: Schemes to index the factory under. Template factories
                provide their own; other factories are found by asking
                ``is_enabled`` on lookup.

        Returns:
            The registered factory
        """
        if not isinstance(factory, EndpointUriFactoryPort):
            raise TypeError(
                f"{type(factory).__name__} does not implement is_enabled/build_uri"
            )
        if schemes is None and isinstance(factory, TemplateUriFactory):
            schemes = factory.schemes

        self._factories.append(factory)
        for scheme in schemes or []:
            key = scheme.lower()
            if key in self._schemes:
                logger.debug(f"Overriding endpoint uri factory for scheme {key}")
            self._schemes[key] = factory
        return factory

    def register_template(
        self,
        template: UriTemplate,
        schemes: Iterable[str] | None = None,
        assembler: UriAssembler | None = None,
    ) -> TemplateUriFactory:
        factory = TemplateUriFactory(template, schemes, assembler)
        self.register(factory)
        return factory

    def find_factory(self, scheme: str) -> EndpointUriFactoryPort | None:
        """Return the most recently registered factory enabled for ``scheme``."""
        key = scheme.lower()
        for factory in reversed(self._factories):
            if factory is self._schemes.get(key) or factory.is_enabled(scheme):
                return factory
        return None

    def get_factory(self, scheme: str) -> EndpointUriFactoryPort:
        factory = self.find_factory(scheme)
        if factory is None:
            raise UnknownSchemeError(scheme, self.schemes())
        return factory

    def build_uri(self, scheme: str, parameters: Mapping[str, Any]) -> str:
        return self.get_factory(scheme).build_uri(scheme, parameters)

    def schemes(self) -> list[str]:
        return sorted(self._schemes)

    def __contains__(self, scheme: object) -> bool:
        return isinstance(scheme, str) and self.find_factory(scheme) is not None

    def __len__(self) -> int:
        return len(self._factories)

    @classmethod
    def from_catalog(
        cls, data: EndpointCatalogData, assembler: UriAssembler | None = None
    ) -> EndpointRegistry:
        """
        Build a registry with one template factory per catalog entry.

        Raises:
            TemplateError: If any entry carries a malformed syntax
        """
        registry = cls()
        registry.add_catalog(data, assembler)
        return registry

    def add_catalog(
        self, data: EndpointCatalogData, assembler: UriAssembler | None = None
    ) -> None:
        for definition in data.endpoints:
            self.register_template(
                definition.to_template(), definition.schemes, assembler
            )


def configured_catalogs(
    config: UriCraftConfig | None = None,
) -> list[tuple[str, EndpointCatalogData]]:
    """Load the catalogs enabled by ``config`` as (source, data) pairs, in order."""
    config = config or UriCraftConfig()
    sources: list[Path | None] = []
    if config.catalog.include_builtin:
        sources.append(None)
    sources.extend(Path(p) for p in config.catalog.extra_files)

    return [(str(path) if path else "builtin", load_catalog(path)) for path in sources]


def create_registry(config: UriCraftConfig | None = None) -> EndpointRegistry:
    """Create a registry from the built-in and configured catalogs."""
    config = config or UriCraftConfig()
    assembler = UriAssembler(space_encoding=config.query.space_encoding)

    registry = EndpointRegistry()
    for source, data in configured_catalogs(config):
        registry.add_catalog(data, assembler)
        logger.debug(f"Registered endpoint catalog {source}")

    logger.debug(f"Endpoint registry ready with {len(registry.schemes())} schemes")
    return registry
