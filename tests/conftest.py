"""Global fixtures and utilities for the uricraft test suite.

This module provides the sample templates used across test modules and a
helper for writing throwaway endpoint catalogs.
"""

import textwrap
from pathlib import Path

import pytest

from uricraft.adapters.io.enhanced_logging import LoggerManager
from uricraft.catalog import endpoint_catalog
from uricraft.domain.models import PathParameter
from uricraft.uri.template import UriTemplate


# ================================================================================
# Template Fixtures
# ================================================================================

@pytest.fixture
def acme_template():
    """``acme:name:port`` with a mandatory name and an optional port."""
    return UriTemplate.parse(
        "acme:name:port",
        [
            PathParameter(name="name", required=True),
            PathParameter(name="port", default=8080),
        ],
    )


@pytest.fixture
def acme2_template():
    """``acme2:name/path:port`` with only ``name`` mandatory."""
    return UriTemplate.parse(
        "acme2:name/path:port",
        [
            PathParameter(name="name", required=True),
            PathParameter(name="path"),
            PathParameter(name="port", default=8080),
        ],
    )


@pytest.fixture
def jms_template():
    """``jms:destinationType:destinationName`` with a documented default type."""
    return UriTemplate.parse(
        "jms:destinationType:destinationName",
        [
            PathParameter(name="destinationType", default="queue"),
            PathParameter(name="destinationName", required=True),
        ],
    )


# ================================================================================
# Catalog Fixtures
# ================================================================================

@pytest.fixture
def write_catalog(tmp_path):
    """Return a helper writing catalog TOML into a temporary file."""

    def _write(content: str, name: str = "catalog.toml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def custom_catalog(write_catalog):
    """A small catalog overriding ``acme`` and adding ``custom``."""
    return write_catalog(
        """
        [[endpoints]]
        scheme = "custom"
        syntax = "custom:host:port/path"

          [[endpoints.path_parameters]]
          name = "host"
          required = true

        [[endpoints]]
        scheme = "acme"
        syntax = "acme:name"

          [[endpoints.path_parameters]]
          name = "name"
          required = true
        """
    )


@pytest.fixture(autouse=True)
def _isolate_state():
    """Reset catalog cache and logging handlers between tests."""
    yield
    endpoint_catalog.clear_cache()
    LoggerManager.reset()
