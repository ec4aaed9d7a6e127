"""
Port interfaces for the uricraft system.

This module contains the interface definitions using Python Protocols
to define contracts between the registry and uri factories.
"""

from .uri_factory_port import EndpointUriFactoryPort

__all__ = [
    "EndpointUriFactoryPort",
]
