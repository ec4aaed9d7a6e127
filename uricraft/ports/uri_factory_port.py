from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

"""Port for components that build endpoint uris for one or more schemes."""


@runtime_checkable
class EndpointUriFactoryPort(Protocol):
    """Port interface for endpoint uri factories."""

    @abstractmethod
    def is_enabled(self, scheme: str) -> bool:
        """Whether this factory builds uris for ``scheme``."""
        ...

    @abstractmethod
    def build_uri(self, scheme: str, parameters: Mapping[str, Any]) -> str:
        """Assemble the endpoint uri for ``scheme`` from ``parameters``."""
        ...
