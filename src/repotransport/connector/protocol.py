"""
Protocols for resource connectors and the factories that build them.
"""

from typing import Optional, Protocol, Type, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ResourceConnector(Protocol):
    """Performs the network operations of one protocol family."""

    @property
    def scheme_family(self) -> frozenset:
        """The schemes this connector was built to serve."""
        ...


class ResourceConnectorSpecification(Protocol):
    """Describes how a connector obtains credentials while it is being built."""

    def get_credentials(self, type_: Type[T]) -> Optional[T]:
        """
        Get the repository credentials as the requested type.

        Args:
            type_: The credentials type the connector understands.

        Returns:
            The credentials, or None if the repository declared none.
        """
        ...


@runtime_checkable
class ConnectorFactory(Protocol):
    """Builds resource connectors for a fixed set of URL schemes."""

    def supported_protocols(self) -> frozenset:
        """
        Get the URL schemes this factory serves.

        Returns:
            The supported schemes.
        """
        ...

    def create_resource_connector(
        self, spec: ResourceConnectorSpecification
    ) -> ResourceConnector:
        """
        Build a connector.

        Args:
            spec: The connection specification for the repository.

        Returns:
            A new resource connector.
        """
        ...
