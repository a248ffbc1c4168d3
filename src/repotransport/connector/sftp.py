"""
SFTP connector factory.

Opening SSH sessions is left to an injected ``SftpClientFactory``; the
connector only pairs it with the repository credentials.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from repotransport.connector.protocol import ResourceConnectorSpecification
from repotransport.credentials import ResourcePasswordCredentials

SFTP_SCHEMES = frozenset({"sftp"})


class SftpClientFactory(Protocol):
    """Creates SFTP client sessions."""

    def create_sftp_client(
        self, host: str, port: int, credentials: Optional[ResourcePasswordCredentials]
    ) -> Any:
        ...


@dataclass(frozen=True)
class SftpResourceConnector:
    """Connector for repositories served over SFTP."""

    client_factory: SftpClientFactory
    credentials: Optional[ResourcePasswordCredentials] = None

    @property
    def scheme_family(self) -> frozenset:
        return SFTP_SCHEMES

    def open_client(self, host: str, port: int = 22) -> Any:
        """Open an SFTP session to ``host`` with the repository credentials."""
        return self.client_factory.create_sftp_client(host, port, self.credentials)


class SftpConnectorFactory:
    """Builds connectors for ``sftp`` repositories."""

    def __init__(self, sftp_client_factory: SftpClientFactory):
        self.sftp_client_factory = sftp_client_factory

    def supported_protocols(self) -> frozenset:
        return SFTP_SCHEMES

    def create_resource_connector(
        self, spec: ResourceConnectorSpecification
    ) -> SftpResourceConnector:
        return SftpResourceConnector(
            self.sftp_client_factory,
            spec.get_credentials(ResourcePasswordCredentials),
        )
