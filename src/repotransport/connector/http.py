"""
HTTP(S) connector factory.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from repotransport.connector.protocol import ResourceConnectorSpecification
from repotransport.credentials import ResourcePasswordCredentials

HTTP_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class HttpResourceConnector:
    """Connector for repositories served over HTTP or HTTPS."""

    credentials: Optional[ResourcePasswordCredentials] = None

    @property
    def scheme_family(self) -> frozenset:
        return HTTP_SCHEMES

    @property
    def auth(self) -> Optional[Tuple[str, str]]:
        """Basic auth pair for an HTTP client, or None for anonymous access."""
        if self.credentials is None or self.credentials.username is None:
            return None
        return (self.credentials.username, self.credentials.password or "")


class HttpConnectorFactory:
    """Builds connectors for ``http`` and ``https`` repositories."""

    def supported_protocols(self) -> frozenset:
        return HTTP_SCHEMES

    def create_resource_connector(
        self, spec: ResourceConnectorSpecification
    ) -> HttpResourceConnector:
        return HttpResourceConnector(spec.get_credentials(ResourcePasswordCredentials))
