"""
S3 connector factory.

S3 repositories take the declared ``AwsCredentials`` as they are, so this
factory exercises the pass-through path of credential adaptation.
"""

from dataclasses import dataclass
from typing import Optional

from repotransport.connector.protocol import ResourceConnectorSpecification
from repotransport.credentials import AwsCredentials

S3_SCHEMES = frozenset({"s3"})


@dataclass(frozen=True)
class S3ResourceConnector:
    """Connector for repositories stored in S3 buckets."""

    credentials: Optional[AwsCredentials] = None

    @property
    def scheme_family(self) -> frozenset:
        return S3_SCHEMES


class S3ConnectorFactory:
    """Builds connectors for ``s3`` repositories."""

    def supported_protocols(self) -> frozenset:
        return S3_SCHEMES

    def create_resource_connector(
        self, spec: ResourceConnectorSpecification
    ) -> S3ResourceConnector:
        return S3ResourceConnector(spec.get_credentials(AwsCredentials))
