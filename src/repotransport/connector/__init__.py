"""
Resource connectors and the registry of factories that build them.
"""

from repotransport.connector.http import HttpConnectorFactory, HttpResourceConnector
from repotransport.connector.protocol import (
    ConnectorFactory,
    ResourceConnector,
    ResourceConnectorSpecification,
)
from repotransport.connector.registry import ConnectorRegistry
from repotransport.connector.s3 import S3ConnectorFactory, S3ResourceConnector
from repotransport.connector.sftp import (
    SftpClientFactory,
    SftpConnectorFactory,
    SftpResourceConnector,
)

__all__ = [
    "ConnectorFactory",
    "ConnectorRegistry",
    "HttpConnectorFactory",
    "HttpResourceConnector",
    "ResourceConnector",
    "ResourceConnectorSpecification",
    "S3ConnectorFactory",
    "S3ResourceConnector",
    "SftpClientFactory",
    "SftpConnectorFactory",
    "SftpResourceConnector",
]
