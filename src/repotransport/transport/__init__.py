"""
Repository transports and the factory that selects and assembles them.
"""

from repotransport.transport.factory import (
    DefaultResourceConnectorSpecification,
    RepositoryTransportFactory,
)
from repotransport.transport.file import FileResourceConnector, FileTransport
from repotransport.transport.protocol import RepositoryTransport
from repotransport.transport.resource import ResourceConnectorRepositoryTransport

__all__ = [
    "DefaultResourceConnectorSpecification",
    "FileResourceConnector",
    "FileTransport",
    "RepositoryTransport",
    "RepositoryTransportFactory",
    "ResourceConnectorRepositoryTransport",
]
