"""
repotransport: transport selection for dependency repositories.
"""

from repotransport.connector import ConnectorFactory, ConnectorRegistry
from repotransport.credentials import (
    AwsCredentials,
    PasswordCredentials,
    ResourcePasswordCredentials,
)
from repotransport.errors import (
    ConfigurationError,
    CredentialsCastError,
    InvalidCredentialsError,
    MixedSchemeError,
    RegistryFrozenError,
    RepoTransportError,
    UnsupportedProtocolError,
)
from repotransport.transport import (
    FileTransport,
    RepositoryTransport,
    RepositoryTransportFactory,
    ResourceConnectorRepositoryTransport,
)

__version__ = "0.1.0"

__all__ = [
    "AwsCredentials",
    "ConfigurationError",
    "ConnectorFactory",
    "ConnectorRegistry",
    "CredentialsCastError",
    "FileTransport",
    "InvalidCredentialsError",
    "MixedSchemeError",
    "PasswordCredentials",
    "RegistryFrozenError",
    "RepoTransportError",
    "RepositoryTransport",
    "RepositoryTransportFactory",
    "ResourceConnectorRepositoryTransport",
    "ResourcePasswordCredentials",
    "UnsupportedProtocolError",
]
