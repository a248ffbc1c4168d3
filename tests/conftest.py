"""
Pytest configuration for repotransport tests.

This module contains fixtures shared across the test suite.
"""

from unittest.mock import MagicMock

import pytest

from repotransport.credentials import ResourcePasswordCredentials
from repotransport.services import (
    BuildCommencedTimeProvider,
    DefaultCacheLockingManager,
    DefaultTemporaryFileProvider,
    InMemoryCachedExternalResourceIndex,
    LoggingProgressLoggerFactory,
)
from repotransport.transport.factory import RepositoryTransportFactory


class StubSftpClientFactory:
    """SFTP client factory that records the sessions it was asked to open."""

    def __init__(self):
        self.opened = []

    def create_sftp_client(self, host, port, credentials):
        self.opened.append((host, port, credentials))
        return ("sftp-client", host, port)


class RecordingConnector:
    def __init__(self, factory, credentials):
        self.factory = factory
        self.credentials = credentials

    @property
    def scheme_family(self):
        return self.factory.schemes


class RecordingConnectorFactory:
    """Connector factory that remembers every connector it built."""

    def __init__(self, *schemes, credentials_type=ResourcePasswordCredentials):
        self.schemes = frozenset(schemes)
        self.credentials_type = credentials_type
        self.connectors = []

    def supported_protocols(self):
        return self.schemes

    def create_resource_connector(self, spec):
        connector = RecordingConnector(self, spec.get_credentials(self.credentials_type))
        self.connectors.append(connector)
        return connector


@pytest.fixture
def sftp_client_factory():
    """Fixture providing a recording SFTP client factory."""
    return StubSftpClientFactory()


@pytest.fixture
def shared_services(tmp_path):
    """Fixture providing the five shared transport services."""
    return {
        "progress_logger_factory": LoggingProgressLoggerFactory(),
        "temporary_file_provider": DefaultTemporaryFileProvider(tmp_path),
        "cached_external_resource_index": InMemoryCachedExternalResourceIndex(),
        "time_provider": BuildCommencedTimeProvider(1_700_000_000_000),
        "cache_locking_manager": DefaultCacheLockingManager(),
    }


@pytest.fixture
def transport_factory(shared_services, sftp_client_factory):
    """Fixture providing a transport factory with the built-in connectors."""
    return RepositoryTransportFactory(
        sftp_client_factory=sftp_client_factory, **shared_services
    )


@pytest.fixture
def connector_factory_class():
    """Fixture providing the recording connector factory class."""
    return RecordingConnectorFactory


@pytest.fixture
def mock_telemetry(monkeypatch):
    """Fixture replacing the transport factory's tracer and logger with mocks."""
    mock_tracer = MagicMock()
    mock_span = MagicMock()
    mock_tracer.start_as_current_span.return_value.__enter__.return_value = mock_span

    mock_logger = MagicMock()

    mock_get_telemetry = MagicMock(return_value=(mock_tracer, mock_logger))
    monkeypatch.setattr("repotransport.transport.factory.get_telemetry", mock_get_telemetry)

    return mock_tracer, mock_span, mock_logger
