"""
Integration tests for repotransport.

These tests declare several repositories the way a build would and check the
transports that come back.
"""

import pytest

from repotransport import (
    AwsCredentials,
    ConfigurationError,
    FileTransport,
    PasswordCredentials,
    RegistryFrozenError,
    RepositoryTransportFactory,
    ResourcePasswordCredentials,
)
from repotransport.connector.http import HttpResourceConnector
from repotransport.connector.s3 import S3ResourceConnector
from repotransport.connector.sftp import SftpResourceConnector


class GcsConnector:
    def __init__(self, credentials):
        self.credentials = credentials

    @property
    def scheme_family(self):
        return frozenset({"gcs"})


class GcsConnectorFactory:
    def supported_protocols(self):
        return frozenset({"gcs"})

    def create_resource_connector(self, spec):
        return GcsConnector(spec.get_credentials(ResourcePasswordCredentials))


REPOSITORIES = [
    ("central", {"https"}, None),
    ("local", {"file"}, None),
    ("corp", {"http", "https"}, PasswordCredentials("ci", "token")),
    ("mirror", {"sftp"}, PasswordCredentials("deploy", "key")),
    ("releases", {"s3"}, AwsCredentials("AKIA", "secret")),
    ("cloud", {"gcs"}, PasswordCredentials("svc", "json")),
    ("broken", {"sftp", "https"}, None),
    ("legacy", {"ftp"}, None),
]


def test_resolve_declared_repositories(sftp_client_factory, tmp_path):
    factory = RepositoryTransportFactory.with_default_services(
        sftp_client_factory, config={"temp_dir": str(tmp_path)}
    )
    factory.register(GcsConnectorFactory())
    factory.registry.freeze()

    transports = {}
    failures = {}
    for name, schemes, credentials in REPOSITORIES:
        try:
            transports[name] = factory.create_transport(schemes, name, credentials)
        except ConfigurationError as e:
            failures[name] = type(e).__name__

    assert failures == {
        "broken": "MixedSchemeError",
        "legacy": "UnsupportedProtocolError",
    }
    assert isinstance(transports["central"].connector, HttpResourceConnector)
    assert isinstance(transports["local"], FileTransport)
    assert transports["corp"].connector.auth == ("ci", "token")
    assert isinstance(transports["mirror"].connector, SftpResourceConnector)
    assert isinstance(transports["releases"].connector, S3ResourceConnector)
    assert transports["cloud"].connector.credentials == ResourcePasswordCredentials("svc", "json")

    network = [t for t in transports.values() if not t.is_local]
    assert len({id(t.cached_external_resource_index) for t in network}) == 1


def test_plugin_registration_after_freeze_fails(sftp_client_factory):
    factory = RepositoryTransportFactory.with_default_services(
        sftp_client_factory, config={"freeze_registry": "1"}
    )
    with pytest.raises(RegistryFrozenError, match="frozen"):
        factory.register(GcsConnectorFactory())
