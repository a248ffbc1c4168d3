"""
Tests for the local filesystem transport.
"""

import pytest

from repotransport.transport.file import FileResourceConnector, FileTransport
from repotransport.transport.protocol import RepositoryTransport


@pytest.fixture
def repo_dir(tmp_path):
    module = tmp_path / "org" / "lib" / "1.0"
    module.mkdir(parents=True)
    (module / "lib-1.0.jar").write_bytes(b"jar")
    (module / "lib-1.0.pom").write_text("<project/>")
    return tmp_path


def test_file_transport_properties():
    transport = FileTransport("local")

    assert transport.name == "local"
    assert transport.is_local
    assert isinstance(transport.connector, FileResourceConnector)
    assert isinstance(transport, RepositoryTransport)
    assert repr(transport) == "FileTransport(name='local')"


def test_open_resource_by_path(repo_dir):
    connector = FileResourceConnector()
    with connector.open_resource(repo_dir / "org/lib/1.0/lib-1.0.jar") as f:
        assert f.read() == b"jar"


def test_open_resource_by_uri(repo_dir):
    connector = FileResourceConnector()
    uri = (repo_dir / "org/lib/1.0/lib-1.0.pom").as_uri()
    assert connector.resource_exists(uri)
    with connector.open_resource(uri) as f:
        assert f.read() == b"<project/>"


def test_missing_resource(repo_dir):
    connector = FileResourceConnector()
    assert not connector.resource_exists(repo_dir / "missing.jar")
    with pytest.raises(FileNotFoundError):
        connector.open_resource(repo_dir / "missing.jar")


def test_list_resources(repo_dir):
    connector = FileResourceConnector()
    assert connector.list_resources(repo_dir / "org/lib/1.0") == ["lib-1.0.jar", "lib-1.0.pom"]
    assert connector.list_resources(repo_dir / "org/other") == []
