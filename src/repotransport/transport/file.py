"""
Local filesystem transport.

``file`` repositories bypass the connector registry entirely: they need no
credentials and none of the shared caching services.
"""

from pathlib import Path
from typing import BinaryIO, List, Union
from urllib.parse import unquote, urlparse

FILE_SCHEMES = frozenset({"file"})

PathLike = Union[str, Path]


def _to_path(location: PathLike) -> Path:
    if isinstance(location, str) and location.startswith("file:"):
        return Path(unquote(urlparse(location).path))
    return Path(location)


class FileResourceConnector:
    """Reads repository resources straight from the local filesystem."""

    @property
    def scheme_family(self) -> frozenset:
        return FILE_SCHEMES

    def resource_exists(self, location: PathLike) -> bool:
        return _to_path(location).is_file()

    def open_resource(self, location: PathLike) -> BinaryIO:
        """Open a resource for reading.

        Args:
            location: A filesystem path or ``file:`` URI.

        Raises:
            FileNotFoundError: If the resource does not exist.
        """
        return _to_path(location).open("rb")

    def list_resources(self, location: PathLike) -> List[str]:
        """List the entry names of a directory, or an empty list if it is missing."""
        path = _to_path(location)
        if not path.is_dir():
            return []
        return sorted(child.name for child in path.iterdir())


class FileTransport:
    """Transport for repositories on the local filesystem."""

    def __init__(self, name: str):
        self._name = name
        self._connector = FileResourceConnector()

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_local(self) -> bool:
        return True

    @property
    def connector(self) -> FileResourceConnector:
        return self._connector

    def __repr__(self) -> str:
        return f"FileTransport(name={self._name!r})"
