"""
Network-backed repository transport.
"""

from repotransport.connector.protocol import ResourceConnector
from repotransport.services import (
    BuildCommencedTimeProvider,
    CacheLockingManager,
    CachedExternalResourceIndex,
    ProgressLoggerFactory,
    TemporaryFileProvider,
)


class ResourceConnectorRepositoryTransport:
    """Transport pairing a resource connector with the shared cache services.

    The services are borrowed from the transport factory and shared with
    every other transport it built.
    """

    def __init__(
        self,
        name: str,
        progress_logger_factory: ProgressLoggerFactory,
        temporary_file_provider: TemporaryFileProvider,
        cached_external_resource_index: CachedExternalResourceIndex,
        time_provider: BuildCommencedTimeProvider,
        cache_locking_manager: CacheLockingManager,
        connector: ResourceConnector,
    ):
        self._name = name
        self.progress_logger_factory = progress_logger_factory
        self.temporary_file_provider = temporary_file_provider
        self.cached_external_resource_index = cached_external_resource_index
        self.time_provider = time_provider
        self.cache_locking_manager = cache_locking_manager
        self._connector = connector

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_local(self) -> bool:
        return False

    @property
    def connector(self) -> ResourceConnector:
        return self._connector

    def resource_cache_key(self, uri: str) -> str:
        """Key under which a resource of this repository is cached."""
        return f"{self._name}:{uri}"

    def __repr__(self) -> str:
        return (
            f"ResourceConnectorRepositoryTransport(name={self._name!r}, "
            f"connector={type(self._connector).__name__})"
        )
