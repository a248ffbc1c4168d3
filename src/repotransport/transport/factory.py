"""
Transport factory: selects a connector for a repository's URL schemes and
assembles it into a repository transport.
"""

from typing import Any, Dict, FrozenSet, Iterable, Optional, Type, TypeVar, Union

from repotransport.config import as_bool, get_config
from repotransport.connector.http import HttpConnectorFactory
from repotransport.connector.protocol import ConnectorFactory
from repotransport.connector.registry import FILE_SCHEME, ConnectorRegistry
from repotransport.connector.s3 import S3ConnectorFactory
from repotransport.connector.sftp import SftpClientFactory, SftpConnectorFactory
from repotransport.credentials import Credentials, adapt_credentials
from repotransport.errors import (
    ConfigurationError,
    MixedSchemeError,
    RepoTransportError,
    UnsupportedProtocolError,
)
from repotransport.services import (
    BuildCommencedTimeProvider,
    CacheLockingManager,
    CachedExternalResourceIndex,
    DefaultCacheLockingManager,
    DefaultTemporaryFileProvider,
    InMemoryCachedExternalResourceIndex,
    LoggingProgressLoggerFactory,
    ProgressLoggerFactory,
    TemporaryFileProvider,
)
from repotransport.telemetry import get_telemetry
from repotransport.transport.file import FileTransport
from repotransport.transport.protocol import RepositoryTransport
from repotransport.transport.resource import ResourceConnectorRepositoryTransport

T = TypeVar("T")


class DefaultResourceConnectorSpecification:
    """Connection specification that adapts credentials when a connector asks."""

    def __init__(self, credentials: Optional[Credentials]):
        self._credentials = credentials

    def get_credentials(self, type_: Type[T]) -> Optional[T]:
        return adapt_credentials(self._credentials, type_)


class RepositoryTransportFactory:
    """Creates repository transports from declared URL schemes.

    HTTP, SFTP and S3 connector factories are registered on construction, in
    that order. Further factories are added with ``register``; ``file``
    repositories never go through the registry.
    """

    def __init__(
        self,
        progress_logger_factory: ProgressLoggerFactory,
        temporary_file_provider: TemporaryFileProvider,
        cached_external_resource_index: CachedExternalResourceIndex,
        time_provider: BuildCommencedTimeProvider,
        sftp_client_factory: SftpClientFactory,
        cache_locking_manager: CacheLockingManager,
        config: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the factory.

        Args:
            progress_logger_factory: Shared progress logger factory.
            temporary_file_provider: Shared temporary file provider.
            cached_external_resource_index: Shared cached resource index.
            time_provider: Provider of the build commenced time.
            sftp_client_factory: Opens SFTP sessions for the SFTP connector.
            cache_locking_manager: Serializes access to the shared cache.
            config: Optional settings; ``load_plugins`` registers entry point
                factories after the built-in ones and ``freeze_registry``
                rejects any later registration.
        """
        self.progress_logger_factory = progress_logger_factory
        self.temporary_file_provider = temporary_file_provider
        self.cached_external_resource_index = cached_external_resource_index
        self.time_provider = time_provider
        self.cache_locking_manager = cache_locking_manager
        self._config = config or {}
        self._tracer, self._logger = get_telemetry("repotransport.transport")

        self._registry = ConnectorRegistry()
        self.register(HttpConnectorFactory())
        self.register(SftpConnectorFactory(sftp_client_factory))
        self.register(S3ConnectorFactory())

        if as_bool(get_config("load_plugins", self._config, False)):
            self._registry.load_entry_points()
        if as_bool(get_config("freeze_registry", self._config, False)):
            self._registry.freeze()

    @classmethod
    def with_default_services(
        cls,
        sftp_client_factory: SftpClientFactory,
        config: Optional[Dict[str, Any]] = None,
    ) -> "RepositoryTransportFactory":
        """Create a factory wired to fresh in-process default services.

        Args:
            sftp_client_factory: Opens SFTP sessions for the SFTP connector.
            config: Factory settings; ``temp_dir`` sets the temporary file
                directory.
        """
        temp_dir = get_config("temp_dir", config)
        return cls(
            LoggingProgressLoggerFactory(),
            DefaultTemporaryFileProvider(temp_dir),
            InMemoryCachedExternalResourceIndex(),
            BuildCommencedTimeProvider(),
            sftp_client_factory,
            DefaultCacheLockingManager(),
            config=config,
        )

    @property
    def registry(self) -> ConnectorRegistry:
        return self._registry

    def register(self, factory: ConnectorFactory) -> None:
        """Register a connector factory for additional URL schemes.

        Args:
            factory: The connector factory. It is consulted after every
                factory registered before it.
        """
        self._registry.register(factory)

    def create_transport(
        self,
        schemes: Union[str, Iterable[str]],
        name: str,
        credentials: Optional[Credentials] = None,
    ) -> RepositoryTransport:
        """Create a transport for a repository.

        Args:
            schemes: A single URL scheme, or every scheme the repository uses.
            name: The repository name.
            credentials: The repository credentials, if any.

        Returns:
            A file transport for ``file`` repositories, otherwise a
            network-backed transport built by the owning connector factory.

        Raises:
            ConfigurationError: If no scheme is given.
            UnsupportedProtocolError: If a scheme is not known to any factory.
            MixedSchemeError: If no single factory serves every scheme.
            InvalidCredentialsError: If the credentials do not fit the connector.
            CredentialsCastError: If the connector wants another credentials type.
        """
        scheme_set = _to_scheme_set(schemes)

        with self._tracer.start_as_current_span(
            "repotransport.create_transport",
            {"repository.name": name, "repository.schemes": sorted(scheme_set)},
        ) as span:
            try:
                transport = self._create_transport(scheme_set, name, credentials)
            except RepoTransportError as e:
                span.record_exception(e)
                self._logger.warning(
                    "transport.rejected",
                    repository=name,
                    schemes=sorted(scheme_set),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

        self._logger.info(
            "transport.created",
            repository=name,
            schemes=sorted(scheme_set),
            connector=type(transport.connector).__name__,
        )
        return transport

    def _create_transport(
        self,
        schemes: FrozenSet[str],
        name: str,
        credentials: Optional[Credentials],
    ) -> RepositoryTransport:
        self._validate_schemes(schemes)

        # File resources are handled without a connector factory.
        if schemes <= {FILE_SCHEME}:
            return FileTransport(name)

        factory = self._find_registered_protocol(schemes)
        connector = factory.create_resource_connector(
            DefaultResourceConnectorSpecification(credentials)
        )
        return ResourceConnectorRepositoryTransport(
            name,
            self.progress_logger_factory,
            self.temporary_file_provider,
            self.cached_external_resource_index,
            self.time_provider,
            self.cache_locking_manager,
            connector,
        )

    def _validate_schemes(self, schemes: FrozenSet[str]) -> None:
        valid_schemes = self._registry.known_schemes()
        for scheme in sorted(schemes):
            if scheme not in valid_schemes:
                raise UnsupportedProtocolError(scheme, valid_schemes)

    def _find_registered_protocol(self, schemes: FrozenSet[str]) -> ConnectorFactory:
        factory = self._registry.find(schemes)
        if factory is None:
            raise MixedSchemeError(schemes)
        return factory


def _to_scheme_set(schemes: Union[str, Iterable[str]]) -> FrozenSet[str]:
    if isinstance(schemes, str):
        return frozenset({schemes})
    scheme_set = frozenset(schemes)
    if not scheme_set:
        raise ConfigurationError("At least one URL scheme is required for a repository")
    return scheme_set
