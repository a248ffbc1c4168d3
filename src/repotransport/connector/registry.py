"""
Registry for connector factories.

Factories are kept in registration order. Lookups scan that order and the
first factory serving every requested scheme wins, so a factory registered
early shadows later ones that claim the same schemes.
"""

import threading
from importlib.metadata import entry_points
from typing import Iterable, List, Optional, Tuple

from repotransport.connector.protocol import ConnectorFactory
from repotransport.errors import RegistryFrozenError
from repotransport.telemetry import LoggingFacade

FILE_SCHEME = "file"

ENTRY_POINT_GROUP = "repotransport.connectors"

_logger = LoggingFacade(__name__)


class ConnectorRegistry:
    """Ordered registry of connector factories."""

    def __init__(self, factories: Iterable[ConnectorFactory] = ()):
        """Initialize a new registry with optional initial factories."""
        self._lock = threading.Lock()
        self._factories: List[ConnectorFactory] = list(factories)
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, factory: ConnectorFactory) -> None:
        """Append a connector factory.

        Args:
            factory: The factory instance. Registering the same factory twice
                keeps both entries.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot register {type(factory).__name__}: connector registry is frozen"
                )
            self._factories.append(factory)
        _logger.debug(
            "registry.registered",
            factory=type(factory).__name__,
            schemes=sorted(factory.supported_protocols()),
        )

    def freeze(self) -> Tuple[ConnectorFactory, ...]:
        """Stop accepting registrations.

        Returns:
            The final snapshot of registered factories.
        """
        with self._lock:
            self._frozen = True
            return tuple(self._factories)

    def snapshot(self) -> Tuple[ConnectorFactory, ...]:
        """Get the registered factories in registration order."""
        with self._lock:
            return tuple(self._factories)

    def known_schemes(self) -> Tuple[str, ...]:
        """Get ``file`` plus every registered scheme, in first-seen order."""
        schemes = {FILE_SCHEME: None}
        for factory in self.snapshot():
            for scheme in sorted(factory.supported_protocols()):
                schemes.setdefault(scheme, None)
        return tuple(schemes)

    def find(self, schemes: Iterable[str]) -> Optional[ConnectorFactory]:
        """Find the first factory supporting every one of ``schemes``.

        Args:
            schemes: The requested schemes.

        Returns:
            The factory, or None if no single factory serves them all.
        """
        requested = frozenset(schemes)
        for factory in self.snapshot():
            if requested <= frozenset(factory.supported_protocols()):
                return factory
        return None

    def load_entry_points(self, group: str = ENTRY_POINT_GROUP) -> List[ConnectorFactory]:
        """Register connector factories advertised by installed plugins.

        Each entry point must resolve to a zero-argument callable returning a
        connector factory. Nothing is registered unless every entry point
        loads.

        Args:
            group: The entry point group to load.

        Returns:
            The factories that were registered, in entry point order.

        Raises:
            TypeError: If an entry point does not produce a connector factory.
        """
        loaded = []
        for entry_point in entry_points(group=group):
            factory = entry_point.load()()
            if not isinstance(factory, ConnectorFactory):
                raise TypeError(
                    f"Entry point '{entry_point.name}' did not produce a connector factory"
                )
            loaded.append(factory)
        for factory in loaded:
            self.register(factory)
        _logger.info("registry.plugins_loaded", group=group, count=len(loaded))
        return loaded

    def __len__(self) -> int:
        return len(self.snapshot())
