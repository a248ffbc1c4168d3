"""
Shared services wired into network-backed repository transports.

The transport factory never owns these; it receives them once and hands the
same instances to every transport it builds. Each protocol has a simple
default implementation suitable for a single-process resolution session.
"""

import tempfile
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar

from repotransport.telemetry import LoggingFacade

T = TypeVar("T")


class ProgressLogger(Protocol):
    def started(self, description: str) -> None:
        ...

    def progress(self, status: str) -> None:
        ...

    def completed(self, status: Optional[str] = None) -> None:
        ...


class ProgressLoggerFactory(Protocol):
    def new_operation(self, category: str) -> ProgressLogger:
        ...


class TemporaryFileProvider(Protocol):
    def create_temporary_file(self, prefix: str, suffix: str, *path: str) -> Path:
        ...


class CachedExternalResourceIndex(Protocol):
    def store(self, key: str, entry: Any) -> None:
        ...

    def lookup(self, key: str) -> Optional[Any]:
        ...

    def clear(self, key: str) -> None:
        ...


class CacheLockingManager(Protocol):
    def use_cache(self, operation_name: str, action: Callable[[], T]) -> T:
        ...


class LoggingProgressLogger:
    """Progress logger that reports each step as a structured log event."""

    def __init__(self, category: str, logger: LoggingFacade):
        self.category = category
        self.description: Optional[str] = None
        self._logger = logger

    def started(self, description: str) -> None:
        self.description = description
        self._logger.info("progress.started", category=self.category, description=description)

    def progress(self, status: str) -> None:
        self._logger.debug(
            "progress.update",
            category=self.category,
            description=self.description,
            status=status,
        )

    def completed(self, status: Optional[str] = None) -> None:
        self._logger.info(
            "progress.completed",
            category=self.category,
            description=self.description,
            status=status,
        )


class LoggingProgressLoggerFactory:
    """Creates progress loggers that write through structlog."""

    def __init__(self, name: str = "repotransport.progress"):
        self._logger = LoggingFacade(name)

    def new_operation(self, category: str) -> LoggingProgressLogger:
        return LoggingProgressLogger(category, self._logger)


class DefaultTemporaryFileProvider:
    """Creates temporary files below a base directory."""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path(tempfile.gettempdir())

    def create_temporary_file(self, prefix: str, suffix: str, *path: str) -> Path:
        """
        Create a new empty temporary file.

        Args:
            prefix: File name prefix
            suffix: File name suffix
            *path: Sub-directories of the base directory to create the file in

        Returns:
            The path of the created file
        """
        directory = self.base_dir.joinpath(*path)
        directory.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=directory)
        # mkstemp leaves the descriptor open
        with open(fd, "wb"):
            pass
        return Path(name)


class InMemoryCachedExternalResourceIndex:
    """Cached resource index backed by a dictionary."""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: Dict[str, Any] = {}

    def store(self, key: str, entry: Any) -> None:
        with self._lock:
            self._entries[key] = entry

    def lookup(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(key)

    def clear(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class BuildCommencedTimeProvider:
    """Supplies the time the build started, in milliseconds since the epoch."""

    def __init__(self, commenced_millis: Optional[int] = None):
        if commenced_millis is None:
            commenced_millis = int(time.time() * 1000)
        self._commenced = commenced_millis

    @property
    def current_time(self) -> int:
        return self._commenced


class DefaultCacheLockingManager:
    """Serializes cache access within one process."""

    def __init__(self):
        self._lock = threading.RLock()
        self._logger = LoggingFacade(__name__)

    def use_cache(self, operation_name: str, action: Callable[[], T]) -> T:
        """
        Run ``action`` while holding the cache lock.

        Args:
            operation_name: Name of the operation, for logging
            action: The callable to run

        Returns:
            The result of ``action``
        """
        with self._lock:
            self._logger.debug("cache.locked", operation=operation_name)
            try:
                return action()
            finally:
                self._logger.debug("cache.unlocked", operation=operation_name)
