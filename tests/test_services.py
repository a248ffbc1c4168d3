"""
Tests for the default shared services.
"""

import threading
from unittest.mock import MagicMock

import pytest

from repotransport.services import (
    BuildCommencedTimeProvider,
    DefaultCacheLockingManager,
    DefaultTemporaryFileProvider,
    InMemoryCachedExternalResourceIndex,
    LoggingProgressLogger,
    LoggingProgressLoggerFactory,
)


def test_progress_logger_events():
    logger = MagicMock()
    progress = LoggingProgressLogger("download", logger)

    progress.started("Download lib-1.0.jar")
    progress.progress("512 KB/1 MB")
    progress.completed()

    logger.info.assert_any_call(
        "progress.started", category="download", description="Download lib-1.0.jar"
    )
    logger.debug.assert_called_once_with(
        "progress.update",
        category="download",
        description="Download lib-1.0.jar",
        status="512 KB/1 MB",
    )
    logger.info.assert_called_with(
        "progress.completed",
        category="download",
        description="Download lib-1.0.jar",
        status=None,
    )


def test_progress_logger_factory():
    progress = LoggingProgressLoggerFactory().new_operation("resolve")
    assert isinstance(progress, LoggingProgressLogger)
    assert progress.category == "resolve"


def test_temporary_file_provider(tmp_path):
    provider = DefaultTemporaryFileProvider(tmp_path)
    path = provider.create_temporary_file("gradle_download", ".bin", "downloads")

    assert path.parent == tmp_path / "downloads"
    assert path.name.startswith("gradle_download")
    assert path.name.endswith(".bin")
    assert path.read_bytes() == b""

    other = provider.create_temporary_file("gradle_download", ".bin", "downloads")
    assert other != path


def test_cached_resource_index():
    index = InMemoryCachedExternalResourceIndex()

    assert index.lookup("central:a.jar") is None
    index.store("central:a.jar", {"size": 3})
    assert index.lookup("central:a.jar") == {"size": 3}
    assert len(index) == 1

    index.clear("central:a.jar")
    index.clear("central:a.jar")
    assert index.lookup("central:a.jar") is None
    assert len(index) == 0


def test_build_commenced_time_provider():
    assert BuildCommencedTimeProvider(42).current_time == 42

    provider = BuildCommencedTimeProvider()
    assert provider.current_time == provider.current_time
    assert provider.current_time > 1_600_000_000_000


def test_cache_locking_manager_returns_result():
    manager = DefaultCacheLockingManager()
    assert manager.use_cache("read", lambda: 7) == 7


def test_cache_locking_manager_is_reentrant():
    manager = DefaultCacheLockingManager()
    assert manager.use_cache("outer", lambda: manager.use_cache("inner", lambda: "ok")) == "ok"


def test_cache_locking_manager_propagates_errors():
    manager = DefaultCacheLockingManager()

    def fail():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        manager.use_cache("write", fail)

    # The lock is released afterwards
    assert manager.use_cache("again", lambda: True)


def test_cache_locking_manager_serializes_threads():
    manager = DefaultCacheLockingManager()
    active = []
    overlaps = []

    def work():
        if active:
            overlaps.append(True)
        active.append(1)
        threading.Event().wait(0.01)
        active.pop()

    threads = [
        threading.Thread(target=manager.use_cache, args=("op", work)) for _ in range(5)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlaps == []
