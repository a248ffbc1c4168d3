"""
Protocol implemented by every repository transport.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RepositoryTransport(Protocol):
    """Access handle for one declared repository.

    A transport is built once per repository declaration and reused for the
    rest of that repository's resolution session.
    """

    @property
    def name(self) -> str:
        """The name of the repository this transport serves."""
        ...

    @property
    def is_local(self) -> bool:
        """Whether resources are read from the local filesystem."""
        ...

    @property
    def connector(self) -> Any:
        """The resource connector that performs the actual access."""
        ...
