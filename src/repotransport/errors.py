"""
Error hierarchy for repotransport.

Every error raised while selecting or assembling a repository transport is
synchronous and indicates misconfiguration rather than a transient failure.
"""

from collections.abc import Iterable


class RepoTransportError(Exception):
    """Base class for all repotransport errors."""


class ConfigurationError(RepoTransportError):
    """Error raised when a repository declaration can not be satisfied."""


class UnsupportedProtocolError(ConfigurationError):
    """Error raised when a requested scheme is not known to any factory."""

    def __init__(self, scheme: str, valid_schemes: Iterable[str]):
        self.scheme = scheme
        self.valid_schemes = tuple(valid_schemes)
        super().__init__(
            f"Not a supported repository protocol '{scheme}': "
            f"valid protocols are [{', '.join(self.valid_schemes)}]"
        )


class MixedSchemeError(ConfigurationError):
    """Error raised when no single connector factory serves every scheme."""

    def __init__(self, schemes: Iterable[str]):
        self.schemes = frozenset(schemes)
        super().__init__(
            "You cannot mix different URL schemes for a single repository. "
            "Please declare separate repositories."
        )


class InvalidCredentialsError(ConfigurationError):
    """Error raised when credentials do not have the shape a connector needs."""

    def __init__(self, required_type: type):
        self.required_type = required_type
        super().__init__(
            f"Credentials must be an instance of: "
            f"{required_type.__module__}.{required_type.__qualname__}"
        )


class CredentialsCastError(RepoTransportError, TypeError):
    """Error raised when credentials can not be passed through as a given type."""

    def __init__(self, credentials: object, requested_type: type):
        self.credentials_type = type(credentials)
        self.requested_type = requested_type
        super().__init__(
            f"Cannot cast {self.credentials_type.__qualname__} "
            f"to {requested_type.__qualname__}"
        )


class RegistryFrozenError(RepoTransportError):
    """Error raised when registering into a frozen connector registry."""
