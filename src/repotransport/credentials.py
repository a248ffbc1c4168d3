"""
Repository credentials and their adaptation for connectors.

Repository declarations carry one of a closed set of credential shapes.
Connectors ask for credentials by type: asking for
``ResourcePasswordCredentials`` converts declared ``PasswordCredentials``
into an immutable copy, any other type is handed over unchanged. Either way
the result must be an instance of the requested type.
"""

from dataclasses import dataclass
from typing import Optional, Type, TypeVar, Union

from repotransport.errors import CredentialsCastError, InvalidCredentialsError

T = TypeVar("T")


@dataclass
class PasswordCredentials:
    """Username and password declared for a repository."""

    username: Optional[str] = None
    password: Optional[str] = None


@dataclass
class AwsCredentials:
    """Access key pair declared for an S3 repository."""

    access_key: Optional[str] = None
    secret_key: Optional[str] = None


Credentials = Union[PasswordCredentials, AwsCredentials]


@dataclass(frozen=True)
class ResourcePasswordCredentials:
    """Username and password as handed to a resource connector."""

    username: Optional[str]
    password: Optional[str]

    def __repr__(self) -> str:
        return f"ResourcePasswordCredentials(username={self.username!r}, password='***')"


def convert_password_credentials(
    credentials: Optional[Credentials],
) -> Optional[ResourcePasswordCredentials]:
    """
    Convert declared credentials into connector password credentials.

    Args:
        credentials: The declared credentials, or None

    Returns:
        A new ResourcePasswordCredentials, or None when no credentials were declared

    Raises:
        InvalidCredentialsError: If the credentials are not PasswordCredentials
    """
    if credentials is None:
        return None
    if not isinstance(credentials, PasswordCredentials):
        raise InvalidCredentialsError(PasswordCredentials)
    return ResourcePasswordCredentials(credentials.username, credentials.password)


def adapt_credentials(credentials: Optional[Credentials], type_: Type[T]) -> Optional[T]:
    """
    Present declared credentials as the type a connector requested.

    Args:
        credentials: The declared credentials, or None
        type_: The credentials type the connector requested

    Returns:
        The credentials as ``type_``, or None when none were declared

    Raises:
        InvalidCredentialsError: If password credentials were requested but
            the declared credentials have another shape
        CredentialsCastError: If the declared credentials are not an instance
            of the requested type
    """
    if issubclass(type_, ResourcePasswordCredentials):
        converted = convert_password_credentials(credentials)
        if converted is not None and not isinstance(converted, type_):
            raise CredentialsCastError(converted, type_)
        return converted
    if credentials is None:
        return None
    if not isinstance(credentials, type_):
        raise CredentialsCastError(credentials, type_)
    return credentials
