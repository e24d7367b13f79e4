"""Admin authenticator port (abstract interface).

Credential issuance lives outside the storefront. The core only needs to
turn a presented bearer token into an ``AdminPrincipal`` or refuse it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AdminPrincipal:
    """An authenticated administrator."""

    username: str


class AdminAuthenticator(ABC):
    """Abstract admin authenticator interface."""

    @abstractmethod
    def authenticate(self, token: str | None) -> AdminPrincipal:
        """Return the principal for ``token`` or raise ``AuthError``."""
        ...
