"""Admin authenticator factory.

Provides get_authenticator() / set_authenticator() to swap implementations:
- JWTAuthenticator, verifying tokens against STOREFRONT_ADMIN_JWT_SECRET
- FakeAuthenticator for tests
"""

from storefront.admin.auth.jwt_adapter import JWTAuthenticator
from storefront.admin.auth.port import AdminAuthenticator

_current_authenticator: AdminAuthenticator | None = None


def get_authenticator() -> AdminAuthenticator:
    """Return the current authenticator. Defaults to JWTAuthenticator."""
    global _current_authenticator
    if _current_authenticator is None:
        _current_authenticator = JWTAuthenticator()
    return _current_authenticator


def set_authenticator(authenticator: AdminAuthenticator) -> None:
    global _current_authenticator
    _current_authenticator = authenticator


def reset_authenticator() -> None:
    global _current_authenticator
    _current_authenticator = None
