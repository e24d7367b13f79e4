"""In-memory authenticator for development and tests.

Holds an explicit token → username table supplied by the caller. There are
no built-in tokens.
"""

from storefront.admin.auth.port import AdminAuthenticator, AdminPrincipal
from storefront.shared.errors import AuthError


class FakeAuthenticator(AdminAuthenticator):
    def __init__(self, tokens: dict[str, str] | None = None) -> None:
        self.tokens: dict[str, str] = dict(tokens or {})
        self.calls: list[str | None] = []

    def grant(self, token: str, username: str) -> None:
        self.tokens[token] = username

    def authenticate(self, token: str | None) -> AdminPrincipal:
        self.calls.append(token)
        if not token or token not in self.tokens:
            raise AuthError()
        return AdminPrincipal(username=self.tokens[token])
