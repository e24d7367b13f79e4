"""Bearer-token authenticator backed by HS256 JWTs.

Tokens are minted by the external identity service with a shared secret read
from ``STOREFRONT_ADMIN_JWT_SECRET``. Without that secret every token is
refused.
"""

import os

import structlog
from jose import JWTError, jwt

from storefront.admin.auth.port import AdminAuthenticator, AdminPrincipal
from storefront.shared.errors import AuthError

logger = structlog.get_logger(__name__)

SECRET_ENV = "STOREFRONT_ADMIN_JWT_SECRET"
ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


class JWTAuthenticator(AdminAuthenticator):
    def __init__(self, secret: str | None = None) -> None:
        self._secret = secret

    @property
    def secret(self) -> str | None:
        return self._secret or os.getenv(SECRET_ENV) or None

    def authenticate(self, token: str | None) -> AdminPrincipal:
        if not token:
            raise AuthError()

        secret = self.secret
        if not secret:
            logger.warning("Admin call refused: no token secret configured", env_var=SECRET_ENV)
            raise AuthError("Administrator authentication is not configured")

        try:
            claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.info("Admin token rejected", reason=str(exc))
            raise AuthError("Invalid or expired administrator token") from exc

        if claims.get("role") != ADMIN_ROLE:
            raise AuthError("Token does not grant administrator access")

        username = claims.get("sub") or claims.get("username")
        if not username:
            raise AuthError("Token does not identify an administrator")

        return AdminPrincipal(username=str(username))
