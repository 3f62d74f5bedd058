"""Static credential check guarding the upload page."""

from translate_ai.config import AuthConfig
from translate_ai.domain.models import AuthResult, Credentials
from translate_ai.exceptions import AuthComparisonError
from translate_ai.logging import setup_logging

logger = setup_logging()


class AccessGate:
    """Compares submitted credentials with the configured reference pair.

    Plain, case-sensitive equality. Nothing is hashed, stored or rate limited.
    """

    def __init__(self, config: AuthConfig):
        self._config = config

    def authenticate(self, name: str, password: str) -> AuthResult:
        credentials = Credentials(name=name, password=password)
        try:
            matches = self._compare(credentials)
        except AuthComparisonError as e:
            logger.error("Credential comparison failed", extra={"reason": e.reason})
            return AuthResult.error(e.reason)

        if not matches:
            logger.info("Access denied", extra={"user_name": credentials.name})
            return AuthResult.deny()

        logger.info("Access granted", extra={"user_name": credentials.name})
        return AuthResult.allow()

    def _compare(self, credentials: Credentials) -> bool:
        if self._config.user_name is None or self._config.user_password is None:
            raise AuthComparisonError("USER_NAME and USER_PASSWORD must be configured")
        return (
            credentials.name == self._config.user_name
            and credentials.password == self._config.user_password
        )
