from jose import JWTError, jwt

from app.auth.exceptions import UnauthorizedError
from app.config.settings import Settings


class TokenVerifier:
    """Resolves a bearer JWT to the id of the user it was issued for."""

    USER_ID_CLAIMS = ("userId", "sub")

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenVerifier":
        return cls(settings.jwt_secret, settings.jwt_algorithm)

    def verify(self, token: str | None) -> str:
        """Return the user id carried by a valid token.

        Raises:
            UnauthorizedError: if the token is missing, malformed, expired,
                signed with another key, or carries no user id.
        """
        if not token:
            raise UnauthorizedError("Missing or invalid authorization header")
        if not self._secret:
            raise UnauthorizedError("Token verification is not configured")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise UnauthorizedError("Invalid or expired token") from exc

        for claim in self.USER_ID_CLAIMS:
            user_id = payload.get(claim)
            if user_id is not None and str(user_id).strip():
                return str(user_id)
        raise UnauthorizedError("Invalid or expired token")
