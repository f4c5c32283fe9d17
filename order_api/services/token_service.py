# order_api/services/token_service.py
import time
from uuid import UUID

from jose import jwt, JWTError

from order_api.domain.errors import TokenError
from order_api.utils.settings import JWT_SECRET, JWT_ALGORITHM, TOKEN_TTL_SECONDS


class TokenService:
    """
    Wystawianie i weryfikacja podpisanych tokenów JWT.
    Bezstanowy - nie zagląda do bazy.
    """

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        ttl_seconds: int | None = None,
    ):
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else TOKEN_TTL_SECONDS

    def issue(self, user_id: UUID, now: int | None = None) -> str:
        iat = int(now if now is not None else time.time())
        payload = {
            "user_id": str(user_id),
            "iat": iat,
            "exp": iat + self.ttl_seconds,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> UUID:
        # jose sprawdza podpis i exp (ExpiredSignatureError dziedziczy po JWTError)
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True},
            )
        except JWTError as e:
            raise TokenError(str(e)) from e

        raw_user_id = payload.get("user_id")
        if not isinstance(raw_user_id, str):
            raise TokenError("Token payload has no user_id")
        try:
            return UUID(raw_user_id)
        except ValueError as e:
            raise TokenError("Token user_id is not a UUID") from e
