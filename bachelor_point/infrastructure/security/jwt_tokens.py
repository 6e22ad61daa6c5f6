from datetime import datetime, timedelta, timezone

import jwt

from bachelor_point.application.interfaces.security import TokenService
from bachelor_point.config import settings
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus
from bachelor_point.domain.exceptions import InvalidCredentialsError
from bachelor_point.domain.value_objects.principal import Principal


class JwtTokenService(TokenService):
    """
    HS256 session tokens carrying sub (student id), email, role and status.

    `expires_minutes <= 0` issues tokens without an exp claim.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expires_minutes: int = settings.jwt_expires_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_minutes = expires_minutes

    def issue(self, account: Account) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": account.student_id,
            "email": account.email,
            "role": account.role.value,
            "status": account.status.value,
            "iat": now,
        }
        if self._expires_minutes > 0:
            payload["exp"] = now + timedelta(minutes=self._expires_minutes)
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidCredentialsError("Token has expired.") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidCredentialsError("Invalid token.") from exc

        try:
            return Principal(
                student_id=payload["sub"],
                email=payload["email"],
                role=AccountRole(payload["role"]),
                status=AccountStatus(payload["status"]),
            )
        except (KeyError, ValueError) as exc:
            raise InvalidCredentialsError("Invalid token claims.") from exc
