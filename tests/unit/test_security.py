"""Unit tests for the bcrypt hasher and the JWT token service."""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus
from bachelor_point.domain.exceptions import InvalidCredentialsError
from bachelor_point.infrastructure.security.jwt_tokens import JwtTokenService
from bachelor_point.infrastructure.security.password_hasher import BcryptPasswordHasher

SECRET = "unit-test-secret-key-of-sufficient-length"


class TestBcryptPasswordHasher:
    @pytest.mark.asyncio
    async def test_hash_verifies_and_is_salted(self) -> None:
        hasher = BcryptPasswordHasher(rounds=4)

        first = await hasher.hash("s3cret-pass")
        second = await hasher.hash("s3cret-pass")

        assert first != "s3cret-pass"
        assert first != second
        assert await hasher.verify("s3cret-pass", first)
        assert not await hasher.verify("wrong-pass", first)

    @pytest.mark.asyncio
    async def test_non_bcrypt_hash_does_not_verify(self) -> None:
        assert not await BcryptPasswordHasher(rounds=4).verify("pw", "plain-text")


class TestJwtTokenService:
    def test_round_trip_yields_principal(self, token_service: JwtTokenService, make_account) -> None:  # type: ignore[no-untyped-def]
        account = make_account(role=AccountRole.ADMIN, status=AccountStatus.PENDING)

        principal = token_service.verify(token_service.issue(account))

        assert principal.student_id == account.student_id
        assert principal.email == account.email
        assert principal.role == AccountRole.ADMIN
        assert principal.status == AccountStatus.PENDING

    def test_token_carries_expiry(self, token_service: JwtTokenService, make_account) -> None:  # type: ignore[no-untyped-def]
        claims = jwt.decode(token_service.issue(make_account()), SECRET, algorithms=["HS256"])
        assert claims["exp"] > claims["iat"]

    def test_zero_minutes_issues_token_without_expiry(self, make_account) -> None:  # type: ignore[no-untyped-def]
        service = JwtTokenService(secret_key=SECRET, expires_minutes=0)
        token = service.issue(make_account())

        assert "exp" not in jwt.decode(token, SECRET, algorithms=["HS256"])
        assert service.verify(token).student_id == "S1001"

    def test_expired_token_is_rejected(self, token_service: JwtTokenService) -> None:
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {
                "sub": "S1001",
                "email": "rahim@example.edu",
                "role": "user",
                "status": "approved",
                "iat": issued,
                "exp": issued + timedelta(minutes=5),
            },
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidCredentialsError, match="expired"):
            token_service.verify(token)

    def test_foreign_signature_is_rejected(self, token_service: JwtTokenService, make_account) -> None:  # type: ignore[no-untyped-def]
        other = JwtTokenService(secret_key="another-secret-key-of-sufficient-length")
        with pytest.raises(InvalidCredentialsError, match="Invalid token"):
            token_service.verify(other.issue(make_account()))

    def test_garbage_is_rejected(self, token_service: JwtTokenService) -> None:
        with pytest.raises(InvalidCredentialsError):
            token_service.verify("not-a-jwt")

    def test_unknown_role_claim_is_rejected(self, token_service: JwtTokenService) -> None:
        token = jwt.encode(
            {
                "sub": "S1001",
                "email": "rahim@example.edu",
                "role": "superuser",
                "status": "approved",
                "iat": datetime.now(timezone.utc),
            },
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidCredentialsError, match="claims"):
            token_service.verify(token)
