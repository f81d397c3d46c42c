"""Unit tests for JWT helpers and JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from discuss.config import AuthSettings
from discuss.domain.service import JWTService
from discuss.util.jwt import JWTError, create_token, verify_token


class TestTokens:
    """Tests for token creation and verification."""

    def test_round_trip_payload(self):
        settings = AuthSettings(jwt_secret="test-secret")
        user_id = str(uuid4())

        payload = verify_token(create_token(user_id, "Ada", settings), settings)

        assert payload.user_id == user_id
        assert payload.display_name == "Ada"

    def test_wrong_secret_is_rejected(self):
        token = create_token(str(uuid4()), None, AuthSettings(jwt_secret="one"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="two"))

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret")
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)


class TestJWTService:
    """Tests for JWTService.get_user_id_from_token."""

    def test_valid_token_yields_user_id(self, jwt_service):
        user_id = uuid4()

        token = jwt_service.create_token(str(user_id))

        assert jwt_service.get_user_id_from_token(token) == user_id

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_non_uuid_subject_is_anonymous(self, jwt_service):
        token = jwt_service.create_token("not-a-uuid")

        assert jwt_service.get_user_id_from_token(token) is None

    def test_token_from_other_secret_is_anonymous(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="someone-else"))

        assert jwt_service.get_user_id_from_token(other.create_token(str(uuid4()))) is None
