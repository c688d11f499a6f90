# 📄 File: tests/test_security.py
# 🧭 Purpose (Layman Explanation):
# Checks that passwords are stored safely and that login tokens expire and cannot be forged.
# 🧪 Purpose (Technical Summary):
# Unit tests for CredentialService, TokenService and IdentityResolver.
# 🔗 Dependencies:
# pytest, python-jose, devconnect.shared.core.security
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import timedelta

import pytest
from jose import jwt

from devconnect.modules.user_management.domain.services.auth_service import IdentityResolver
from devconnect.shared.core.exceptions import AuthenticationError
from devconnect.shared.core.security import CredentialService, TokenService


class TestCredentialService:
    def test_hash_is_not_plaintext_and_verifies(self):
        credentials = CredentialService(rounds=4)
        hashed = credentials.hash("secret1")

        assert hashed != "secret1"
        assert credentials.verify("secret1", hashed)
        assert not credentials.verify("secret2", hashed)

    def test_same_password_hashes_differently(self):
        credentials = CredentialService(rounds=4)
        assert credentials.hash("secret1") != credentials.hash("secret1")

    def test_corrupted_hash_does_not_verify(self):
        assert CredentialService(rounds=4).verify("secret1", "not-a-bcrypt-hash") is False


class TestTokenService:
    def test_issue_and_decode_round_trip(self):
        tokens = TokenService("k" * 32)
        data = tokens.decode(tokens.issue("64b7f0c2a1b2c3d4e5f60718"))

        assert data.user_id == "64b7f0c2a1b2c3d4e5f60718"
        assert data.expires_at > data.issued_at

    def test_expires_in_matches_configured_lifetime(self):
        assert TokenService("k" * 32, expire_minutes=60).expires_in == 3600

    def test_expired_token_is_rejected(self):
        tokens = TokenService("k" * 32)
        token = tokens.issue("user-1", expires_delta=timedelta(seconds=-5))

        with pytest.raises(AuthenticationError, match="Token expired"):
            tokens.decode(token)

    def test_token_signed_with_other_key_is_rejected(self):
        token = TokenService("other-key").issue("user-1")

        with pytest.raises(AuthenticationError, match="Token is not valid"):
            TokenService("k" * 32).decode(token)

    def test_garbage_token_is_rejected(self):
        with pytest.raises(AuthenticationError, match="Token is not valid"):
            TokenService("k" * 32).decode("not.a.token")

    def test_wrong_token_type_is_rejected(self):
        token = jwt.encode({"sub": "user-1", "type": "refresh"}, "k" * 32, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Token is not valid"):
            TokenService("k" * 32).decode(token)


class TestIdentityResolver:
    def test_missing_token(self):
        resolver = IdentityResolver(TokenService("k" * 32))

        with pytest.raises(AuthenticationError, match="No token, authorization denied"):
            resolver.resolve(None)

    def test_resolves_user_id(self):
        tokens = TokenService("k" * 32)
        assert IdentityResolver(tokens).resolve(tokens.issue("user-1")) == "user-1"
