"""
Tests for bcrypt password hashing.
"""

import pytest

from auth.password import PasswordHasher, hash_password, verify_password


class TestPasswordHasher:
    def test_hash_verifies(self, hasher):
        digest = hasher.hash("Passw0rd!")
        assert digest != "Passw0rd!"
        assert hasher.verify("Passw0rd!", digest)

    def test_wrong_password_rejected(self, hasher):
        digest = hasher.hash("Passw0rd!")
        assert not hasher.verify("passw0rd!", digest)

    def test_hash_is_salted(self, hasher):
        first = hasher.hash("same-input")
        second = hasher.hash("same-input")
        assert first != second
        assert hasher.verify("same-input", first)
        assert hasher.verify("same-input", second)

    def test_work_factor_embedded(self):
        digest = PasswordHasher(rounds=5).hash("x" * 10)
        assert digest.startswith("$2b$05$")

    def test_malformed_digest_returns_false(self, hasher):
        assert hasher.verify("anything", "not-a-bcrypt-hash") is False
        assert hasher.verify("anything", "") is False

    @pytest.mark.asyncio
    async def test_async_variants(self, hasher):
        digest = await hasher.hash_async("Passw0rd!")
        assert await hasher.verify_async("Passw0rd!", digest)
        assert not await hasher.verify_async("nope", digest)

    def test_module_helpers(self):
        digest = hash_password("helper-pass1!")
        assert verify_password("helper-pass1!", digest)
        assert not verify_password("other", digest)
