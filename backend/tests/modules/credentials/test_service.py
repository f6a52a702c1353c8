"""Tests for temporary credentials and password changes."""

import pytest
from datetime import timedelta
from unittest.mock import patch

from modules.credentials.service import (
    DEFAULT_TTL,
    CredentialService,
    get_credential_service,
)


class TestTemporaryCredential:
    @pytest.mark.asyncio
    async def test_issue_then_verify(self, account_service, credential_service):
        account = await account_service.create_account("a@example.com", "primary", "user")

        await credential_service.issue_temporary_credential(account.id, "abc123")

        assert await credential_service.verify_temporary_credential(account.id, "abc123") is True
        assert await credential_service.verify_temporary_credential(account.id, "wrong") is False

    @pytest.mark.asyncio
    async def test_verify_is_repeatable(self, account_service, credential_service):
        account = await account_service.create_account("a@example.com", "primary", "user")
        await credential_service.issue_temporary_credential(account.id, "abc123")

        results = [
            await credential_service.verify_temporary_credential(account.id, "abc123")
            for _ in range(3)
        ]

        assert results == [True, True, True]

    @pytest.mark.asyncio
    async def test_expiry(self, account_service, credential_service, clock):
        account = await account_service.create_account("a@example.com", "primary", "user")
        await credential_service.issue_temporary_credential(account.id, "abc123")

        clock.advance(DEFAULT_TTL - timedelta(seconds=1))
        assert await credential_service.verify_temporary_credential(account.id, "abc123") is True

        clock.advance(timedelta(seconds=2))
        assert await credential_service.verify_temporary_credential(account.id, "abc123") is False

    @pytest.mark.asyncio
    async def test_expires_exactly_at_ttl(self, account_service, credential_service, clock):
        account = await account_service.create_account("a@example.com", "primary", "user")
        await credential_service.issue_temporary_credential(account.id, "abc123")

        clock.advance(DEFAULT_TTL)

        assert await credential_service.verify_temporary_credential(account.id, "abc123") is False

    @pytest.mark.asyncio
    async def test_stored_expiry(self, account_service, credential_service, account_store, clock):
        account = await account_service.create_account("a@example.com", "primary", "user")

        await credential_service.issue_temporary_credential(account.id, "abc123")

        row = account_store.rows[account.id]
        assert row["temp_password"] != "abc123"
        assert row["temp_password_expire_time"] == (clock.now + DEFAULT_TTL).isoformat()

    @pytest.mark.asyncio
    async def test_reissue_replaces_previous(self, account_service, credential_service):
        account = await account_service.create_account("a@example.com", "primary", "user")

        await credential_service.issue_temporary_credential(account.id, "first")
        await credential_service.issue_temporary_credential(account.id, "second")

        assert await credential_service.verify_temporary_credential(account.id, "first") is False
        assert await credential_service.verify_temporary_credential(account.id, "second") is True

    @pytest.mark.asyncio
    async def test_none_issued(self, account_service, credential_service):
        account = await account_service.create_account("a@example.com", "primary", "user")

        assert await credential_service.verify_temporary_credential(account.id, "abc123") is False

    @pytest.mark.asyncio
    async def test_missing_account(self, credential_service):
        assert await credential_service.verify_temporary_credential("999", "abc123") is False

    @pytest.mark.asyncio
    async def test_custom_ttl(self, account_service, account_store, hasher, clock):
        service = CredentialService(
            store=account_store, hasher=hasher, ttl=timedelta(minutes=1), clock=clock
        )
        account = await account_service.create_account("a@example.com", "primary", "user")
        await service.issue_temporary_credential(account.id, "abc123")

        clock.advance(timedelta(minutes=2))

        assert service.ttl == timedelta(minutes=1)
        assert await service.verify_temporary_credential(account.id, "abc123") is False

    @pytest.mark.asyncio
    async def test_generate(self, account_service, credential_service):
        account = await account_service.create_account("a@example.com", "primary", "user")

        plaintext = await credential_service.generate_temporary_credential(account.id)
        other = await credential_service.generate_temporary_credential(account.id)

        assert plaintext != other
        assert len(other) >= 12
        assert await credential_service.verify_temporary_credential(account.id, other) is True

    @pytest.mark.asyncio
    async def test_temporary_credential_does_not_authenticate(
        self, account_service, credential_service
    ):
        from modules.accounts.exceptions import InvalidCredentialError

        account = await account_service.create_account("a@example.com", "primary", "user")
        await credential_service.issue_temporary_credential(account.id, "abc123")

        with pytest.raises(InvalidCredentialError):
            await account_service.authenticate("a@example.com", "abc123")


class TestChangePassword:
    @pytest.mark.asyncio
    async def test_change_password_then_authenticate(self, account_service, credential_service):
        from modules.accounts.exceptions import InvalidCredentialError

        account = await account_service.create_account("a@example.com", "old-secret", "user")

        await credential_service.change_password(account.id, "new-secret")

        assert (await account_service.authenticate("a@example.com", "new-secret")).id == account.id
        with pytest.raises(InvalidCredentialError):
            await account_service.authenticate("a@example.com", "old-secret")

    @pytest.mark.asyncio
    async def test_change_password_keeps_temporary_credential(
        self, account_service, credential_service
    ):
        account = await account_service.create_account("a@example.com", "old-secret", "user")
        await credential_service.issue_temporary_credential(account.id, "abc123")

        await credential_service.change_password(account.id, "new-secret")

        assert await credential_service.verify_temporary_credential(account.id, "abc123") is True

    @pytest.mark.asyncio
    async def test_change_password_enables_sso_account(self, account_service, credential_service):
        account = await account_service.create_account("sso@example.com", None, "user")

        await credential_service.change_password(account.id, "now-has-one")

        assert (await account_service.authenticate("sso@example.com", "now-has-one")).id == account.id


class TestGetCredentialService:
    @patch("modules.credentials.service.get_password_hasher")
    @patch("modules.credentials.service.get_account_repository")
    def test_singleton_uses_configured_ttl(self, mock_repo, mock_hasher):
        service = get_credential_service()

        assert service is get_credential_service()
        assert service.ttl == timedelta(minutes=10)
