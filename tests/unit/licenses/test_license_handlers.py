"""
Unit tests for license application handlers.
"""
import uuid

import pytest

from core.domain.exceptions import (
    DecryptionError,
    InvalidLicenseKeyError,
    LicenseNotFoundError,
)
from licenses.application.commands.issue_license import IssueLicenseCommand
from licenses.application.handlers.find_license_by_key_handler import FindLicenseByKeyHandler
from licenses.application.handlers.issue_license_handler import IssueLicenseHandler
from licenses.application.handlers.reveal_license_key_handler import RevealLicenseKeyHandler
from licenses.application.queries.find_license_by_key import FindLicenseByKeyQuery
from licenses.application.queries.reveal_license_key import RevealLicenseKeyQuery
from licenses.domain.license import License


@pytest.mark.asyncio
class TestIssueLicenseHandler:
    """Tests for IssueLicenseHandler."""

    async def test_issue_license_success(self, cipher, memory_license_repository, team_id):
        """Test issuing persists envelope and tag and returns the key once."""
        handler = IssueLicenseHandler(cipher=cipher, license_repository=memory_license_repository)

        result = await handler.handle(IssueLicenseCommand(team_id=team_id))

        stored = memory_license_repository.licenses[result.license.id]
        assert result.license.team_id == team_id
        assert stored.license_key != result.license_key
        assert cipher.decrypt(stored.license_key) == result.license_key
        assert stored.license_key_lookup == cipher.lookup_tag(result.license_key, team_id)

    async def test_issue_license_nothing_saved_on_encryption_failure(
        self, cipher, memory_license_repository, team_id, monkeypatch
    ):
        """Test a failed encryption persists nothing."""
        from core.domain.exceptions import EncryptionError

        def fail(_plaintext):
            raise EncryptionError()

        monkeypatch.setattr(cipher, "encrypt", fail)
        handler = IssueLicenseHandler(cipher=cipher, license_repository=memory_license_repository)

        with pytest.raises(EncryptionError):
            await handler.handle(IssueLicenseCommand(team_id=team_id))
        assert memory_license_repository.licenses == {}

    async def test_issue_license_retries_on_concurrent_conflict(
        self, cipher, memory_license_repository, sample_license, team_id, monkeypatch
    ):
        """Test a key stored by a concurrent issue between check and save is regenerated."""
        from licenses.domain import services

        await memory_license_repository.save(sample_license)
        keys = iter(["ABCDE-12345-FGHIJ-67890-KLMNO", "ZZZZZ-99999-ZZZZZ-99999-ZZZZZ"])
        monkeypatch.setattr(services, "generate_license_key", lambda: next(keys))

        async def never_exists(_team_id, _lookup):
            return False

        monkeypatch.setattr(memory_license_repository, "exists_by_lookup", never_exists)
        handler = IssueLicenseHandler(cipher=cipher, license_repository=memory_license_repository)

        result = await handler.handle(IssueLicenseCommand(team_id=team_id))

        assert result.license_key == "ZZZZZ-99999-ZZZZZ-99999-ZZZZZ"
        assert len(memory_license_repository.licenses) == 2

    async def test_issue_license_gives_up_after_conflicts(
        self, cipher, memory_license_repository, sample_license, team_id, monkeypatch
    ):
        """Test repeated save conflicts end in LicenseKeyGenerationError."""
        from core.domain.exceptions import LicenseKeyGenerationError
        from licenses.domain import services

        await memory_license_repository.save(sample_license)
        monkeypatch.setattr(services, "generate_license_key", lambda: "ABCDE-12345-FGHIJ-67890-KLMNO")

        async def never_exists(_team_id, _lookup):
            return False

        monkeypatch.setattr(memory_license_repository, "exists_by_lookup", never_exists)
        handler = IssueLicenseHandler(
            cipher=cipher, license_repository=memory_license_repository, max_attempts=3
        )

        with pytest.raises(LicenseKeyGenerationError):
            await handler.handle(IssueLicenseCommand(team_id=team_id))
        assert len(memory_license_repository.licenses) == 1


@pytest.mark.asyncio
class TestRevealLicenseKeyHandler:
    """Tests for RevealLicenseKeyHandler."""

    async def test_reveal_success(self, cipher, memory_license_repository, sample_license, team_id):
        """Test the stored key is decrypted."""
        await memory_license_repository.save(sample_license)
        handler = RevealLicenseKeyHandler(cipher, memory_license_repository)

        result = await handler.handle(
            RevealLicenseKeyQuery(team_id=team_id, license_id=sample_license.id)
        )

        assert result.license_id == sample_license.id
        assert result.license_key == "ABCDE-12345-FGHIJ-67890-KLMNO"

    async def test_reveal_not_found(self, cipher, memory_license_repository, team_id):
        """Test unknown license id."""
        handler = RevealLicenseKeyHandler(cipher, memory_license_repository)

        with pytest.raises(LicenseNotFoundError):
            await handler.handle(RevealLicenseKeyQuery(team_id=team_id, license_id=uuid.uuid4()))

    async def test_reveal_other_team(self, cipher, memory_license_repository, sample_license):
        """Test a license of another team is not revealed."""
        await memory_license_repository.save(sample_license)
        handler = RevealLicenseKeyHandler(cipher, memory_license_repository)

        with pytest.raises(LicenseNotFoundError):
            await handler.handle(
                RevealLicenseKeyQuery(team_id=uuid.uuid4(), license_id=sample_license.id)
            )

    async def test_reveal_corrupted_record(self, cipher, memory_license_repository, team_id):
        """Test a record that fails authentication raises DecryptionError."""
        corrupted = License.create(
            team_id=team_id,
            license_key="00" * 16 + ":abcd:" + "00" * 16,
            license_key_lookup="a" * 64,
        )
        await memory_license_repository.save(corrupted)
        handler = RevealLicenseKeyHandler(cipher, memory_license_repository)

        with pytest.raises(DecryptionError):
            await handler.handle(RevealLicenseKeyQuery(team_id=team_id, license_id=corrupted.id))


@pytest.mark.asyncio
class TestFindLicenseByKeyHandler:
    """Tests for FindLicenseByKeyHandler."""

    async def test_find_success(self, cipher, memory_license_repository, sample_license, team_id):
        """Test a license is found by its plaintext key."""
        await memory_license_repository.save(sample_license)
        handler = FindLicenseByKeyHandler(cipher, memory_license_repository)

        result = await handler.handle(
            FindLicenseByKeyQuery(team_id=team_id, license_key="ABCDE-12345-FGHIJ-67890-KLMNO")
        )

        assert result is not None
        assert result.id == sample_license.id

    async def test_find_does_not_decrypt(
        self, cipher, memory_license_repository, sample_license, team_id, monkeypatch
    ):
        """Test search only matches lookup tags."""
        await memory_license_repository.save(sample_license)

        def fail(_envelope):
            raise AssertionError("decrypt must not be called during search")

        monkeypatch.setattr(cipher, "decrypt", fail)
        handler = FindLicenseByKeyHandler(cipher, memory_license_repository)

        result = await handler.handle(
            FindLicenseByKeyQuery(team_id=team_id, license_key="ABCDE-12345-FGHIJ-67890-KLMNO")
        )
        assert result is not None

    async def test_find_other_team(self, cipher, memory_license_repository, sample_license):
        """Test the same key under another team does not match."""
        await memory_license_repository.save(sample_license)
        handler = FindLicenseByKeyHandler(cipher, memory_license_repository)

        result = await handler.handle(
            FindLicenseByKeyQuery(team_id=uuid.uuid4(), license_key="ABCDE-12345-FGHIJ-67890-KLMNO")
        )

        assert result is None

    async def test_find_no_match(self, cipher, memory_license_repository, sample_license, team_id):
        """Test an unknown key returns None."""
        await memory_license_repository.save(sample_license)
        handler = FindLicenseByKeyHandler(cipher, memory_license_repository)

        result = await handler.handle(
            FindLicenseByKeyQuery(team_id=team_id, license_key="ZZZZZ-12345-FGHIJ-67890-KLMNO")
        )

        assert result is None

    @pytest.mark.parametrize("license_key", ["", "abc", "ABCDE:12345-FGHIJ-67890-KLMNO"])
    async def test_find_invalid_format(self, cipher, memory_license_repository, team_id, license_key):
        """Test malformed search input is rejected."""
        handler = FindLicenseByKeyHandler(cipher, memory_license_repository)

        with pytest.raises(InvalidLicenseKeyError):
            await handler.handle(FindLicenseByKeyQuery(team_id=team_id, license_key=license_key))


class TestIssueLicenseHandlerConfig:
    """Tests for IssueLicenseHandler configuration."""

    def test_max_attempts_from_settings(self, cipher, memory_license_repository):
        """Test the attempt limit defaults to the setting."""
        from django.test import override_settings

        with override_settings(LICENSE_KEY_MAX_ATTEMPTS=2):
            handler = IssueLicenseHandler(cipher=cipher, license_repository=memory_license_repository)
        assert handler.issuer.max_attempts == 2

    def test_explicit_max_attempts(self, cipher, memory_license_repository):
        """Test an explicit attempt limit wins over the setting."""
        handler = IssueLicenseHandler(
            cipher=cipher, license_repository=memory_license_repository, max_attempts=5
        )
        assert handler.issuer.max_attempts == 5
