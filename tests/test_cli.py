"""Tests for the command line entry point."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import SecretStr

from crossmint_wallet import cli
from crossmint_wallet.config import CrossmintConfig, LogConfig, get_settings
from crossmint_wallet.models import WalletError, WalletListResult, WalletResult


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the cached settings and keep the real environment out."""
    monkeypatch.setattr("crossmint_wallet.config._settings", None)
    monkeypatch.delenv("CROSSMINT_API_KEY", raising=False)
    monkeypatch.delenv("CROSSMINT_BASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr("crossmint_wallet.cli.setup_logging", lambda level: None)


class TestConfig:
    """Tests for settings loading."""

    def test_defaults(self) -> None:
        config = CrossmintConfig(_env_file=None)
        assert config.api_key.get_secret_value() == ""
        assert config.base_url == "https://staging.crossmint.com/api/v1-alpha2"
        assert LogConfig(_env_file=None).level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CROSSMINT_API_KEY", "sk_env")
        monkeypatch.setenv("CROSSMINT_BASE_URL", "https://www.crossmint.com/api/v1-alpha2")

        config = CrossmintConfig(_env_file=None)

        assert config.api_key == SecretStr("sk_env")
        assert config.base_url == "https://www.crossmint.com/api/v1-alpha2"

    def test_api_key_hidden_in_repr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CROSSMINT_API_KEY", "sk_env")
        assert "sk_env" not in repr(CrossmintConfig(_env_file=None))

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestCli:
    """Tests for cli.main()."""

    def test_create_prints_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        mock_create = AsyncMock(return_value=WalletResult(wallet_id="w1", address="a1"))

        with patch("crossmint_wallet.cli.create_wallet", mock_create):
            exit_code = cli.main(["--api-key", "sk_cli", "create", "email:a@b.com"])

        assert exit_code == 0
        mock_create.assert_awaited_once_with(
            "email:a@b.com",
            "sk_cli",
            base_url="https://staging.crossmint.com/api/v1-alpha2",
        )
        assert json.loads(capsys.readouterr().out) == {
            "status": "success",
            "walletId": "w1",
            "address": "a1",
        }

    def test_get_uses_env_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CROSSMINT_API_KEY", "sk_env")
        mock_get = AsyncMock(return_value=WalletResult(wallet_id="w1"))

        with patch("crossmint_wallet.cli.get_wallet", mock_get):
            exit_code = cli.main(["--base-url", "http://localhost:8080", "get", "w1"])

        assert exit_code == 0
        mock_get.assert_awaited_once_with("w1", "sk_env", base_url="http://localhost:8080")

    def test_error_result_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        mock_list = AsyncMock(
            return_value=WalletError(message="Invalid API key format", code="WALLET_LIST_ERROR")
        )

        with patch("crossmint_wallet.cli.list_wallets", mock_list):
            exit_code = cli.main(["list"])

        assert exit_code == 1
        output = json.loads(capsys.readouterr().out)
        assert output["status"] == "error"
        assert output["code"] == "WALLET_LIST_ERROR"

    def test_list_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        wallets = [{"walletId": "w1"}, {"walletId": "w2"}]
        mock_list = AsyncMock(return_value=WalletListResult(wallets=wallets))

        with patch("crossmint_wallet.cli.list_wallets", mock_list):
            exit_code = cli.main(["--api-key", "sk_cli", "list"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["wallets"] == wallets

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])
