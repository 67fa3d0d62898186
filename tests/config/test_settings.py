"""Tests for ShieldSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from shieldctl.config.settings import ShieldSettings
from shieldctl.domain.validation import DEFAULT_POLICY


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SHIELDCTL_CONFIG", "SHIELDCTL_QUIET", "SHIELDCTL_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


class TestShieldSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.validation.to_policy() == DEFAULT_POLICY
        assert settings.output.hash_in_human is True
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "shieldctl.toml"
        toml.write_text(
            "[validation]\nstrict_withdraw_collateral = true\n[output]\nhash_in_human = false\n"
        )
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        assert settings.validation.strict_withdraw_collateral is True
        assert settings.validation.strict_withdraw_reimbursement is False
        assert settings.output.hash_in_human is False
        assert settings.config_path == toml

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "shieldctl.toml").write_text("[plugins]\nenabled = false\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = ShieldSettings.from_cli(cwd=child)
        assert settings.plugins.enabled is False

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "shieldctl.toml").write_text("")
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        assert settings.validation.to_policy() == DEFAULT_POLICY

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[validation]\nstrict_withdraw_reimbursement = true\n")
        settings = ShieldSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.validation.strict_withdraw_reimbursement is True
        assert settings.config_path == custom

    def test_missing_explicit_config_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = ShieldSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml_is_click_error(self, tmp_path: Path) -> None:
        (tmp_path / "shieldctl.toml").write_text("[validation\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ShieldSettings.from_cli(cwd=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = ShieldSettings.from_cli(
            cwd=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            log_json=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "shieldctl.toml").write_text("quiet = true\n")
        settings = ShieldSettings.from_cli(cwd=tmp_path, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHIELDCTL_QUIET", "true")
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SHIELDCTL_VALIDATION__STRICT_WITHDRAW_COLLATERAL", "true")
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        assert settings.validation.strict_withdraw_collateral is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "shieldctl.toml").write_text("[output]\nhash_in_human = false\n")
        monkeypatch.setenv("SHIELDCTL_OUTPUT__HASH_IN_HUMAN", "true")
        settings = ShieldSettings.from_cli(cwd=tmp_path)
        assert settings.output.hash_in_human is True
