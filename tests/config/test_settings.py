"""Tests for BugintakeSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from bugintake.config.settings import BugintakeSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BUGINTAKE_CONFIG", "BUGINTAKE_PROJECT_ROOT", "BUGINTAKE_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = BugintakeSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.intake.required == ["description", "expected_behavior"]
        assert settings.intake.strip_comments is True
        assert settings.output.width == 120

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BugintakeSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "bugintake.toml").write_text("[intake]\nstrip_comments = false\n")
        settings = BugintakeSettings.from_cli(project_root=tmp_path)
        assert settings.intake.strip_comments is False
        assert settings.output.width == 120  # default preserved

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "bugintake.toml").write_text("")
        child = tmp_path / "docs"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = BugintakeSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "intake.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nwidth = 80\n")
        settings = BugintakeSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.output.width == 80
        assert settings.config_path == custom

    def test_explicit_config_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            BugintakeSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "bugintake.toml").write_text("[intake\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BugintakeSettings.from_cli(project_root=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / "bugintake.toml").write_text('[intake]\nrequired = ["mood"]\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            BugintakeSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "bugintake.toml").write_text("[output]\nwidth = 80\n")
        monkeypatch.setenv("BUGINTAKE_OUTPUT__WIDTH", "100")
        settings = BugintakeSettings.from_cli(project_root=tmp_path)
        assert settings.output.width == 100

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUGINTAKE_QUIET", "false")
        settings = BugintakeSettings.from_cli(project_root=tmp_path, quiet=True)
        assert settings.quiet is True
