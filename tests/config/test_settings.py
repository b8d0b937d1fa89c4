"""Tests for ArtSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from artindex.config.models import BuildConfig
from artindex.config.settings import ArtSettings


class TestArtSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ArtSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.build == BuildConfig()

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ArtSettings.from_cli(project_root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = ArtSettings.from_cli(project_root=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "artindex.toml").write_text(
            '[build]\nsource_dir = "posts"\nexcerpt_length = 120\n'
        )
        settings = ArtSettings.from_cli(project_root=tmp_path)
        assert settings.build.source_dir == "posts"
        assert settings.build.excerpt_length == 120
        assert settings.build.index_file == "index.json"  # default preserved

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "artindex.toml").write_text("")
        nested = tmp_path / "drafts"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = ArtSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "site.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[build]\noutput_dir = "public"\n')
        settings = ArtSettings.from_cli(config_path=str(custom))
        assert settings.build.output_dir == "public"
        assert settings.config_path == custom
        assert settings.project_root == custom.parent

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "artindex.toml").write_text("[build\nbroken")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ArtSettings.from_cli(project_root=tmp_path)

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "artindex.toml").write_text('[build]\nsource_dir = "posts"\n')
        monkeypatch.setenv("ARTINDEX_BUILD__SOURCE_DIR", "essays")
        settings = ArtSettings.from_cli(project_root=tmp_path)
        assert settings.build.source_dir == "essays"


class TestResolve:
    def test_relative_to_project_root(self, tmp_path: Path) -> None:
        settings = ArtSettings.from_cli(project_root=tmp_path)
        assert settings.resolve("Article") == tmp_path / "Article"

    def test_absolute_kept(self, tmp_path: Path) -> None:
        settings = ArtSettings.from_cli(project_root=tmp_path / "root")
        assert settings.resolve(str(tmp_path / "abs")) == tmp_path / "abs"
