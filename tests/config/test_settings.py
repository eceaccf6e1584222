"""Tests for ZeppelinSettings and SettingsLoader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from zeppctl.config.loader import SettingsLoader
from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


class TestZeppelinSettings:
    def test_defaults(self) -> None:
        s = ZeppelinSettings()
        assert s.version == "0.9.0"
        assert s.process_timeout == 90.0
        assert s.extract_command == ["tar", "-xvf"]
        assert s.interpreter_artifact == "com.lucidworks.zeppelin:zeppelin-solr:0.1.6"
        assert s.zeppelin_url == "http://localhost:8080"

    def test_derived_names(self) -> None:
        s = ZeppelinSettings()
        assert s.unpack_dir_name == "zeppelin-0.9.0-bin-netinst"
        assert s.archive_name == "zeppelin-0.9.0-bin-netinst.tgz"

    def test_archive_url_formats_version(self) -> None:
        s = ZeppelinSettings(version="0.10.1", install_type="all")
        assert s.archive_url == (
            "https://archive.apache.org/dist/zeppelin/zeppelin-0.10.1/zeppelin-0.10.1-bin-all.tgz"
        )

    def test_archive_url_adds_missing_slash(self) -> None:
        s = ZeppelinSettings(mirror_base="http://mirror.local/zeppelin")
        assert s.archive_url == "http://mirror.local/zeppelin/zeppelin-0.9.0-bin-netinst.tgz"

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ZeppelinSettings(process_timeout=0)

    @pytest.mark.parametrize("value", [0, -5.0])
    def test_download_timeout_must_be_positive(self, value: float) -> None:
        with pytest.raises(ValidationError):
            ZeppelinSettings(download_timeout=value)

    def test_extract_command_not_empty(self) -> None:
        with pytest.raises(ValidationError):
            ZeppelinSettings(extract_command=[])


class TestSettingsLoader:
    def test_load_overrides(self, tmp_path: Path) -> None:
        f = tmp_path / "zeppctl.yaml"
        f.write_text("version: 0.10.1\nprocess_timeout: 30\n")
        s = SettingsLoader(f).load()
        assert s.version == "0.10.1"
        assert s.process_timeout == 30.0
        assert s.interpreter_name == "solr"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert SettingsLoader(f).load() == ZeppelinSettings()

    def test_env_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZEPP_MIRROR", "http://mirror.local/zeppelin-{version}/")
        f = tmp_path / "zeppctl.yaml"
        f.write_text("mirror_base: ${ZEPP_MIRROR}\n")
        s = SettingsLoader(f).load()
        assert s.archive_url == "http://mirror.local/zeppelin-0.9.0/zeppelin-0.9.0-bin-netinst.tgz"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            SettingsLoader(tmp_path / "nope.yaml").load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("version: [unclosed\n")
        with pytest.raises(ConfigError, match="YAML parse error"):
            SettingsLoader(f).load()

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            SettingsLoader(f).load()

    def test_validation_error(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("process_timeout: -5\n")
        with pytest.raises(ConfigError):
            SettingsLoader(f).load()
