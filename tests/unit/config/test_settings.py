"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from searchbridge.config.settings import DoofinderSettings, Settings


class TestDoofinderSettings:
    def test_defaults(self) -> None:
        cfg = DoofinderSettings()
        assert cfg.zone == "eu1"
        assert cfg.product_id_key == "id"
        assert cfg.filter_map == {}

    def test_filter_map_from_json_string(self) -> None:
        cfg = DoofinderSettings(filter_map='{"brand": "marca"}')  # type: ignore[arg-type]
        assert cfg.filter_map == {"brand": "marca"}

    def test_filter_map_must_be_one_to_one(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="one-to-one"):
            DoofinderSettings(filter_map={"brand": "marca", "maker": "marca"})


class TestSettings:
    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHBRIDGE_DOOFINDER__ZONE", "us1")
        monkeypatch.setenv("SEARCHBRIDGE_DOOFINDER__HASH_ID", "abc")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.doofinder.zone == "us1"
        assert settings.doofinder.hash_id == "abc"

    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "searchbridge.yaml"
        config.write_text(
            "doofinder:\n"
            "  zone: eu1\n"
            "  hash_id: from-yaml\n"
            "  filter_map:\n"
            "    brand: marca\n"
            "observability:\n"
            "  log_format: console\n"
        )
        settings = Settings.from_yaml(config)
        assert settings.doofinder.hash_id == "from-yaml"
        assert settings.doofinder.filter_map == {"brand": "marca"}
        assert settings.observability.log_format == "console"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")

    def test_only_declared_sections(self) -> None:
        assert set(Settings.model_fields) == {"doofinder", "observability"}
