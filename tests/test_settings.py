"""Tests for settings loading and the host module."""

import logging

import pytest
from pydantic import ValidationError

from faker_dispatch.dynamic.proxy import Faker
from faker_dispatch.module import FakerModule
from faker_dispatch.settings.base import FakerSettings
from faker_dispatch.settings.loader import (
    ENV_LOCALE,
    ENV_SEED,
    SettingsLoader,
    load_settings,
    parse_seed,
)


@pytest.fixture
def loader():
    return SettingsLoader()


class TestFakerSettings:
    """Tests for the settings model."""

    def test_defaults(self):
        settings = FakerSettings()
        assert settings.seed == 0
        assert settings.locale == "en_US"

    def test_blank_locale(self):
        with pytest.raises(ValidationError):
            FakerSettings(locale="  ")


class TestSettingsLoader:
    """Tests for SettingsLoader."""

    def test_load_from_string(self, loader):
        settings = loader.load_from_string("seed: 11\nlocale: en_GB\n")
        assert settings.seed == 11
        assert settings.locale == "en_GB"

    def test_empty_document(self, loader):
        assert loader.load_from_string("") == FakerSettings()

    def test_not_a_mapping(self, loader):
        with pytest.raises(ValueError):
            loader.load_from_string("- 11\n")

    def test_load_file(self, loader, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("seed: 7\n")

        assert loader.load_file(path).seed == 7

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(FileNotFoundError):
            loader.load_file(tmp_path / "missing.yaml")

    def test_env_overrides(self, loader):
        base = FakerSettings(seed=3, locale="en_GB")
        settings = loader.from_env({ENV_SEED: " 42 ", ENV_LOCALE: "de_DE"}, base=base)

        assert settings.seed == 42
        assert settings.locale == "de_DE"
        assert base.seed == 3

    def test_blank_env_locale_ignored(self, loader):
        assert loader.from_env({ENV_LOCALE: " "}).locale == "en_US"

    def test_empty_env(self, loader):
        assert loader.from_env({}) == FakerSettings()

    def test_load_settings(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("seed: 7\nlocale: en_GB\n")

        settings = load_settings(path, environ={ENV_SEED: "9"})
        assert settings.seed == 9
        assert settings.locale == "en_GB"


class TestParseSeed:
    """Tests for seed parsing."""

    def test_valid(self):
        assert parse_seed("11") == 11
        assert parse_seed("-5") == -5

    def test_invalid_logs_and_falls_back(self, caplog):
        with caplog.at_level(logging.ERROR, logger="faker_dispatch.settings.loader"):
            assert parse_seed("eleven") == 0

        assert ENV_SEED in caplog.text
        assert "eleven" in caplog.text


class TestFakerModule:
    """Tests for per-instance module exports."""

    def test_seed_from_environment(self):
        exports = FakerModule().new_instance({ENV_SEED: "11"})

        assert isinstance(exports.default, Faker)
        assert exports.default.engine.seed == 11
        assert exports.named["Faker"] is Faker

    def test_default_matches_constructor(self):
        exports = FakerModule().new_instance({ENV_SEED: "11"})
        constructed = exports.named["Faker"](11)

        assert exports.default.person.firstName() == constructed.person.firstName()

    def test_invalid_seed(self):
        exports = FakerModule().new_instance({ENV_SEED: "not-a-number"})
        assert exports.default.engine.seed == 0

    def test_unset_seed(self):
        assert FakerModule().new_instance({}).default.engine.seed == 0
