"""
Tests for config.py

Config files are written to tmp_path. The module level config object was already created from the
throwaway ART_EXPOSURE_CONFIG_DIR set in conftest.py.
"""

import json
import os

import pytest

# following entities are tested in this module:
from artexposure.config import config
from artexposure.config import config_dir
from artexposure.config import load_config
from artexposure.config import ArtExposureConfig
from artexposure.config import ArtExposureConfigError


def test_module_config_uses_environment_directory():
    assert config.CONFIG_DIR == config_dir()
    assert (config_dir() / "config.json").exists()


def test_generate_then_load(tmp_path):
    settings = ArtExposureConfig(CONFIG_DIR=tmp_path, MEDIA_DIR=tmp_path / "media", MAX_TRIES=5)

    written = settings.generate_config_json()

    assert written == tmp_path / "config.json"
    assert json.loads(written.read_text())["MEDIA_DIR"] == str(tmp_path / "media")
    assert load_config(written) == settings


def test_load_config_partial_file(tmp_path):
    src = tmp_path / "config.json"
    src.write_text(json.dumps({"DEFAULT_QUERY": "Ukiyo-e", "BORDER_WIDTH": 40}))

    settings = load_config(src)

    assert settings.DEFAULT_QUERY == "Ukiyo-e"
    assert settings.BORDER_WIDTH == 40
    assert settings.MAX_TRIES == ArtExposureConfig.MAX_TRIES


def test_load_config_expands_paths(tmp_path):
    src = tmp_path / "config.json"
    src.write_text(json.dumps({"MEDIA_DIR": "~/Pictures/art"}))

    assert load_config(src).MEDIA_DIR == ArtExposureConfig().MEDIA_DIR.parent / "Pictures/art"


@pytest.mark.parametrize(
    "contents",
    [
        "{ not json",
        json.dumps({"MAX_TRIES": 3, "API_KEY": "abc"}),
        json.dumps({"MAX_TRIES": -1}),
        json.dumps({"BORDER_WIDTH": -10}),
        json.dumps({"MAX_TRIES": "20"}),
        json.dumps({"MEDIA_DIR": 5}),
        json.dumps(["MAX_TRIES", 20]),
        json.dumps([{"MAX_TRIES": 20}]),
    ],
)
def test_load_config_invalid(tmp_path, contents):
    src = tmp_path / "config.json"
    src.write_text(contents)

    with pytest.raises(ArtExposureConfigError):
        load_config(src)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ArtExposureConfigError):
        load_config(tmp_path / "nope.json")


def test_config_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ART_EXPOSURE_CONFIG_DIR", str(tmp_path))
    assert config_dir() == tmp_path

    monkeypatch.delenv("ART_EXPOSURE_CONFIG_DIR")
    assert config_dir() == ArtExposureConfig.CONFIG_DIR


def test_config_error_is_fatal():
    from artexposure.errors import FatalError

    assert issubclass(ArtExposureConfigError, FatalError)
