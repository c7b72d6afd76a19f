import pytest

from dispensers.config.sources import SOURCES, WFSConfig, get_dispenser_config, get_source_config

def test_default_source():
    config = get_source_config("water_dispensers")
    assert isinstance(config, WFSConfig)
    assert config.version == "1.1.0"
    assert config.srs_name == "EPSG:3857"
    assert config.timeout is None

def test_unknown_source():
    with pytest.raises(KeyError):
        get_source_config("fountains")

def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WFS_URL", "https://geo.example.org/wfs")
    monkeypatch.setenv("WFS_FEATURE_TYPE", "public:taps")
    monkeypatch.setenv("WFS_TIMEOUT", "12.5")

    config = get_dispenser_config()

    assert config.url == "https://geo.example.org/wfs"
    assert config.layer == "public:taps"
    assert config.timeout == 12.5
    assert SOURCES["water_dispensers"].layer == "water:dispensers"

def test_no_env_overrides(monkeypatch):
    for name in ("WFS_URL", "WFS_FEATURE_TYPE", "WFS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    assert get_dispenser_config() == SOURCES["water_dispensers"]
