import pytest
import yaml
from pathlib import Path

from configs import ConfigError, Settings, load_settings


def test_bundled_settings_load():
    settings = load_settings()
    assert settings.data_path == "data/transactions.json"
    assert settings.report.client_name == "Aunt Polly"
    assert settings.report.top_n == 3


def test_missing_file_falls_back_to_defaults(tmp_path: Path):
    assert load_settings(str(tmp_path / "missing.yaml")) == Settings()


def test_partial_file_keeps_other_defaults(tmp_path: Path):
    cfg_path = tmp_path / "settings.yaml"
    cfg_path.write_text(yaml.safe_dump({"report": {"top_n": 5}}))

    settings = load_settings(str(cfg_path))

    assert settings.report.top_n == 5
    assert settings.report.sender_name == "Tom Shelby"
    assert settings.data_path == "data/transactions.json"


@pytest.mark.parametrize(
    "cfg",
    [
        {"report": {"top_n": 0}},
        {"report": {"top_n": True}},
        {"report": {"client_name": 42}},
        {"report": ["not", "a", "mapping"]},
        {"data_path": ""},
    ],
)
def test_bad_values_raise(tmp_path: Path, cfg):
    cfg_path = tmp_path / "settings.yaml"
    cfg_path.write_text(yaml.safe_dump(cfg))
    with pytest.raises(ConfigError):
        load_settings(str(cfg_path))


def test_invalid_yaml_raises(tmp_path: Path):
    cfg_path = tmp_path / "settings.yaml"
    cfg_path.write_text("report: [unclosed")
    with pytest.raises(ConfigError):
        load_settings(str(cfg_path))


def test_relative_data_path_starts_at_project_root(tmp_path: Path, monkeypatch):
    project_root = Path(__file__).resolve().parents[2]
    monkeypatch.chdir(tmp_path)

    data_file = Path(load_settings().data_file())

    assert data_file == project_root / "data" / "transactions.json"
    assert data_file.is_file()


def test_absolute_data_path_is_kept(tmp_path: Path):
    absolute = str(tmp_path / "elsewhere.json")
    assert Settings(data_path=absolute).data_file() == absolute
