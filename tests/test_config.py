import pytest

from gedcom_codec import config as config_module
from gedcom_codec.config import CONFIG_ENV_VAR, get_config, load_config, reset_config
from gedcom_codec.models import ExportOptions


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


def test_project_config_file_loads():
    cfg = load_config(config_module.CONFIG_PATH)
    assert cfg.export["submitter_name"] == "Kindred Family Tree"
    assert cfg.export["include_living"] is False
    assert cfg.logging["level"] == "INFO"


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yml")
    assert cfg.export == {}
    assert cfg.debug is False


def test_env_var_overrides_path(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("export:\n  submitter_name: Test Lab\n  include_sources: false\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = get_config()

    assert cfg.export["submitter_name"] == "Test Lab"
    assert get_config() is cfg


def test_export_options_from_config(tmp_path):
    path = tmp_path / "custom.yml"
    path.write_text(
        "export:\n  include_living: true\n  include_sources: false\n  submitter_name: Archive\n",
        encoding="utf-8",
    )
    options = ExportOptions.from_config(load_config(path))
    assert options == ExportOptions(include_living=True, include_sources=False, submitter_name="Archive")


def test_export_options_defaults_from_empty_config(tmp_path):
    assert ExportOptions.from_config(load_config(tmp_path / "none.yml")) == ExportOptions()


def test_empty_yaml_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).logging == {}
