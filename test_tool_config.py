import pytest

from tool_config import DEFAULTS, ConfigError, load_config


@pytest.fixture(autouse=True)
def no_env(monkeypatch):
    monkeypatch.delenv("GLTF_TOOL_CONFIG", raising=False)


def test_defaults_without_file(tmp_path):
    assert load_config(cwd=tmp_path) == DEFAULTS


def test_config_in_cwd(tmp_path):
    (tmp_path / "gltf-tool.toml").write_text('log_level = "debug"\n[basecolor]\noverwrite = true\n')
    config = load_config(cwd=tmp_path)
    assert config["log_level"] == "DEBUG"
    assert config["overwrite"] is True
    assert config["output_dir"] is None


def test_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "custom.toml"
    path.write_text('[basecolor]\noutput_dir = "textures"\nunknown = 1\n')
    monkeypatch.setenv("GLTF_TOOL_CONFIG", str(path))
    assert load_config()["output_dir"] == tmp_path / "textures"


def test_wrong_type(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('[basecolor]\noverwrite = "yes"\n')
    with pytest.raises(ConfigError):
        load_config(path)
