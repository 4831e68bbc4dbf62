import os
import tomllib
from pathlib import Path

# example gltf-tool.toml:
#
#   log_level = "INFO"
#
#   [basecolor]
#   overwrite = true
#   output_dir = "textures"

CONFIG_ENV = "GLTF_TOOL_CONFIG"
DEFAULT_CONFIG_NAME = "gltf-tool.toml"

DEFAULTS = {
    "log_level": None,
    "overwrite": False,
    "output_dir": None,
}


class ConfigError(ValueError):
    pass


def find_config(explicit=None, cwd=None):
    if explicit:
        return Path(explicit)
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    candidate = Path(cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.exists():
        return candidate
    return None


def expect(value, ty, key):
    if not isinstance(value, ty):
        raise ConfigError(f"{key} must be a {ty.__name__}, got {type(value).__name__}")
    return value


def load_config(explicit=None, cwd=None):
    """Settings from the TOML config, falling back to DEFAULTS for anything unset."""
    config = dict(DEFAULTS)
    path = find_config(explicit, cwd)
    if path is None:
        return config
    with path.open("rb") as f:
        data = tomllib.load(f)

    if "log_level" in data:
        config["log_level"] = expect(data["log_level"], str, "log_level").upper()
    section = expect(data.get("basecolor", {}), dict, "basecolor")
    if "overwrite" in section:
        config["overwrite"] = expect(section["overwrite"], bool, "basecolor.overwrite")
    if "output_dir" in section:
        output_dir = Path(expect(section["output_dir"], str, "basecolor.output_dir"))
        if not output_dir.is_absolute():
            output_dir = path.parent / output_dir
        config["output_dir"] = output_dir
    return config
