"""
Config file loading for loadingbar.

Reads ~/.config/loadingbar/config.toml and returns the CLI defaults.
Never raises — always returns a valid dict with sensible defaults.

    rtl = true
    width = 60
"""

import logging
from pathlib import Path

log = logging.getLogger("loadingbar.config")

_CONFIG_PATH = Path.home() / ".config" / "loadingbar" / "config.toml"


def _defaults() -> dict:
    return {"rtl": False, "width": None}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return loadingbar config from TOML file.

    Returns {"rtl": bool, "width": int | None} — always valid, never raises.
    Missing file or parse errors return the defaults; a key with a bad
    shape falls back to its own default without affecting the others.
    """
    config_path = path or _CONFIG_PATH
    config = _defaults()

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError:
        log.debug("cannot read %s", config_path)
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return config

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except Exception:
        log.debug("ignoring malformed config %s", config_path)
        return config

    rtl = data.get("rtl")
    if isinstance(rtl, bool):
        config["rtl"] = rtl

    width = data.get("width")
    # bool is an int subclass
    if isinstance(width, int) and not isinstance(width, bool) and width >= 0:
        config["width"] = width

    return config
