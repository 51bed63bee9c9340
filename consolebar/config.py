"""
Config file loading for consolebar.

Reads ~/.config/consolebar/config.toml and returns the bar style to use.
Never raises — always returns a valid dict with the default style when the
file is missing, unreadable, malformed or oddly shaped.

    [style]
    left_cap = "|"
    right_cap = "|"
    filled_token = "#"
    unfilled_token = "-"
    percent_width = 8

Token lengths are not cross-checked here; the bar does that on first render.
"""

from dataclasses import fields, replace
from pathlib import Path

from consolebar.style import DEFAULT_STYLE

_CONFIG_PATH = Path.home() / ".config" / "consolebar" / "config.toml"

_STYLE_TYPES = {f.name: type(getattr(DEFAULT_STYLE, f.name)) for f in fields(DEFAULT_STYLE)}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return consolebar config from TOML file.

    Returns {"style": BarStyle} — always valid, never raises.
    Unknown keys and keys with the wrong type are ignored.
    """
    config_path = path or _CONFIG_PATH
    empty: dict = {"style": DEFAULT_STYLE}

    if not config_path.is_file():
        return empty

    try:
        raw = config_path.read_bytes()
    except OSError:
        return empty

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return empty

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except Exception:
        return empty

    table = data.get("style")
    if not isinstance(table, dict):
        return empty

    overrides = {}
    for key, value in table.items():
        expected = _STYLE_TYPES.get(key)
        if expected is None:
            continue
        # bool is an int subclass; keep `percent_width = true` out
        if type(value) is not expected:
            continue
        overrides[key] = value

    return {"style": replace(DEFAULT_STYLE, **overrides)}
