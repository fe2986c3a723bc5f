from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional
import regex as re
import yaml

from render import DEFAULT_PALETTE, STATUS_CLASSES, Palette

_SGR_RE = re.compile(r"[0-9]+(?:;[0-9]+)*")


class ConfigError(ValueError):
    pass


@dataclass
class Settings:
    color: bool = True
    palette: Palette = field(default_factory=lambda: DEFAULT_PALETTE)


def _parse_palette(raw: Any) -> Palette:
    if raw is None:
        return DEFAULT_PALETTE
    if not isinstance(raw, dict):
        raise ConfigError("palette must be a mapping of ok/warn/error to SGR codes")
    unknown = set(raw) - set(STATUS_CLASSES)
    if unknown:
        raise ConfigError(f"unknown palette key(s): {', '.join(sorted(map(str, unknown)))}")
    codes: Dict[str, str] = {}
    for key, value in raw.items():
        code = str(value)
        if not _SGR_RE.fullmatch(code):
            raise ConfigError(f"palette.{key}: {code!r} is not an SGR code like '92' or '1;31'")
        codes[key] = code
    return replace(DEFAULT_PALETTE, **codes)


def load_settings(path: Optional[str]) -> Settings:
    """Read a YAML settings file; no path means defaults."""
    if path is None:
        return Settings()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    color = raw.get("color", True)
    if not isinstance(color, bool):
        raise ConfigError("color must be true or false")
    return Settings(color=color, palette=_parse_palette(raw.get("palette")))
