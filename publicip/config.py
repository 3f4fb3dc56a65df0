from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

import yaml

from publicip.common import getenv
from publicip.errors import SettingsError

DEFAULT_ENDPOINT = "https://api.ipify.org?format=json"

ENV_OVERRIDES = {
    "source": "PUBLICIP_SOURCE",
    "endpoint": "PUBLICIP_ENDPOINT",
    "timeout": "PUBLICIP_TIMEOUT",
    "file_mode": "PUBLICIP_FILE_MODE",
}


@dataclass(frozen=True)
class Settings:
    source: str = "ipify"
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 10.0
    file_mode: int = 0o644
    create_parents: bool = True


def parse_file_mode(value: Any) -> int:
    """Accept 420, "0644" or "0o644"."""
    if isinstance(value, bool):
        raise SettingsError(f"Invalid file_mode: {value!r}")
    if isinstance(value, int):
        mode = value
    else:
        text = str(value).strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError as exc:
            raise SettingsError(f"Invalid file_mode: {value!r}") from exc
    if not 0 <= mode <= 0o7777:
        raise SettingsError(f"file_mode out of range: {value!r}")
    return mode


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise SettingsError(f"Invalid timeout: {value!r}") from exc
    if timeout <= 0:
        raise SettingsError(f"timeout must be positive: {value!r}")
    return timeout


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in values.items():
        if key == "timeout":
            out[key] = _parse_timeout(value)
        elif key == "file_mode":
            out[key] = parse_file_mode(value)
        elif key == "create_parents":
            if not isinstance(value, bool):
                raise SettingsError(f"create_parents must be true or false: {value!r}")
            out[key] = value
        else:
            if not isinstance(value, str) or not value:
                raise SettingsError(f"{key} must be a non-empty string: {value!r}")
            out[key] = value
    return out


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fh:
            payload = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping.")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(str(key) for key in payload if key not in known)
    if unknown:
        raise SettingsError(f"Unknown settings in {path}: {', '.join(unknown)}")
    return payload


def load_settings(path: str | Path | None = None) -> Settings:
    settings = Settings()
    if path is not None:
        settings = replace(settings, **_coerce(_read_yaml(Path(path))))

    env_values = {}
    for field_name, env_name in ENV_OVERRIDES.items():
        value = getenv(env_name)
        if value:
            env_values[field_name] = value
    if env_values:
        settings = replace(settings, **_coerce(env_values))
    return settings
