"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

def _find_project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "core").is_dir():
            return parent
    return here.parent

PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "core" / "config"
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
LABELS_TSV = CONFIG_DIR / "labels.tsv"

ENV_PREFIX = "LNW_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "Export": {
        "output_dir": (Path.home() / "Downloads").as_posix(),
        "filename": "leistungsnachweis.pdf",
    },
    "Signature": {
        "stroke_width": "2",
        "background": "#ffffff",
        "stroke": "#0f172a",
    },
    "Logging": {
        "level": "INFO",
        "log_file": "",
    },
    "General": {
        "app_name": "Leistungsnachweis Generator",
        "version": "1.0.0",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class ExportConfig:
    output_dir: Path
    filename: str = "leistungsnachweis.pdf"


@dataclass
class SignatureConfig:
    stroke_width: float = 2.0
    background: str = "#ffffff"
    stroke: str = "#0f172a"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: str = ""


@dataclass
class GeneralConfig:
    app_name: str = ""
    version: str = ""


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    # dataclass annotations are strings under `from __future__ import annotations`
    name = typ if isinstance(typ, str) else getattr(typ, "__name__", str(typ))
    if name == "Path":
        return Path(str(value)).expanduser()
    if name == "bool":
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if name == "int":
        return int(value)
    if name == "float":
        return float(value)
    return str(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        kwargs[field.name] = _cast(val, field.type)
    return cls(**kwargs)


def _env_overlays(environ: Optional[Dict[str, str]] = None) -> Dict[str, Dict[str, Any]]:
    environ = os.environ if environ is None else environ
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "Leistungsnachweis" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "leistungsnachweis" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety.

    Precedence (low → high): embedded defaults, defaults.ini, environment
    (``LNW_<SECTION>__<KEY>``), user config.ini.
    """

    def __init__(self, *, defaults_ini: Optional[Path] = None,
                 user_ini: Optional[Path] = None,
                 environ: Optional[Dict[str, str]] = None) -> None:
        self._lock = RLock()
        self._defaults_ini = defaults_ini or DEFAULTS_INI
        self._user_ini = user_ini
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if self._defaults_ini.exists():
                cp = configparser.ConfigParser()
                cp.read(self._defaults_ini, encoding="utf-8")
                _apply(merged, _cp_to_dict(cp), "defaults.ini", str(self._defaults_ini), sources)

            # Layer 2: environment variables
            env = _env_overlays(self._environ)
            _apply(merged, env, "env", "os.environ", sources)

            # Layer 3: user overrides
            user_ini = self._user_ini or _user_config_path()
            if user_ini.exists():
                cp = configparser.ConfigParser()
                cp.read(user_ini, encoding="utf-8")
                _apply(merged, _cp_to_dict(cp), "user", str(user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.export = _build_dataclass(ExportConfig, merged.get("Export", {}))
            self.signature = _build_dataclass(SignatureConfig, merged.get("Signature", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))
            self.general = _build_dataclass(GeneralConfig, merged.get("General", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
