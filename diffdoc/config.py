from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
import tomllib, os

PROFILES = ["default", "strict"]

@dataclass
class General:
    profile: str = "default"
    content_dir: str = "content"
    log_dir: str = "data/logs"

@dataclass
class Assembly:
    validate: bool = True
    # exit code 1 from `diffdoc check` when warnings exist
    fail_on_mismatch: bool = False
    preview_chars: int = 50

@dataclass
class Web:
    host: str = "127.0.0.1"
    port: int = 8765

@dataclass
class Settings:
    general: General
    assembly: Assembly
    web: Web

def _load_toml_if_exists(path: Path) -> dict:
    if path.exists():
        with path.open("rb") as f:
            return tomllib.load(f)
    return {}

def _read_profile_toml(config_path: Path, profile: str) -> dict:
    """
    Looks in:
      - config/defaults.toml and config/<profile>.toml
      - then fallback: config/profiles/defaults.toml and config/profiles/<profile>.toml
    """
    cfg_dir = config_path if config_path.is_dir() else config_path.parent

    data = _load_toml_if_exists(cfg_dir / "defaults.toml")
    if not data:
        data = _load_toml_if_exists(cfg_dir / "profiles" / "defaults.toml")

    prof = _load_toml_if_exists(cfg_dir / f"{profile}.toml")
    if not prof:
        prof = _load_toml_if_exists(cfg_dir / "profiles" / f"{profile}.toml")

    # shallow merge defaults <- profile
    base = data or {}
    for k, v in prof.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k].update(v)
        else:
            base[k] = v
    return base

def _filter_for_dataclass(cls, data: dict) -> dict:
    """Keep only the dataclass' known keys."""
    allowed = {f.name for f in fields(cls)}
    return {k: v for k, v in (data or {}).items() if k in allowed}

def load_settings(config: str | None, profile: str = "default", overrides: dict | None = None) -> Settings:
    config_path = Path(config) if config else Path("config")
    raw = _read_profile_toml(config_path, profile)

    raw.setdefault("general", {})
    raw["general"].setdefault("profile", profile)
    env_content = os.environ.get("DIFFDOC_CONTENT_DIR")
    if env_content:
        raw["general"]["content_dir"] = env_content

    g = General(**_filter_for_dataclass(General, raw.get("general")))
    a = Assembly(**_filter_for_dataclass(Assembly, raw.get("assembly")))
    w = Web(**_filter_for_dataclass(Web, raw.get("web")))

    # overrides (General only)
    if overrides:
        for k, v in overrides.items():
            if hasattr(g, k):
                setattr(g, k, v)

    return Settings(general=g, assembly=a, web=w)
