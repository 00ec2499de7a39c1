"""Client configuration loaded from YAML."""
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any

import yaml

from polybridge.common.errors import ConfigError

DEFAULT_BASE_URL = "https://bridge.polymarket.com"
USER_AGENT = "polybridge/0.1"


def _default_headers() -> dict[str, str]:
    return {"Accept": "application/json", "User-Agent": USER_AGENT}


@dataclass
class ClientConfig:
    """Settings shared by the blocking and async clients."""
    base_url: str = DEFAULT_BASE_URL
    headers: dict[str, str] = field(default_factory=_default_headers)


def load_config(path: str) -> ClientConfig:
    """
    Load a ``ClientConfig`` from a YAML file.

    Args:
        path: YAML file with optional ``base_url`` and ``headers`` keys.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        ConfigError: if the document is not a mapping or has unknown keys.
    """
    with open(path, "r", encoding="utf-8") as f:
        cfg: Any = yaml.safe_load(f)

    if cfg is None:
        return ClientConfig()
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(cfg).__name__}")

    known = {f.name for f in fields(ClientConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown keys {', '.join(unknown)}")

    headers = _default_headers()
    extra = cfg.get("headers") or {}
    if not isinstance(extra, dict):
        raise ConfigError(f"{path}: 'headers' must be a mapping")
    headers.update({str(k): str(v) for k, v in extra.items()})

    base_url = str(cfg.get("base_url") or DEFAULT_BASE_URL)
    return ClientConfig(base_url=base_url, headers=headers)
