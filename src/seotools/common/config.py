"""Endpoint and credential configuration for the Gemini client.

Values come from the environment (GEMINI_*) or from a YAML file whose
lower-case keys override the environment.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml

from seotools.common.errors import ConfigError
from seotools.common.schema import RetryPolicy

DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_S = 60.0

@dataclass(frozen=True)
class GeminiConfig:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GeminiConfig":
        env = os.environ if environ is None else environ
        return cls._from_mapping(
            {
                "api_key": env.get("GEMINI_API_KEY"),
                "model": env.get("GEMINI_MODEL"),
                "base_url": env.get("GEMINI_BASE_URL"),
                "timeout_s": env.get("GEMINI_TIMEOUT_S"),
                "retry_delays_ms": env.get("GEMINI_RETRY_DELAYS_MS"),
            }
        )

    @classmethod
    def from_yaml(cls, path: str, environ: Mapping[str, str] | None = None) -> "GeminiConfig":
        cfg = load_cfg(path)
        base = cls.from_env(environ)
        merged: dict[str, Any] = {
            "api_key": base.api_key,
            "model": base.model,
            "base_url": base.base_url,
            "timeout_s": base.timeout_s,
            "retry_delays_ms": base.retry.delays_ms,
        }
        merged.update({k: v for k, v in cfg.items() if v not in (None, "")})
        return cls._from_mapping(merged)

    @classmethod
    def _from_mapping(cls, values: Mapping[str, Any]) -> "GeminiConfig":
        kwargs: dict[str, Any] = {}
        if values.get("api_key") is not None:
            kwargs["api_key"] = str(values["api_key"])
        if values.get("model"):
            kwargs["model"] = str(values["model"])
        if values.get("base_url"):
            kwargs["base_url"] = str(values["base_url"])
        if values.get("timeout_s") not in (None, ""):
            try:
                kwargs["timeout_s"] = float(values["timeout_s"])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid timeout_s: {values['timeout_s']!r}") from e
        if values.get("retry_delays_ms") not in (None, ""):
            kwargs["retry"] = RetryPolicy(_parse_delays(values["retry_delays_ms"]))
        return cls(**kwargs)


def _parse_delays(raw: Any) -> tuple[int, ...]:
    items = raw.split(",") if isinstance(raw, str) else raw
    try:
        delays = tuple(int(str(d).strip()) for d in items if str(d).strip())
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid retry_delays_ms: {raw!r}") from e
    if any(d < 0 for d in delays):
        raise ConfigError(f"Negative delay in retry_delays_ms: {raw!r}")
    return delays


def load_cfg(path: str) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {path}: {e}") from e
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return cfg
