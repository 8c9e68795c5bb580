"""Configuration model and loaders for permalinker.

Responsibilities:
- Define resolver runtime settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `ResolverConfig`: normalized settings for one resolver instance.
- `ConfigLoader`: static construction helpers for `ResolverConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean

_SUPPORTED_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"})


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Runtime settings for permalink generation and resolution.

    Attributes:
        serialize_generation: Run entry permalink generation under a per-blog lock.
        log_level: Minimum loguru level written to the configured sink.
        strip_html_suffix: Whether request path normalization drops `.html`.
    """

    serialize_generation: bool = False
    log_level: str = "WARNING"
    strip_html_suffix: bool = True

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )


class ConfigLoader:
    """Factory methods for creating `ResolverConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "serialize_generation",
            "log_level",
            "strip_html_suffix",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> ResolverConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ResolverConfig:
        """Create a validated config from `PERMALINKER_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        serialize_generation = ConfigLoader._optional_env_boolean(
            env_map, "PERMALINKER_SERIALIZE_GENERATION"
        )
        strip_html_suffix = ConfigLoader._optional_env_boolean(
            env_map, "PERMALINKER_STRIP_HTML_SUFFIX"
        )
        log_level = normalize_optional_string(env_map.get("PERMALINKER_LOG_LEVEL"))

        config = ResolverConfig(
            serialize_generation=bool(serialize_generation),
            log_level=log_level.upper() if log_level else "WARNING",
            strip_html_suffix=True if strip_html_suffix is None else strip_html_suffix,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ResolverConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        log_level = normalize_optional_string(payload.get("log_level"))
        config = ResolverConfig(
            serialize_generation=ConfigLoader._optional_boolean(
                payload, "serialize_generation", source_label, default=False
            ),
            log_level=log_level.upper() if log_level else "WARNING",
            strip_html_suffix=ConfigLoader._optional_boolean(
                payload, "strip_html_suffix", source_label, default=True
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
