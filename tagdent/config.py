"""Configuration model and loaders for dedent operations.

Responsibilities:
- Define dedent options as a typed, immutable dataclass.
- Map options onto the canonical cached presets where possible.
- Provide loader entry points for mapping-, file- and environment-based options.

Key types:
- `DropLowestMode`: how the lowest indent level is treated.
- `DedentPreset`: the canonical configurations with shared cached operations.
- `DedentConfig`: normalized options for one dedent operation.
- `ConfigLoader`: static construction helpers for `DedentConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import os
from pathlib import Path
import re
from typing import Any, Callable, Mapping, Sequence

import yaml

from .errors import ConfigurationError


DEFAULT_WHITESPACE = "[ \t]"

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


class DropLowestMode(str, Enum):
    """Treatment of the lowest indent level when computing the excess."""

    OFF = "off"
    ALWAYS = "always"
    MINORITY = "minority"


class DedentPreset(Enum):
    """Canonical dedent configurations backed by shared operations."""

    PLAIN = "plain"
    DROP_LOWEST = "drop_lowest"


@dataclass(frozen=True, slots=True)
class DedentConfig:
    """Options for one dedent operation.

    Attributes:
        drop_lowest: Lowest-indent policy; `ALWAYS` drops the minimum level
            unconditionally, `MINORITY` only when fewer than half the lines
            carry it.
        whitespace: Regex character class counted as indentation.
        log_failures: Whether suppressed plugin failures are logged.
        drop_lowest_threshold: Optional `(indents, lowest, occurrences) -> bool`
            test replacing the fewer-than-half rule of `MINORITY` mode.
    """

    drop_lowest: DropLowestMode = DropLowestMode.OFF
    whitespace: str = DEFAULT_WHITESPACE
    log_failures: bool = True
    drop_lowest_threshold: Callable[[Sequence[int], int, int], bool] | None = None

    def validate(self) -> None:
        """Validate option values before an operation is built."""

        if not isinstance(self.drop_lowest, DropLowestMode):
            raise ConfigurationError(
                field="drop_lowest",
                detail=f"`drop_lowest` must be a DropLowestMode, got `{self.drop_lowest!r}`.",
            )
        if self.drop_lowest_threshold is not None:
            if not callable(self.drop_lowest_threshold):
                raise ConfigurationError(
                    field="drop_lowest_threshold",
                    detail="`drop_lowest_threshold` must be callable.",
                )
            if self.drop_lowest is not DropLowestMode.MINORITY:
                raise ConfigurationError(
                    field="drop_lowest_threshold",
                    detail="`drop_lowest_threshold` requires `drop_lowest` mode `minority`.",
                )
        if not isinstance(self.whitespace, str) or not self.whitespace:
            raise ConfigurationError(
                field="whitespace",
                detail="`whitespace` must be a non-empty regex character class.",
            )
        try:
            re.compile(self.whitespace)
        except re.error as exc:
            raise ConfigurationError(
                field="whitespace",
                detail=f"`whitespace` is not a valid regex: {exc}",
                hint="Use a character class such as `[ \\t]`.",
            ) from exc

    @property
    def preset(self) -> DedentPreset | None:
        """Return the canonical preset these options match, if any."""

        if self.whitespace != DEFAULT_WHITESPACE or not self.log_failures:
            return None
        if self.drop_lowest_threshold is not None:
            return None
        if self.drop_lowest is DropLowestMode.OFF:
            return DedentPreset.PLAIN
        if self.drop_lowest is DropLowestMode.ALWAYS:
            return DedentPreset.DROP_LOWEST
        return None


def _normalize_optional_string(value: object) -> str | None:
    """Return a stripped string, or `None` for missing and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token, returning `None` when unrecognized."""

    if isinstance(value, bool):
        return value
    token = _normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


class ConfigLoader:
    """Factory methods for creating `DedentConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset({"drop_lowest", "whitespace", "log_failures"})
    _KEY_ALIASES = {
        "dropLowest": "drop_lowest",
        "logFailures": "log_failures",
    }
    _ENV_KEYS = {
        "drop_lowest": "TAGDENT_DROP_LOWEST",
        "whitespace": "TAGDENT_WHITESPACE",
        "log_failures": "TAGDENT_LOG_FAILURES",
    }

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any], source_label: str = "options"
    ) -> DedentConfig:
        """Create a validated config from a `{"drop_lowest": ...}`-shaped mapping.

        A callable `drop_lowest` selects `MINORITY` mode with that callable as
        its threshold test.
        """

        normalized: dict[str, Any] = {}
        for raw_key, value in payload.items():
            key = ConfigLoader._KEY_ALIASES.get(raw_key, raw_key)
            if key not in ConfigLoader._SUPPORTED_KEYS:
                raise ConfigurationError(
                    field=str(raw_key),
                    detail=f"{source_label} includes unsupported key `{raw_key}`.",
                    hint="Supported keys: " + ", ".join(sorted(ConfigLoader._SUPPORTED_KEYS)),
                )
            normalized[key] = value

        drop_lowest = normalized.get("drop_lowest")
        threshold = drop_lowest if callable(drop_lowest) else None
        config = DedentConfig(
            drop_lowest=(
                DropLowestMode.MINORITY
                if threshold is not None
                else ConfigLoader._drop_lowest_mode(drop_lowest, source_label)
            ),
            whitespace=ConfigLoader._whitespace(normalized.get("whitespace")),
            log_failures=ConfigLoader._boolean(
                normalized.get("log_failures"), "log_failures", source_label, default=True
            ),
            drop_lowest_threshold=threshold,
        )
        config.validate()
        return config

    @staticmethod
    def from_yaml(path: Path) -> DedentConfig:
        """Create a validated config from a YAML file with a mapping root."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ConfigurationError(
                field="<root>",
                detail=f"YAML config `{path}` must contain a top-level mapping/object.",
            )
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> DedentConfig:
        """Create a validated config from `TAGDENT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[env_key]
            for key, env_key in ConfigLoader._ENV_KEYS.items()
            if _normalize_optional_string(env_map.get(env_key)) is not None
        }
        return ConfigLoader.from_mapping(payload, source_label="environment")

    @staticmethod
    def _drop_lowest_mode(value: object, source_label: str) -> DropLowestMode:
        """Read a drop-lowest mode from a boolean token or a mode name."""

        if value is None:
            return DropLowestMode.OFF
        if isinstance(value, DropLowestMode):
            return value

        parsed = _parse_boolean(value)
        if parsed is not None:
            return DropLowestMode.ALWAYS if parsed else DropLowestMode.OFF

        token = (_normalize_optional_string(value) or "").lower()
        try:
            return DropLowestMode(token)
        except ValueError as exc:
            modes = ", ".join(mode.value for mode in DropLowestMode)
            raise ConfigurationError(
                field="drop_lowest",
                detail=f"{source_label} field `drop_lowest` must be a boolean or one of: {modes}.",
            ) from exc

    @staticmethod
    def _whitespace(value: object) -> str:
        """Read a whitespace class, keeping the default for missing values."""

        if value is None or value == "":
            return DEFAULT_WHITESPACE
        return str(value)

    @staticmethod
    def _boolean(value: object, key: str, source_label: str, default: bool) -> bool:
        """Read and validate a boolean field."""

        if value is None:
            return default
        parsed = _parse_boolean(value)
        if parsed is None:
            raise ConfigurationError(
                field=key,
                detail=(
                    f"{source_label} field `{key}` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                ),
            )
        return parsed
