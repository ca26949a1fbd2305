from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import jsonschema
import yaml

from jarlauncher.core.errors import ConfigError
from jarlauncher.core.variant import Variant


LAUNCH_CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "variant": {"type": "string", "enum": [v.value for v in Variant]},
        "java_home": {"type": "string", "minLength": 1},
        "log_level": {"type": "string", "minLength": 1},
        "jvm_args": {"type": "array", "items": {"type": "string"}},
        "app_args": {"type": "array", "items": {"type": "string"}},
        "operation_args": {"type": "object", "additionalProperties": {"type": "string"}},
    },
}


@dataclass(frozen=True)
class LaunchConfig:
    """
    Launch defaults read from a YAML file.
    Values given on the command line take precedence (see merge()).
    """

    variant: Optional[Variant] = None
    java_home: Optional[str] = None
    log_level: Optional[str] = None
    jvm_args: Tuple[str, ...] = ()
    app_args: Tuple[str, ...] = ()
    operation_args: Dict[str, str] = field(default_factory=dict)

    def merge(
        self,
        *,
        variant: Optional[Variant] = None,
        java_home: Optional[str] = None,
        log_level: Optional[str] = None,
        jvm_args: Iterable[str] = (),
        app_args: Iterable[str] = (),
        operation_args: Optional[Mapping[str, str]] = None,
    ) -> "LaunchConfig":
        merged_ops = dict(self.operation_args)
        merged_ops.update(operation_args or {})
        return LaunchConfig(
            variant=variant or self.variant,
            java_home=java_home or self.java_home,
            log_level=log_level or self.log_level,
            jvm_args=self.jvm_args + tuple(jvm_args),
            app_args=self.app_args + tuple(app_args),
            operation_args=merged_ops,
        )


def load_launch_config(path: Path) -> LaunchConfig:
    p = Path(path).expanduser()
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(code="config.unreadable", message=f"Cannot read launch config: {p}", data={"error": repr(e)}) from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(code="config.invalid", message="Config must be a YAML mapping/object at top-level")

    errors = [e.message for e in sorted(jsonschema.Draft202012Validator(LAUNCH_CONFIG_SCHEMA).iter_errors(raw), key=str)]
    if errors:
        raise ConfigError(code="config.invalid", message="Launch config failed validation", data={"path": str(p), "errors": errors})

    variant = Variant.parse(raw["variant"]) if "variant" in raw else None
    return LaunchConfig(
        variant=variant,
        java_home=raw.get("java_home"),
        log_level=raw.get("log_level"),
        jvm_args=tuple(raw.get("jvm_args", [])),
        app_args=tuple(raw.get("app_args", [])),
        operation_args=dict(raw.get("operation_args", {})),
    )

