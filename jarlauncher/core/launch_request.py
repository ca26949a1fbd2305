from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .errors import ValidationError


def _freeze_map(m: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(m or {}))


def _freeze_list(xs: Optional[Iterable[str]]) -> Tuple[str, ...]:
    return tuple(xs or ())


@dataclass(frozen=True)
class ExecutionOptions:
    """
    Options that shape the spawned command but not what is launched.
    None collections are normalized to empty ones.
    """

    log_level: Optional[str] = None
    operation_args: Mapping[str, str] = field(default_factory=dict)
    jvm_args: Tuple[str, ...] = ()
    app_args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "operation_args", _freeze_map(self.operation_args))
        object.__setattr__(self, "jvm_args", _freeze_list(self.jvm_args))
        object.__setattr__(self, "app_args", _freeze_list(self.app_args))

    def with_operation_arg(self, key: str, value: str) -> "ExecutionOptions":
        merged = dict(self.operation_args)
        merged[key] = value
        return replace(self, operation_args=merged)


@dataclass(frozen=True)
class LaunchRequest:
    artifact_path: str
    operation: Optional[str] = None
    output_file: Optional[str] = None
    log_level: Optional[str] = None
    operation_args: Mapping[str, str] = field(default_factory=dict)
    jvm_args: Tuple[str, ...] = ()
    app_args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.artifact_path, str) or not self.artifact_path.strip():
            raise ValidationError(
                code="request.invalid",
                message="artifact_path must be a non-empty string",
                data={"artifact_path": self.artifact_path},
            )
        object.__setattr__(self, "operation_args", _freeze_map(self.operation_args))
        object.__setattr__(self, "jvm_args", _freeze_list(self.jvm_args))
        object.__setattr__(self, "app_args", _freeze_list(self.app_args))

    @classmethod
    def from_options(
        cls,
        artifact_path: str,
        operation: Optional[str],
        output_file: Optional[str],
        options: ExecutionOptions,
    ) -> "LaunchRequest":
        return cls(
            artifact_path=artifact_path,
            operation=operation,
            output_file=output_file,
            log_level=options.log_level,
            operation_args=options.operation_args,
            jvm_args=options.jvm_args,
            app_args=options.app_args,
        )
