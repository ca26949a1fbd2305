from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .errors import ValidationError


# Application arguments the CLI controls itself. Matched case-insensitively as prefixes.
RESERVED_APP_ARG_PREFIXES: Tuple[str, ...] = (
    "--flamingock.",
    "--spring.main.web-application-type",
    "--spring.main.banner-mode",
)

_NAMESPACE_PREFIX = "--flamingock."


def _reserved_message(arg: str, reserved: str) -> str:
    if reserved.startswith(_NAMESPACE_PREFIX):
        category = f"Arguments starting with '{_NAMESPACE_PREFIX}' are controlled by the CLI and cannot be overridden."
    else:
        category = f"The argument '{reserved}' is a safety-critical flag controlled by the CLI."
    return (
        f"Reserved argument cannot be passed after '--': {arg}\n\n"
        f"  {category}\n\n"
        "  For help: jarl <command> --help"
    )


def validate_app_args(app_args: Optional[Iterable[str]]) -> None:
    """
    Reject application arguments that would override CLI-controlled flags.

    JVM arguments are deliberately not checked: they act on the JVM, below the
    application's property namespace.
    """
    if not app_args:
        return
    for arg in app_args:
        lowered = arg.lower()
        for reserved in RESERVED_APP_ARG_PREFIXES:
            if lowered.startswith(reserved.lower()):
                raise ValidationError(
                    code="passthrough.reserved",
                    message=_reserved_message(arg, reserved),
                    data={"arg": arg, "reserved_prefix": reserved},
                )


@dataclass(frozen=True)
class PassthroughArgs:
    """
    Passthrough arguments for the spawned JVM.

    - jvm_args (`-J` / `--java-opt`): placed before `-jar`/`-cp`.
    - app_args (after `--`): appended after every generated flag.
    """

    jvm_args: Tuple[str, ...] = ()
    app_args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "jvm_args", tuple(self.jvm_args or ()))
        object.__setattr__(self, "app_args", tuple(self.app_args or ()))

    def validate(self) -> None:
        validate_app_args(self.app_args)
