from __future__ import annotations

from enum import Enum

from .errors import ValidationError


class Variant(Enum):
    """
    Packaging flavour of the target jar; decides which command shape is built.

    - MANAGED_RUNTIME_BUNDLE: Spring Boot executable jar, launched with `-jar`.
    - FLAT_EXECUTABLE_BUNDLE: plain uber jar, launched with `-cp` + entry point.
    """

    MANAGED_RUNTIME_BUNDLE = "spring-boot"
    FLAT_EXECUTABLE_BUNDLE = "plain-uber"

    @classmethod
    def parse(cls, text: str) -> "Variant":
        if isinstance(text, str):
            key = text.strip().lower()
            for v in cls:
                if key == v.value or key == v.name.lower():
                    return v
        choices = ", ".join(v.value for v in cls)
        raise ValidationError(
            code="variant.invalid",
            message=f"Unknown jar variant: {text!r} (expected one of: {choices})",
            data={"variant": text},
        )
