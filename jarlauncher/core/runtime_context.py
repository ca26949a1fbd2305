from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RuntimeContext:
    """
    Per-invocation settings for planning a launch.

    - trace_path=None disables the JSONL trace.
    - java_home=None falls back to $JAVA_HOME, then to `java` on PATH.
    """

    run_id: str
    trace_path: Optional[Path] = None
    java_home: Optional[str] = None
