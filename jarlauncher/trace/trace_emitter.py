from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

LAUNCH_EVENT_TYPES = ("launch_requested", "args_rejected", "command_built")


class TraceEmitter:
    """
    Appends launch-planning events to a JSONL file, one object per line:

        {"ts", "run_id", "event_type", "variant"?, "message"?, "data"?}

    path=None drops every event.
    """

    def __init__(self, path: Optional[Path], run_id: str):
        self._path = path
        self._run_id = run_id

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def emit(
        self,
        event_type: str,
        *,
        variant: str | None = None,
        message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        if event_type not in LAUNCH_EVENT_TYPES:
            raise ValueError(f"Unknown launch event type: {event_type}")
        if self._path is None:
            return
        event: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "run_id": self._run_id,
            "event_type": event_type,
        }
        if variant is not None:
            event["variant"] = variant
        if message is not None:
            event["message"] = message
        if data is not None:
            event["data"] = data

        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")
