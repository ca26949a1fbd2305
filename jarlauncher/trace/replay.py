from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional


class Replay:
    """
    Reads launch events back from a trace file written by TraceEmitter.
    """

    def __init__(self, path: Path):
        self._path = path

    def _iter_all(self) -> Iterator[Dict[str, Any]]:
        if not self._path.exists():
            return
        with self._path.open("r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    yield json.loads(line)

    def events(
        self,
        *,
        event_type: Optional[str] = None,
        run_id: Optional[str] = None,
        tail: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        out = [
            e
            for e in self._iter_all()
            if (event_type is None or e.get("event_type") == event_type)
            and (run_id is None or e.get("run_id") == run_id)
        ]
        if tail is not None:
            out = out[-tail:] if tail > 0 else []
        return out

    def commands(self, run_id: Optional[str] = None) -> List[List[str]]:
        """Command lines recorded by `command_built` events, oldest first."""
        return [e["data"]["command"] for e in self.events(event_type="command_built", run_id=run_id)]
