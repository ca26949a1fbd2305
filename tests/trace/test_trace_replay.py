import tempfile
import unittest
from pathlib import Path

from jarlauncher.trace import Replay, TraceEmitter


class TestTrace(unittest.TestCase):
    def _write_two_runs(self, path: Path) -> None:
        for run_id, jar in (("r1", "/a.jar"), ("r2", "/b.jar")):
            trace = TraceEmitter(path, run_id=run_id)
            trace.emit("launch_requested", variant="plain-uber", message="Launch requested")
            trace.emit("command_built", data={"command": ["java", "-cp", jar]})

    def test_emit_creates_parent_and_writes_events(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "nested" / "trace.jsonl"
            self._write_two_runs(path)
            events = Replay(path).events()
        self.assertEqual(len(events), 4)
        self.assertEqual(events[0]["variant"], "plain-uber")
        self.assertNotIn("variant", events[1])
        self.assertNotIn("message", events[1])
        self.assertTrue(events[0]["ts"].endswith("Z"))

    def test_filters_by_event_type_and_run_id(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "trace.jsonl"
            self._write_two_runs(path)
            replay = Replay(path)
            built = replay.events(event_type="command_built")
            r2 = replay.events(run_id="r2")
            commands = replay.commands(run_id="r1")
        self.assertEqual([e["run_id"] for e in built], ["r1", "r2"])
        self.assertEqual({e["run_id"] for e in r2}, {"r2"})
        self.assertEqual(commands, [["java", "-cp", "/a.jar"]])

    def test_tail(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "trace.jsonl"
            self._write_two_runs(path)
            replay = Replay(path)
            last = replay.events(tail=1)
            none = replay.events(tail=0)
            everything = replay.events(tail=10)
        self.assertEqual(last[0]["data"]["command"][-1], "/b.jar")
        self.assertEqual(none, [])
        self.assertEqual(len(everything), 4)

    def test_unknown_event_type_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TraceEmitter(None, run_id="r").emit("step_started")

    def test_none_path_is_noop(self) -> None:
        TraceEmitter(None, run_id="r").emit("launch_requested")

    def test_replay_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(Replay(Path(td) / "missing.jsonl").events(), [])


if __name__ == "__main__":
    unittest.main()
