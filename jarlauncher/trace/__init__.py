from .trace_emitter import LAUNCH_EVENT_TYPES, TraceEmitter
from .replay import Replay

__all__ = ["LAUNCH_EVENT_TYPES", "TraceEmitter", "Replay"]
