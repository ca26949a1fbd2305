from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List

from jarlauncher.trace.trace_emitter import TraceEmitter

from .command_builder import build_command, java_executable
from .errors import ValidationError
from .launch_request import LaunchRequest
from .passthrough import validate_app_args
from .runtime_context import RuntimeContext
from .variant import Variant


@dataclass(frozen=True)
class LaunchPlan:
    run_id: str
    variant: Variant
    command: List[str]

    def shell_line(self) -> str:
        return shlex.join(self.command)


class LaunchPlanner:
    """
    Request -> Validate -> Build -> Trace.

    Hard rules:
    - passthrough validation always runs before the command is built.
    - nothing is spawned here; the plan is handed to an external process runner.
    """

    def plan(self, ctx: RuntimeContext, request: LaunchRequest, variant: Variant) -> LaunchPlan:
        trace = TraceEmitter(ctx.trace_path, run_id=ctx.run_id)

        trace.emit(
            "launch_requested",
            variant=variant.value,
            message="Launch requested",
            data={
                "artifact_path": request.artifact_path,
                "operation": request.operation,
                "jvm_args": list(request.jvm_args),
                "app_args": list(request.app_args),
            },
        )

        try:
            validate_app_args(request.app_args)
        except ValidationError as e:
            trace.emit("args_rejected", variant=variant.value, message=e.code, data=e.data)
            raise

        command = build_command(request, variant, java=java_executable(ctx.java_home))
        trace.emit("command_built", variant=variant.value, message="Command built", data={"command": command})
        return LaunchPlan(run_id=ctx.run_id, variant=variant, command=command)
