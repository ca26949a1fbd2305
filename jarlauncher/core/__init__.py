from .errors import ConfigError, LauncherError, ValidationError
from .variant import Variant
from .launch_request import ExecutionOptions, LaunchRequest
from .passthrough import RESERVED_APP_ARG_PREFIXES, PassthroughArgs, validate_app_args
from .command_builder import (
  build_command,
  build_flat_executable_command,
  build_managed_runtime_command,
  java_executable,
)
from .runtime_context import RuntimeContext
from .launcher import LaunchPlan, LaunchPlanner

__all__ = [
  "LauncherError",
  "ValidationError",
  "ConfigError",
  "Variant",
  "ExecutionOptions",
  "LaunchRequest",
  "RESERVED_APP_ARG_PREFIXES",
  "PassthroughArgs",
  "validate_app_args",
  "build_command",
  "build_managed_runtime_command",
  "build_flat_executable_command",
  "java_executable",
  "RuntimeContext",
  "LaunchPlan",
  "LaunchPlanner",
]
