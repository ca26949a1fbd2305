from __future__ import annotations

import argparse
import json
import shlex
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from jarlauncher.config import LaunchConfig, load_launch_config
from jarlauncher.core.errors import LauncherError, ValidationError
from jarlauncher.core.launch_request import LaunchRequest
from jarlauncher.core.launcher import LaunchPlanner
from jarlauncher.core.passthrough import PassthroughArgs
from jarlauncher.core.runtime_context import RuntimeContext
from jarlauncher.core.variant import Variant
from jarlauncher.trace.replay import Replay


def _split_passthrough(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Everything after the first bare `--` is an application argument, verbatim.
    """
    argv = list(argv)
    if "--" not in argv:
        return argv, []
    idx = argv.index("--")
    return argv[:idx], argv[idx + 1 :]


_JAVA_OPT_FLAGS = ("-J", "--java-opt")


def _attach_java_opts(argv: Sequence[str]) -> List[str]:
    """
    Rewrite `-J -Xmx512m` as `--java-opt=-Xmx512m`; argparse would read the
    dash-prefixed value as an unknown option.
    """
    out: List[str] = []
    it = iter(argv)
    for tok in it:
        if tok in _JAVA_OPT_FLAGS:
            value = next(it, None)
            if value is None:
                out.append(tok)
                break
            out.append("--java-opt=" + value)
        else:
            out.append(tok)
    return out


def _parse_operation_args(pairs: Sequence[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValidationError(
                code="cli.invalid",
                message=f"--arg expects KEY=VALUE, got: {pair}",
                data={"arg": pair},
            )
        out[key] = value
    return out


def _format_cli_error(e: Exception) -> str:
    if isinstance(e, LauncherError) and isinstance(e.data, dict) and e.data:
        return str(e) + "\n" + json.dumps(e.data, ensure_ascii=False, indent=2)
    return str(e)


def cmd_build_command(args: argparse.Namespace) -> int:
    config = load_launch_config(Path(args.config)) if args.config else LaunchConfig()
    passthrough = PassthroughArgs(jvm_args=tuple(args.java_opt or ()), app_args=tuple(args.app_args))

    merged = config.merge(
        variant=Variant.parse(args.variant) if args.variant else None,
        java_home=args.java_home,
        log_level=args.log_level,
        jvm_args=passthrough.jvm_args,
        app_args=passthrough.app_args,
        operation_args=_parse_operation_args(args.arg or []),
    )
    request = LaunchRequest(
        artifact_path=args.jar,
        operation=args.operation,
        output_file=args.output_file,
        log_level=merged.log_level,
        operation_args=merged.operation_args,
        jvm_args=merged.jvm_args,
        app_args=merged.app_args,
    )
    ctx = RuntimeContext(
        run_id=args.run_id,
        trace_path=Path(args.trace) if args.trace else None,
        java_home=merged.java_home,
    )
    plan = LaunchPlanner().plan(ctx, request, merged.variant or Variant.MANAGED_RUNTIME_BUNDLE)

    if args.shell:
        print(plan.shell_line())
    else:
        print(json.dumps(plan.command, ensure_ascii=False, indent=2))
    return 0


def cmd_check_args(args: argparse.Namespace) -> int:
    PassthroughArgs(app_args=tuple(args.app_args)).validate()
    print("OK")
    return 0


def cmd_show_trace(args: argparse.Namespace) -> int:
    replay = Replay(Path(args.trace))
    if args.commands:
        for command in replay.commands(run_id=args.run_id):
            print(shlex.join(command))
        return 0

    events = replay.events(event_type=args.event_type, run_id=args.run_id, tail=args.tail)
    for e in events:
        if args.pretty:
            print(json.dumps(e, ensure_ascii=False, indent=2))
        else:
            print(json.dumps(e, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jarl",
        description="Build the java command line for running a packaged application in CLI mode",
        epilog="Arguments after '--' are passed to the application, after every generated flag.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build-command", help="Print the java command for a jar (does not run it)")
    p_build.add_argument("--jar", required=True, help="Path to the application jar")
    p_build.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        help="Jar packaging (default: config value, else spring-boot)",
    )
    p_build.add_argument("--operation", help="Operation name passed as --flamingock.operation")
    p_build.add_argument("--output-file", help="Result file passed as --flamingock.output-file")
    p_build.add_argument("--log-level", help="Log level for the application (uppercased)")
    p_build.add_argument(
        "-J",
        "--java-opt",
        action="append",
        default=[],
        metavar="JVM_ARG",
        help="JVM argument placed before -jar/-cp (repeatable). Example: -J -Xmx512m -J -Xms256m",
    )
    p_build.add_argument("--arg", action="append", default=[], metavar="KEY=VALUE", help="Operation argument (repeatable)")
    p_build.add_argument("--config", help="YAML file with launch defaults")
    p_build.add_argument("--java-home", help="JDK/JRE home (default: $JAVA_HOME, else java on PATH)")
    p_build.add_argument("--trace", help="Trace output path (jsonl)")
    p_build.add_argument("--run-id", default="run_cli", help="Run ID for trace correlation")
    p_build.add_argument("--shell", action="store_true", help="Print a single shell-quoted line instead of JSON")
    p_build.set_defaults(func=cmd_build_command)

    p_check = sub.add_parser("check-args", help="Check application arguments (after '--') against reserved flags")
    p_check.set_defaults(func=cmd_check_args)

    p_show_trace = sub.add_parser("show-trace", help="Show trace events from a JSONL file")
    p_show_trace.add_argument("--trace", required=True, help="Trace path (jsonl)")
    p_show_trace.add_argument("--event-type", help="Filter by event_type")
    p_show_trace.add_argument("--run-id", help="Filter by run_id")
    p_show_trace.add_argument("--tail", type=int, help="Show only last N events")
    p_show_trace.add_argument("--pretty", action="store_true", help="Pretty-print each event as JSON")
    p_show_trace.add_argument("--commands", action="store_true", help="Print only the built command lines, shell-quoted")
    p_show_trace.set_defaults(func=cmd_show_trace)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    own_args, app_args = _split_passthrough(sys.argv[1:] if argv is None else argv)
    own_args = _attach_java_opts(own_args)
    parser = build_parser()
    ns = parser.parse_args(own_args)
    ns.app_args = app_args
    try:
        return int(ns.func(ns))
    except Exception as e:  # noqa: BLE001
        print(_format_cli_error(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
