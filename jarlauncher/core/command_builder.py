from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional

from .launch_request import LaunchRequest
from .variant import Variant


JAR_FLAG = "-jar"
CLASSPATH_FLAG = "-cp"

# Main class shipped inside plain uber jars for CLI-driven execution.
CLI_ENTRY_POINT = "io.flamingock.core.cli.FlamingockCliMain"

SPRING_WEB_DISABLED = "--spring.main.web-application-type=none"
SPRING_CLI_PROFILE = "--spring.profiles.include=flamingock-cli"
SPRING_BANNER_OFF = "--spring.main.banner-mode=off"
SPRING_FLAG_PREFIX = "--spring."

CLI_MODE_FLAG = "--flamingock.cli.mode=true"
OPERATION_FLAG = "--flamingock.operation="
OUTPUT_FILE_FLAG = "--flamingock.output-file="
SPRING_LOG_LEVEL_FLAG = "--logging.level.root="
PLAIN_LOG_LEVEL_FLAG = "--flamingock.log.level="


def java_executable(java_home: Optional[str] = None) -> str:
    """
    Resolve the java binary: java_home, then $JAVA_HOME, then `java` on PATH.
    Only the planner calls this; the builders take the result as `java`.
    """
    home = java_home or os.environ.get("JAVA_HOME")
    if not home:
        return "java"
    exe = "java.exe" if os.name == "nt" else "java"
    return os.path.join(home, "bin", exe)


def _head(java: str, jvm_args: Optional[Iterable[str]]) -> List[str]:
    command = [java]
    # JVM args must precede -jar/-cp so they configure the JVM, not the application.
    command.extend(jvm_args or ())
    return command


def _tail(
    command: List[str],
    *,
    operation: Optional[str],
    output_file: Optional[str],
    log_level: Optional[str],
    log_level_flag: str,
    operation_args: Optional[Mapping[str, str]],
    app_args: Optional[Iterable[str]],
) -> List[str]:
    if operation:
        command.append(OPERATION_FLAG + operation)
    if output_file:
        command.append(OUTPUT_FILE_FLAG + output_file)
    if log_level:
        command.append(log_level_flag + log_level.upper())
    # Operation-arg keys are emitted as given: they are not checked against reserved prefixes.
    for key in sorted(operation_args or {}, key=str):
        command.append("--{}={}".format(key, operation_args[key]))
    # Last, so user properties win on "last value wins" resolution.
    command.extend(app_args or ())
    return command


def build_managed_runtime_command(
    artifact_path: str,
    operation: Optional[str],
    output_file: Optional[str],
    log_level: Optional[str],
    operation_args: Optional[Mapping[str, str]] = None,
    jvm_args: Optional[Iterable[str]] = None,
    app_args: Optional[Iterable[str]] = None,
    *,
    java: str = "java",
) -> List[str]:
    """
    java [jvm args] -jar <jar> <spring + cli flags> [generated flags] [app args]
    """
    command = _head(java, jvm_args)
    command.extend([JAR_FLAG, artifact_path])
    command.extend([SPRING_WEB_DISABLED, SPRING_CLI_PROFILE, CLI_MODE_FLAG, SPRING_BANNER_OFF])
    return _tail(
        command,
        operation=operation,
        output_file=output_file,
        log_level=log_level,
        log_level_flag=SPRING_LOG_LEVEL_FLAG,
        operation_args=operation_args,
        app_args=app_args,
    )


def build_flat_executable_command(
    artifact_path: str,
    operation: Optional[str],
    output_file: Optional[str],
    log_level: Optional[str],
    operation_args: Optional[Mapping[str, str]] = None,
    jvm_args: Optional[Iterable[str]] = None,
    app_args: Optional[Iterable[str]] = None,
    *,
    java: str = "java",
) -> List[str]:
    """
    java [jvm args] -cp <jar> <entry point> --flamingock.cli.mode=true [generated flags] [app args]

    No Spring flags: a plain uber jar has no Spring Boot launcher to read them.
    """
    command = _head(java, jvm_args)
    command.extend([CLASSPATH_FLAG, artifact_path, CLI_ENTRY_POINT])
    command.append(CLI_MODE_FLAG)
    return _tail(
        command,
        operation=operation,
        output_file=output_file,
        log_level=log_level,
        log_level_flag=PLAIN_LOG_LEVEL_FLAG,
        operation_args=operation_args,
        app_args=app_args,
    )


_BUILDERS = {
    Variant.MANAGED_RUNTIME_BUNDLE: build_managed_runtime_command,
    Variant.FLAT_EXECUTABLE_BUNDLE: build_flat_executable_command,
}


def build_command(request: LaunchRequest, variant: Variant, *, java: str = "java") -> List[str]:
    build = _BUILDERS[variant]
    return build(
        request.artifact_path,
        request.operation,
        request.output_file,
        request.log_level,
        request.operation_args,
        request.jvm_args,
        request.app_args,
        java=java,
    )
