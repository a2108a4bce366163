"""Newman command-line engine adapter."""

from __future__ import annotations

import logging
import shlex
import subprocess
import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path

from postman_suite_runner.report_targets import JSON_REPORTER, HtmlExtraOptions

from .engine_contracts import EngineError, EngineInvocation, RunSummary
from .summary_reader import read_run_summary

CommandRunner = Callable[[tuple[str, ...]], int]

_LOGGER = logging.getLogger(__name__)


class NewmanEngine:  # pylint: disable=too-few-public-methods
    """Runs a collection through the ``newman`` executable.

    Newman's console reporter writes straight to the inherited stdout, so progress
    is visible while the run is in flight. The outcome is always taken from the
    json reporter export, never from Newman's exit status.
    """

    def __init__(self, executable: str = "newman", run_command: CommandRunner | None = None):
        self._executable = executable
        self._run_command = run_command or _run_newman_command

    def run(self, invocation: EngineInvocation) -> RunSummary:
        info = invocation.collection.get("info")
        collection_name = info.get("name", "") if isinstance(info, Mapping) else ""
        _LOGGER.debug("running collection %r from %s", collection_name, invocation.collection_path)
        with tempfile.TemporaryDirectory(prefix="newman-summary-") as scratch_dir:
            summary_path = invocation.report_target.export_for(JSON_REPORTER) or (
                Path(scratch_dir) / "summary.json"
            )
            command = build_newman_command(
                invocation, summary_path=summary_path, executable=self._executable
            )
            return_code = self._run_command(command)
            _LOGGER.debug("newman exited with status %s", return_code)
            if not summary_path.exists():
                raise EngineError(
                    f"Newman exited with status {return_code} without writing a run summary."
                )
            return read_run_summary(summary_path)


def build_newman_command(
    invocation: EngineInvocation, *, summary_path: Path, executable: str = "newman"
) -> tuple[str, ...]:
    """Translate an invocation into a ``newman run`` argument list."""
    reporters = list(invocation.reporters)
    if JSON_REPORTER not in reporters:
        reporters.append(JSON_REPORTER)

    command = [
        executable,
        "run",
        str(invocation.collection_path),
        "--environment",
        str(invocation.environment_path),
        "--reporters",
        ",".join(reporters),
        "--timeout-request",
        str(invocation.timeout_request_ms),
        "--delay-request",
        str(invocation.delay_request_ms),
    ]
    for reporter, export_path in invocation.report_target.exports.items():
        if reporter != JSON_REPORTER:
            command.extend((f"--reporter-{reporter}-export", str(export_path)))
    command.extend(("--reporter-json-export", str(summary_path)))
    if invocation.report_target.htmlextra is not None:
        command.extend(_htmlextra_arguments(invocation.report_target.htmlextra))
    if invocation.bail:
        command.append("--bail")
    if invocation.folder:
        command.extend(("--folder", invocation.folder))
    return tuple(command)


def _htmlextra_arguments(options: HtmlExtraOptions) -> list[str]:
    prefix = "--reporter-htmlextra-"
    arguments = [
        f"{prefix}template",
        options.template,
        f"{prefix}browserTitle",
        options.browser_title,
        f"{prefix}title",
        options.title,
        f"{prefix}titleSize",
        str(options.title_size),
    ]
    for flag, enabled in (
        ("showOnlyFails", options.show_only_fails),
        ("noSyntaxHighlighting", options.no_syntax_highlighting),
        ("testPaging", options.test_paging),
        ("omitHeaders", options.omit_headers),
    ):
        if enabled:
            arguments.append(f"{prefix}{flag}")
    return arguments


def _run_newman_command(command: tuple[str, ...]) -> int:
    """Run Newman and wrap process start-up errors in EngineError."""
    _LOGGER.debug("executing %s", shlex.join(command))
    try:
        completed = subprocess.run(list(command), check=False)
    except FileNotFoundError as exc:
        raise EngineError(f"Newman executable not found: {command[0]}") from exc
    except OSError as exc:
        raise EngineError(f"Failed to start Newman: {exc}") from exc
    return completed.returncode
