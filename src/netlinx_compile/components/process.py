from collections.abc import Sequence
from contextlib import suppress
from logging import getLogger
from pathlib import Path
from subprocess import PIPE, STDOUT, Popen, TimeoutExpired
from sys import platform

from .protocols import PathCheckerProtocol, ProcessRunnerProtocol

_logger = getLogger(__name__)


class FileSystemPathChecker(PathCheckerProtocol):
    def exists(self, path: str) -> bool:
        return Path(path).expanduser().exists()


class SubprocessRunner(ProcessRunnerProtocol):
    """Run commands with `subprocess`, merging stderr into stdout."""

    def execute(
        self, command: str | Sequence[str], timeout: float | None = None
    ) -> str:
        shell = isinstance(command, str)
        try:
            process = Popen(
                command if shell else list(command),
                shell=shell,
                stdout=PIPE,
                stderr=STDOUT,
                encoding="utf8",
                errors="replace",
                start_new_session=platform != "win32",
            )
        except OSError as e:
            _logger.warning("Could not start %s: %s", command, e)
            return str(e)
        with process:
            try:
                output, _ = process.communicate(timeout=timeout)
            except TimeoutExpired:
                _logger.warning("Killing %s after %s seconds", command, timeout)
                _kill(process)
                output, _ = process.communicate()
        return output or ""


def _kill(process: Popen[str]) -> None:
    # Descendants (sh, wine) keep the output pipe open: kill the whole session.
    if platform == "win32":
        process.kill()
        return
    from os import killpg
    from signal import SIGKILL

    with suppress(ProcessLookupError):
        killpg(process.pid, SIGKILL)
