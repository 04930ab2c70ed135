from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import CompilerResult


class CompilableProtocol(Protocol):
    """Anything that can be handed to a compiler.

    Only the four sequences are read. They are not validated: target files that do \
    not exist are reported by the compiler as failed results.
    """

    @property
    def compiler_target_files(self) -> Sequence[str]: ...

    @property
    def compiler_include_paths(self) -> Sequence[str]: ...

    @property
    def compiler_module_paths(self) -> Sequence[str]: ...

    @property
    def compiler_library_paths(self) -> Sequence[str]: ...


class PathCheckerProtocol(Protocol):
    def exists(self, path: str) -> bool: ...


class ProcessRunnerProtocol(Protocol):
    def execute(
        self, command: str | Sequence[str], timeout: float | None = None
    ) -> str:
        """Run a command until it exits and return its merged stdout and stderr.

        Args:
            command: Shell command string or argument vector.
            timeout: Seconds to wait before killing the process. None waits forever.

        Returns:
            Everything the process wrote, possibly truncated if it was killed.
        """


class ResultBuilderProtocol(Protocol):
    def parse(
        self,
        stream: str,
        target_file: str,
        include_paths: Sequence[str] = (),
        module_paths: Sequence[str] = (),
        library_paths: Sequence[str] = (),
    ) -> "CompilerResult": ...


class CompilerProtocol(Protocol):
    def compile(self, compilable: CompilableProtocol) -> list["CompilerResult"]: ...
