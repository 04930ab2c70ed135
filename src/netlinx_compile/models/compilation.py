from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerCandidate:
    """Location where a compiler binary may be installed.

    Attributes:
        path: Path to the binary. Can start with `~`, it is expanded when probed.
        shim: Whether a binary found at this location has to be run through the \
            compatibility shim (Wine) instead of being executed directly.
    """

    path: str
    shim: bool = False


@dataclass(frozen=True)
class CompilerResult:
    """Outcome of the compilation of a single target file.

    `errors` and `warnings` are `None` when the compiler did not report a completed \
    compilation, for example because the target file does not exist.
    """

    target_file: str
    compiler_include_paths: tuple[str, ...] = ()
    compiler_module_paths: tuple[str, ...] = ()
    compiler_library_paths: tuple[str, ...] = ()
    errors: int | None = None
    warnings: int | None = None
    stream: str = ""

    def __post_init__(self) -> None:
        if (self.errors is None) != (self.warnings is None):
            msg = "errors and warnings must be both set or both None"
            raise ValueError(msg)
        for name in (
            "compiler_include_paths",
            "compiler_module_paths",
            "compiler_library_paths",
        ):
            value: Sequence[str] = getattr(self, name)
            object.__setattr__(self, name, tuple(value))

    @property
    def success(self) -> bool:
        return self.errors == 0
