from collections.abc import Iterable
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict


class SourceFile(BaseModel):
    """Compilable made of a single NetLinx source file (`.axs`)."""

    model_config = ConfigDict(frozen=True)

    compiler_target_files: tuple[str, ...]
    compiler_include_paths: tuple[str, ...] = ()
    compiler_module_paths: tuple[str, ...] = ()
    compiler_library_paths: tuple[str, ...] = ()

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        include_paths: Iterable[str] = (),
        module_paths: Iterable[str] = (),
        library_paths: Iterable[str] = (),
    ) -> Self:
        """Create a compilable targeting the file at `path`.

        Args:
            path: Path to the source file. It is made absolute but does not need \
                to exist: a missing file is reported by the compiler itself.
            include_paths: Directories searched for include files.
            module_paths: Directories searched for compiled modules.
            library_paths: Directories searched for libraries.

        Returns:
            The compilable.
        """
        return cls(
            compiler_target_files=(str(Path(path).expanduser().absolute()),),
            compiler_include_paths=tuple(include_paths),
            compiler_module_paths=tuple(module_paths),
            compiler_library_paths=tuple(library_paths),
        )
