from collections.abc import Iterable, Sequence
from logging import getLogger
from pathlib import Path, PureWindowsPath
from sys import platform

from ..exceptions import NoCompilerError
from ..models import CompilerCandidate, CompilerResult
from .process import FileSystemPathChecker, SubprocessRunner
from .protocols import (
    CompilableProtocol,
    CompilerProtocol,
    PathCheckerProtocol,
    ProcessRunnerProtocol,
    ResultBuilderProtocol,
)
from .result_builder import ResultBuilder

_executable = "nlrc.exe"
_install_dirs = (
    "Program Files (x86)/Common Files/AMXShare/COM",
    "Program Files/Common Files/AMXShare/COM",
)


def default_compiler_candidates(
    shim_root: str = "~/.wine", native_os: bool | None = None
) -> tuple[CompilerCandidate, ...]:
    """List the locations where the compiler is usually installed, in probe order.

    Args:
        shim_root: Root of the Wine prefix in which the compiler may be installed.
        native_os: Whether the compiler can run natively. Defaults to whether the \
            current platform is Windows. The Wine locations are only listed when \
            it cannot.

    Returns:
        The candidates, native locations first.
    """
    if native_os is None:
        native_os = platform == "win32"
    candidates = [
        CompilerCandidate(
            "C:\\" + install_dir.replace("/", "\\") + "\\" + _executable, shim=False
        )
        for install_dir in _install_dirs
    ]
    if not native_os:
        candidates.extend(
            CompilerCandidate(
                f"{shim_root.rstrip('/')}/drive_c/{install_dir}/{_executable}",
                shim=True,
            )
            for install_dir in _install_dirs
        )
    return tuple(candidates)


class Compiler(CompilerProtocol):
    """Run the NetLinx compiler on every target file of a compilable.

    The compiler binary is located once, when the instance is created, and reused \
    for every compilation.
    """

    def __init__(
        self,
        compiler_path: str | None = None,
        *,
        candidates: Iterable[CompilerCandidate] | None = None,
        shim_launcher: str = "wine",
        shim_root: str = "~/.wine",
        default_library_paths: Iterable[str] = (),
        timeout: float | None = None,
        path_checker: PathCheckerProtocol | None = None,
        process_runner: ProcessRunnerProtocol | None = None,
        result_builder: ResultBuilderProtocol | None = None,
    ) -> None:
        self._logger = getLogger(__name__)
        self._shim_launcher = shim_launcher
        self._shim_root = shim_root
        self._default_library_paths = tuple(default_library_paths)
        self._timeout = timeout
        self._path_checker = path_checker or FileSystemPathChecker()
        self._process_runner = process_runner or SubprocessRunner()
        self._result_builder = result_builder or ResultBuilder()
        if candidates is None:
            candidates = default_compiler_candidates(shim_root)
        self._compiler_path, self._use_shim = self._find_compiler(
            compiler_path, candidates
        )
        self._logger.debug(
            "Using compiler %s%s",
            self._compiler_path,
            f" through {shim_launcher}" if self._use_shim else "",
        )

    @property
    def compiler_path(self) -> str:
        return self._compiler_path

    @property
    def use_shim(self) -> bool:
        return self._use_shim

    def compile(self, compilable: CompilableProtocol) -> list[CompilerResult]:
        include_paths = tuple(getattr(compilable, "compiler_include_paths", None) or ())
        module_paths = tuple(getattr(compilable, "compiler_module_paths", None) or ())
        library_paths = tuple(getattr(compilable, "compiler_library_paths", None) or ())
        library_paths += tuple(
            path for path in self._default_library_paths if path not in library_paths
        )
        results = []
        for target_file in compilable.compiler_target_files:
            command = self.command(
                target_file, include_paths, module_paths, library_paths
            )
            self._logger.debug("Running %s", command)
            stream = self._process_runner.execute(command, timeout=self._timeout)
            result = self._result_builder.parse(
                stream, target_file, include_paths, module_paths, library_paths
            )
            if result.success:
                self._logger.info(
                    "Compiled %s with %d errors and %d warnings",
                    target_file,
                    result.errors,
                    result.warnings,
                )
            elif result.errors is None:
                self._logger.warning("Compilation of %s did not complete", target_file)
            else:
                self._logger.warning(
                    "Compilation of %s failed with %d errors and %d warnings",
                    target_file,
                    result.errors,
                    result.warnings,
                )
            results.append(result)
        return results

    def command(
        self,
        target_file: str,
        include_paths: Sequence[str] = (),
        module_paths: Sequence[str] = (),
        library_paths: Sequence[str] = (),
    ) -> str | list[str]:
        """Build the command that compiles `target_file`.

        Args:
            target_file: Path of the source file to compile.
            include_paths: Directories searched for include files.
            module_paths: Directories searched for compiled modules.
            library_paths: Directories searched for libraries.

        Returns:
            An argument vector when the compiler runs directly, a shell command \
            string when it runs through the compatibility shim.
        """
        flags = [
            *(("-I", path) for path in include_paths),
            *(("-M", path) for path in module_paths),
            *(("-L", path) for path in library_paths),
        ]
        if not self._use_shim:
            return [
                self._compiler_path,
                target_file,
                *(flag + path for flag, path in flags),
            ]
        return " ".join(
            [
                self._shim_launcher,
                _quote(self._compiler_path),
                _quote(target_file),
                *(flag + _quote(path) for flag, path in flags),
            ]
        )

    def _find_compiler(
        self, compiler_path: str | None, candidates: Iterable[CompilerCandidate]
    ) -> tuple[str, bool]:
        if compiler_path is not None:
            if self._path_checker.exists(compiler_path):
                return _expand(compiler_path), self._is_under_shim_root(compiler_path)
            self._logger.warning(
                "Compiler not found at %s, trying default locations", compiler_path
            )
        for candidate in candidates:
            if self._path_checker.exists(candidate.path):
                return _expand(candidate.path), candidate.shim
        msg = "could not find the NetLinx compiler"
        if compiler_path is not None:
            msg += f" at {compiler_path} nor"
        msg += " in any of its default install locations"
        raise NoCompilerError(msg)

    def _is_under_shim_root(self, path: str) -> bool:
        return Path(path).expanduser().is_relative_to(
            Path(self._shim_root).expanduser()
        )


def _expand(path: str) -> str:
    if PureWindowsPath(path).drive:
        return path
    return str(Path(path).expanduser().absolute())


def _quote(value: str) -> str:
    # Characters still special to the shell inside double quotes.
    for char in ("\\", '"', "$", "`"):
        value = value.replace(char, "\\" + char)
    return f'"{value}"'
