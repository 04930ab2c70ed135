from collections.abc import Sequence
from re import IGNORECASE, MULTILINE
from re import compile as re_compile

from ..models import CompilerResult
from .protocols import ResultBuilderProtocol

COMPLETION_MARKER = "NetLinx Compile Complete"

_completion_pattern = re_compile(COMPLETION_MARKER, IGNORECASE)
# Reports look like `ERROR: C:\path\file.axs(12): C10580: message`. The summary line
# (`1 error(s), 2 warning(s)`) must not be matched.
_error_pattern = re_compile(r"^\s*ERROR:", MULTILINE)
_warning_pattern = re_compile(r"^\s*WARNING:", MULTILINE)


class ResultBuilder(ResultBuilderProtocol):
    """Turn the output of one compiler invocation into a `CompilerResult`."""

    def parse(
        self,
        stream: str,
        target_file: str,
        include_paths: Sequence[str] = (),
        module_paths: Sequence[str] = (),
        library_paths: Sequence[str] = (),
    ) -> CompilerResult:
        errors = warnings = None
        if _completion_pattern.search(stream) is not None:
            errors = len(_error_pattern.findall(stream))
            warnings = len(_warning_pattern.findall(stream))
        return CompilerResult(
            target_file=target_file,
            compiler_include_paths=tuple(include_paths),
            compiler_module_paths=tuple(module_paths),
            compiler_library_paths=tuple(library_paths),
            errors=errors,
            warnings=warnings,
            stream=stream,
        )
