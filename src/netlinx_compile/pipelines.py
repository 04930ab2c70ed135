from collections.abc import Iterable
from logging import getLogger
from pathlib import Path

from .components.extension_handler import find_handler
from .components.factory import SettingsFactory
from .configuring.settings import Settings
from .models import CompilerResult

_logger = getLogger(__name__)


def compile_files(
    settings: Settings,
    files: Iterable[Path],
    include_paths: Iterable[str] = (),
    module_paths: Iterable[str] = (),
    library_paths: Iterable[str] = (),
) -> list[CompilerResult]:
    """Compile each file with the search paths of the settings and the ones given.

    Args:
        settings: Settings used to locate and run the compiler.
        files: Source files to compile.
        include_paths: Include directories added after the ones of the settings.
        module_paths: Module directories added after the ones of the settings.
        library_paths: Library directories added after the ones of the settings.

    Returns:
        One result per file, in the order of `files`.
    """
    factory = SettingsFactory(settings)
    compiler = factory.compiler()
    handlers = factory.extension_handlers()
    files = list(files)
    compilables = [
        find_handler(file, handlers).build(
            file,
            include_paths=(*settings.include_paths, *include_paths),
            module_paths=(*settings.module_paths, *module_paths),
            library_paths=(*settings.library_paths, *library_paths),
        )
        for file in files
    ]
    _logger.info(f"Compiling {len(compilables)} files.")
    results = []
    for compilable in compilables:
        results.extend(compiler.compile(compilable))
    return results
