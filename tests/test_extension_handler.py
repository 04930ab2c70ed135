from pathlib import Path

from pytest import raises

from netlinx_compile.components.extension_handler import (
    ExtensionHandler,
    default_extension_handlers,
    find_handler,
)
from netlinx_compile.exceptions import UnhandledExtensionError
from netlinx_compile.models import SourceFile


def test_exposes_extensions_and_handler_class() -> None:
    handler = ExtensionHandler()

    assert len(handler.extensions) == 0
    assert handler.handler_class is SourceFile
    assert not handler.handles("main.axs")


def test_handles_is_case_insensitive() -> None:
    handler = ExtensionHandler(extensions=(".axs",))

    assert handler.handles("main.axs")
    assert handler.handles(Path("MAIN.AXS"))
    assert not handler.handles("main.axi")
    assert not handler.handles("axs")


def test_build(tmp_path: Path) -> None:
    (handler,) = default_extension_handlers()

    source_file = handler.build(tmp_path / "main.axs", module_paths=["modules"])

    assert source_file.compiler_target_files == (str(tmp_path / "main.axs"),)
    assert source_file.compiler_module_paths == ("modules",)


def test_find_handler() -> None:
    handlers = default_extension_handlers()

    assert find_handler("main.axs", handlers) is handlers[0]
    with raises(UnhandledExtensionError):
        find_handler("workspace.apw", handlers)
