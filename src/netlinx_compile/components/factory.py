from typing import TYPE_CHECKING

from .protocols import CompilerProtocol

if TYPE_CHECKING:
    from ..configuring.settings import Settings
    from .extension_handler import ExtensionHandler


class SettingsFactory:
    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def compiler(self) -> CompilerProtocol:
        from .compiler import Compiler

        return Compiler(
            compiler_path=self._settings.compiler_path,
            candidates=self._settings.compiler_candidates,
            shim_launcher=self._settings.shim_launcher,
            shim_root=self._settings.shim_root,
            default_library_paths=self._settings.default_library_paths,
            timeout=self._settings.timeout,
        )

    def extension_handlers(self) -> tuple["ExtensionHandler", ...]:
        from .extension_handler import default_extension_handlers

        return default_extension_handlers()
