from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..exceptions import UnhandledExtensionError
from ..models import SourceFile


@dataclass(frozen=True)
class ExtensionHandler:
    """Map file extensions to the compilable class able to handle them."""

    extensions: tuple[str, ...] = ()
    handler_class: type[SourceFile] = SourceFile

    def handles(self, path: str | Path) -> bool:
        suffix = Path(path).suffix.lower()
        return any(suffix == extension.lower() for extension in self.extensions)

    def build(self, path: str | Path, **kwargs: Any) -> SourceFile:
        return self.handler_class.from_path(path, **kwargs)


def default_extension_handlers() -> tuple[ExtensionHandler, ...]:
    return (ExtensionHandler(extensions=(".axs",), handler_class=SourceFile),)


def find_handler(
    path: str | Path, handlers: Iterable[ExtensionHandler]
) -> ExtensionHandler:
    """Find the first handler able to handle `path`.

    Args:
        path: Path of the file to compile.
        handlers: Handlers to try, in order.

    Raises:
        UnhandledExtensionError: Raised if no handler accepts the file extension.

    Returns:
        The matching handler.
    """
    for handler in handlers:
        if handler.handles(path):
            return handler
    msg = f"no handler for the extension of {path}"
    raise UnhandledExtensionError(msg)
