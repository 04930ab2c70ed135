from functools import reduce
from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, Field

from .. import app_name
from ..components.compiler import default_compiler_candidates
from ..models import CompilerCandidate
from ..utils import load_all_yamls

settings_filename = "netlinx-compile.yml"
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    compiler_path: str | None = None
    shim_launcher: str = "wine"
    shim_root: str = "~/.wine"
    compiler_candidates: tuple[CompilerCandidate, ...] = Field(
        default_factory=lambda data: default_compiler_candidates(data["shim_root"])
    )
    include_paths: tuple[str, ...] = ()
    module_paths: tuple[str, ...] = ()
    library_paths: tuple[str, ...] = ()
    default_library_paths: tuple[str, ...] = ()
    timeout: float | None = Field(default=None, gt=0)

    @classmethod
    def from_yaml(cls, directory: Path, **overrides: Any) -> Self:
        """Load the settings from the user config dir and `directory`.

        The `netlinx-compile.yml` file of `directory` takes precedence over the one \
        found in the user config dir. Missing files are ignored.

        Args:
            directory: Directory in which to look for a settings file.
            overrides: Values taking precedence over every settings file. None \
                values are ignored.

        Returns:
            The validated settings.
        """
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            (
                c
                for c in load_all_yamls(
                    d / settings_filename
                    for d in (_user_config_dir, directory.resolve())
                )
                if c
            ),
            {},
        )
        content.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(content)
