"""Model classes for netlinx-compile.

- [`compilation`][netlinx_compile.models.compilation] contains the per-file \
    compiler outcome and the compiler binary candidates
- [`compilable`][netlinx_compile.models.compilable] contains concrete compilables, \
    objects that list target files and search paths for the compiler
"""

from .compilable import SourceFile
from .compilation import CompilerCandidate, CompilerResult

__all__ = ["CompilerCandidate", "CompilerResult", "SourceFile"]
