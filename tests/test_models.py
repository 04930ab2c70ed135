from dataclasses import FrozenInstanceError
from pathlib import Path

from pytest import MonkeyPatch, raises

from netlinx_compile.models import CompilerResult, SourceFile


def test_result_requires_both_counts() -> None:
    with raises(ValueError, match="both"):
        CompilerResult(target_file="main.axs", errors=0)
    with raises(ValueError, match="both"):
        CompilerResult(target_file="main.axs", warnings=3)


def test_result_is_immutable() -> None:
    result = CompilerResult(target_file="main.axs", errors=0, warnings=0)

    with raises(FrozenInstanceError):
        result.errors = 1  # type: ignore[misc]


def test_result_success() -> None:
    assert CompilerResult(target_file="a.axs", errors=0, warnings=4).success
    assert not CompilerResult(target_file="a.axs", errors=2, warnings=0).success
    assert not CompilerResult(target_file="a.axs").success


def test_source_file_from_path(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    source_file = SourceFile.from_path(
        "main.axs", include_paths=["include"], module_paths=iter(["modules"])
    )

    assert source_file.compiler_target_files == (str(tmp_path / "main.axs"),)
    assert source_file.compiler_include_paths == ("include",)
    assert source_file.compiler_module_paths == ("modules",)
    assert source_file.compiler_library_paths == ()
