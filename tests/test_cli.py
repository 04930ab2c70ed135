from pathlib import Path
from sys import platform
from unittest.mock import patch

from pytest import CaptureFixture, MonkeyPatch, fixture, mark, raises

from netlinx_compile.cli import main
from netlinx_compile.configuring import settings as settings_module

fake_compiler_script = """\
#!/bin/sh
if [ ! -f "$1" ]; then
  echo "ERROR: Could not open file $1"
  exit 1
fi
cat "$1"
echo "NetLinx Compile Complete"
"""


@fixture
def working_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    working_dir = tmp_path / "project"
    working_dir.mkdir()
    (working_dir / "netlinx-compile.yml").write_text(
        "compiler_candidates: []\n", encoding="utf8"
    )
    monkeypatch.chdir(working_dir)
    monkeypatch.setattr(settings_module, "_user_config_dir", tmp_path)
    return working_dir


@fixture
def fake_compiler(tmp_path: Path) -> Path:
    path = tmp_path / "nlrc"
    path.write_text(fake_compiler_script, encoding="utf8")
    path.chmod(0o755)
    return path


def run_netlinx_compile(*args: str) -> None:
    with patch("sys.argv", ["netlinx-compile", *args]):
        try:
            main()
        except SystemExit as e:
            if e.code != 0:
                raise e


@mark.skipif(platform == "win32", reason="uses a POSIX shell script")
def test_compile(
    working_dir: Path, fake_compiler: Path, capsys: CaptureFixture[str]
) -> None:
    (working_dir / "main.axs").write_text(
        "WARNING: main.axs(2): C10571: converting type\n", encoding="utf8"
    )

    run_netlinx_compile("compile", "main.axs", "--compiler-path", str(fake_compiler))

    assert "(0 errors, 1 warnings)" in " ".join(capsys.readouterr().out.split())


@mark.skipif(platform == "win32", reason="uses a POSIX shell script")
def test_compile_failure(working_dir: Path, fake_compiler: Path) -> None:
    (working_dir / "main.axs").write_text(
        "ERROR: main.axs(2): C10580: syntax error\n", encoding="utf8"
    )

    with raises(SystemExit) as exc_info:
        run_netlinx_compile(
            "compile", "main.axs", "missing.axs", "--compiler-path", str(fake_compiler)
        )

    assert exc_info.value.code == 1


def test_no_compiler(working_dir: Path) -> None:
    (working_dir / "main.axs").write_text("", encoding="utf8")

    with raises(SystemExit) as exc_info:
        run_netlinx_compile(
            "compile", "main.axs", "--compiler-path", str(working_dir / "nothing")
        )

    assert exc_info.value.code == 1


def test_unhandled_extension(working_dir: Path) -> None:
    with raises(SystemExit) as exc_info:
        run_netlinx_compile(
            "compile", "workspace.apw", "--compiler-path", str(working_dir)
        )

    assert exc_info.value.code == 1


def test_print_settings(working_dir: Path, capsys: CaptureFixture[str]) -> None:
    run_netlinx_compile("print-settings")

    assert "shim_launcher" in capsys.readouterr().out
