from pathlib import Path

from . import app


@app.command()
def compile(  # noqa: A001
    files: list[Path],
    /,
    *,
    include_paths: list[str] | None = None,
    module_paths: list[str] | None = None,
    library_paths: list[str] | None = None,
    compiler_path: str | None = None,
    timeout: float | None = None,
    verbose: bool = False,
    workdir: Path = Path(),
) -> None:
    """Compile NetLinx source FILES.

    Args:
        files: Source files to compile
        include_paths: Directories searched for include files
        module_paths: Directories searched for compiled modules
        library_paths: Directories searched for libraries
        compiler_path: Path to the compiler binary, overriding the settings
        timeout: Seconds after which a compilation is aborted
        verbose: Print the compiler output of every file, not only of failed ones
        workdir: Directory in which to look for a settings file

    """
    from rich import print as rich_print
    from rich.markup import escape

    from ..configuring.settings import Settings
    from ..pipelines import compile_files

    settings = Settings.from_yaml(
        workdir, compiler_path=compiler_path, timeout=timeout
    )
    results = compile_files(
        settings,
        files,
        include_paths=include_paths or (),
        module_paths=module_paths or (),
        library_paths=library_paths or (),
    )
    for result in results:
        if result.success:
            status = "[green]ok[/]"
        elif result.errors is None:
            status = "[red]not compiled[/]"
        else:
            status = "[red]failed[/]"
        counts = (
            ""
            if result.errors is None
            else f" ({result.errors} errors, {result.warnings} warnings)"
        )
        rich_print(f"{status} {escape(result.target_file)}{counts}")
        if verbose or not result.success:
            rich_print(escape(result.stream))
    if not all(result.success for result in results):
        raise SystemExit(1)
