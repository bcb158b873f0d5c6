"""strongname CLI application with Typer."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from strongname import __version__
from strongname.bootstrap import bootstrap_application
from strongname.config import get_settings, set_settings
from strongname.errors import StrongNameError
from strongname.utils.logs import configure_logging

if TYPE_CHECKING:
    from strongname.bootstrap import ApplicationContainer

app = typer.Typer(
    name="strongname",
    help="Locate sn.exe and resign, verify or create strong name keys",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"strongname version {__version__}")
        raise typer.Exit()


@contextmanager
def _tool_errors() -> Iterator[None]:
    """Report strong name failures as a one-line error and exit code 1."""

    try:
        yield
    except StrongNameError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _container() -> "ApplicationContainer":
    return bootstrap_application(get_settings())


ToolPathOption = Annotated[
    Path | None,
    typer.Option("--tool-path", help="Use this sn.exe instead of searching for it"),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option("--working-dir", help="Working directory for the sn.exe process"),
]


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable debug logging"),
    ] = False,
) -> None:
    """strongname - drive the .NET strong name tool from build scripts."""
    settings = get_settings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
        set_settings(settings)
    configure_logging(settings.log_level)


@app.command("locate")
def locate() -> None:
    """Print the resolved path to sn.exe."""
    container = _container()
    with _tool_errors():
        path = container.resolver.get_path()
    typer.echo(str(path))


@app.command("verify")
def verify(
    assemblies: Annotated[
        list[Path],
        typer.Argument(help="Assemblies to verify, processed in order"),
    ],
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Force verification even if the assembly is skip-verified (-vf)",
        ),
    ] = False,
    tool_path: ToolPathOption = None,
    working_dir: WorkingDirOption = None,
) -> None:
    """Verify that assemblies have a valid strong name."""
    container = _container()
    tool_settings = container.settings.tool_settings(
        force_verification=True if force else None,
        tool_path=tool_path,
        working_directory=working_dir,
    )
    with _tool_errors():
        # One call per file so each success is reported before a later failure.
        for assembly in assemblies:
            container.service.verify(assembly, tool_settings)
            typer.secho(f"Verified {assembly}", fg=typer.colors.GREEN)


@app.command("resign")
def resign(
    assemblies: Annotated[
        list[Path],
        typer.Argument(help="Delay-signed assemblies to resign, processed in order"),
    ],
    container_name: Annotated[
        str | None,
        typer.Option(
            "--container",
            "-c",
            help="Key container holding the strong name key (STRONGNAME_CONTAINER)",
        ),
    ] = None,
    tool_path: ToolPathOption = None,
    working_dir: WorkingDirOption = None,
) -> None:
    """Resign delay-signed assemblies with a key container."""
    container = _container()
    tool_settings = container.settings.tool_settings(
        container=container_name,
        tool_path=tool_path,
        working_directory=working_dir,
    )
    with _tool_errors():
        # Per file, as in verify.
        for assembly in assemblies:
            container.service.resign(assembly, tool_settings)
            typer.secho(f"Resigned {assembly}", fg=typer.colors.GREEN)


@app.command("create-key")
def create_key(
    key_file: Annotated[Path, typer.Argument(help="Key file (.snk) to create")],
    tool_path: ToolPathOption = None,
    working_dir: WorkingDirOption = None,
) -> None:
    """Generate a new strong name key pair file."""
    container = _container()
    tool_settings = container.settings.tool_settings(
        tool_path=tool_path,
        working_directory=working_dir,
    )
    with _tool_errors():
        container.service.create_key(key_file, tool_settings)
    typer.secho(f"Created {key_file}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
