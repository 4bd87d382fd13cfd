"""Resolve Typer app factory."""

import typer

from davdrop.api.resolve.cmd_simulate import cmd_simulate
from davdrop.cli._handle_stage_result import _handle_stage_result


def resolve() -> typer.Typer:
    """Create and configure the resolve Typer app."""
    app = typer.Typer(
        name="resolve",
        help="Upload destination preview",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="simulate")
    def simulate_cmd(
        file_path: str = typer.Argument(..., help="Local file to simulate dropping"),
        note_folder: str = typer.Option("/", "--note-folder", "-n", help="Vault-relative folder of the target note"),
        offline: bool = typer.Option(False, "--offline", help="Do not ask the server whether the file exists"),
    ) -> None:
        """Show where a dropped file would go and which link would be inserted."""
        _handle_stage_result(cmd_simulate)(file_path, note_folder, check_remote=not offline)

    return app
