"""Drop Typer app factory."""

import typer

from davdrop.api.drop.cmd_run import cmd_run
from davdrop.cli._handle_stage_result import _handle_stage_result


def drop() -> typer.Typer:
    """Create and configure the drop Typer app."""
    app = typer.Typer(
        name="drop",
        help="Upload files and link them from a note",
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

    @app.command(name="run")
    def run_cmd(
        note: str = typer.Argument(..., help="Markdown note receiving the links"),
        files: list[str] = typer.Argument(..., help="Files to drop, handled in order"),
        vault: str | None = typer.Option(None, "--vault", help="Vault root (default: nearest folder with .obsidian)"),
        cursor: int | None = typer.Option(None, "--cursor", "-c", help="Character offset to insert at (default: end)"),
    ) -> None:
        """Drop files onto a note."""
        _handle_stage_result(cmd_run)(note, files, vault=vault, cursor=cursor)

    return app
