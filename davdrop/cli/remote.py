"""Remote Typer app factory."""

import typer

from davdrop.api.remote.cmd_check import cmd_check
from davdrop.cli._handle_stage_result import _handle_stage_result


def remote() -> typer.Typer:
    """Create and configure the remote Typer app."""
    app = typer.Typer(
        name="remote",
        help="WebDAV server operations",
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

    @app.command(name="check")
    def check_cmd() -> None:
        """Test the WebDAV connection."""
        _handle_stage_result(cmd_check)()

    return app
