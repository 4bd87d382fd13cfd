"""Config Typer app factory."""

import typer

from davdrop.api.config.cmd_set import cmd_set
from davdrop.api.config.cmd_show import cmd_show
from davdrop.api.config.cmd_version import cmd_version
from davdrop.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
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

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Section name (remote, upload, preview, log); omit to list"),
    ) -> None:
        """Show configuration sections or one section."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="set")
    def set_cmd(
        key: str = typer.Argument(..., help="Dot-path key, e.g. upload.path_mode"),
        value: str = typer.Argument("", help="Value, parsed as JSON when possible"),
        delete: bool = typer.Option(False, "--delete", help="Remove the key so its default applies"),
    ) -> None:
        """Set or remove a configuration value."""
        _handle_stage_result(cmd_set)(key, value, delete=delete)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show davdrop version information."""
        _handle_stage_result(cmd_version)()

    return app
