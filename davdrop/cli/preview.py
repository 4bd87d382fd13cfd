"""Preview Typer app factory."""

import typer

from davdrop.api.preview.cmd_render import cmd_render
from davdrop.cli._handle_stage_result import _handle_stage_result


def preview() -> typer.Typer:
    """Create and configure the preview Typer app."""
    app = typer.Typer(
        name="preview",
        help="Inline preview of WebDAV images",
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

    @app.command(name="render")
    def render_cmd(
        note: str = typer.Argument(..., help="Markdown note to render"),
        output: str | None = typer.Option(None, "--output", "-o", help="Output file (default: <note>.preview.md)"),
    ) -> None:
        """Write a copy of a note with its WebDAV images inlined."""
        _handle_stage_result(cmd_render)(note, output)

    return app
