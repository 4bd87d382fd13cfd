"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from davdrop.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from davdrop.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"davdrop {result.output.get('full_version', result.output.get('version', 'unknown'))}")
        return 0 if result.success else 1

    _configure_logging()

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0 if e.code is None else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1


def _configure_logging() -> None:
    """Set up file logging at the level named in the config file."""
    from davdrop.api.config.DavdropConfig import DavdropConfig
    from davdrop.utils.logger import configure_logging

    try:
        level = DavdropConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)
