"""
Daily Record CLI Interface
Command line interface implemented using Typer
"""

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from daily_record.config.loader import get_config
from daily_record.core.errors import DailyRecordError
from daily_record.core.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _load(config_file: Optional[str]):
    from daily_record.core.db import DatabaseManager, get_db

    config = get_config(config_file)
    if config_file:
        # A config given on the command line brings its own log and database paths
        setup_logging()
        return config, DatabaseManager(config.get("database.path") or None)
    return config, get_db()


def start(
    host: Optional[str] = typer.Option(None, help="Server host address"),
    port: Optional[int] = typer.Option(None, help="Server port"),
    config_file: Optional[str] = typer.Option(None, help="Configuration file path"),
    debug: bool = typer.Option(False, help="Enable debug mode"),
):
    """Start Daily Record API server"""
    config = get_config(config_file)
    if config_file:
        setup_logging()
    host = host or config.get("server.host", "127.0.0.1")
    port = port or int(config.get("server.port", 3000))

    logger.info("Starting Daily Record API server...")
    logger.info(f"Host: {host}, Port: {port}")
    logger.info(f"Debug mode: {debug}")

    uvicorn.run(
        "daily_record.app:app",
        host=host,
        port=port,
        reload=debug,
        log_level="debug" if debug else "info",
    )


def init_db(
    config_file: Optional[str] = typer.Option(None, help="Configuration file path"),
):
    """Initialize database"""
    _, db = _load(config_file)
    typer.echo(f"Database ready: {db.db_path}")


def export(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (defaults to the generated file name)"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Export format: md or json (defaults to export.default_format)"),
    start_date: Optional[str] = typer.Option(None, "--start-date", help="First date (YYYY-MM-DD)"),
    end_date: Optional[str] = typer.Option(None, "--end-date", help="Last date (YYYY-MM-DD)"),
    config_file: Optional[str] = typer.Option(None, help="Configuration file path"),
):
    """Export events to a Markdown or JSON file"""
    from daily_record.core.transfer import export_events

    config, db = _load(config_file)
    fmt = fmt or config.get("export.default_format", "md")
    try:
        exported = export_events(db, fmt, start_date, end_date)
    except DailyRecordError as e:
        typer.echo(f"Export failed: {e}", err=True)
        raise typer.Exit(1)

    target = output or Path(exported.filename)
    target.write_text(exported.content, encoding="utf-8")
    typer.echo(f"Exported {exported.count} events to {target}")


def import_events(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help=".json or .md file"),
    config_file: Optional[str] = typer.Option(None, help="Configuration file path"),
):
    """Import events from a Markdown or JSON file"""
    from daily_record.core.transfer import import_file

    _, db = _load(config_file)
    try:
        result = import_file(db, path.name, path.read_text(encoding="utf-8-sig"))
    except DailyRecordError as e:
        typer.echo(f"Import failed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(
        f"Imported: {result.imported}, skipped: {result.skipped}, "
        f"failed: {result.failed}, total: {result.total}"
    )


def build_app() -> typer.Typer:
    app = typer.Typer(help="Daily Record backend")

    app.command()(start)
    app.command("init-db")(init_db)
    app.command("export")(export)
    app.command("import")(import_events)

    return app


def main():
    """Main function"""
    build_app()()


if __name__ == "__main__":
    main()
