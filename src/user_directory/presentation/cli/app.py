"""User directory CLI application using Typer.

Operational commands that run outside the API process: schema creation
and the transactional outbox relay.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from user_directory.application.services import OutboxRelayService, RelayResult
from user_directory.infrastructure.persistence.sqlalchemy import (
    OutboxRepositorySQLAlchemy,
)
from user_directory.infrastructure.persistence.sqlalchemy.init_db import (
    build_engine,
    build_session_maker,
    create_tables,
)
from user_directory.presentation.api.dependencies import build_event_publisher
from user_directory.presentation.log_config import configure_logging
from user_directory_config.settings import Settings, get_settings

app = typer.Typer(
    name="user-directory",
    help="User Directory CLI",
    no_args_is_help=True,
)
console = Console()

outbox_app = typer.Typer(
    name="outbox",
    help="Transactional outbox utilities",
    no_args_is_help=True,
)
app.add_typer(outbox_app)


async def _init_db(settings: Settings) -> None:
    engine = build_engine(settings.database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _relay_once(settings: Settings, batch_size: int) -> RelayResult:
    engine = build_engine(settings.database_url)
    publisher = build_event_publisher(settings)
    try:
        async with build_session_maker(engine)() as session:
            relay = OutboxRelayService(
                outbox_repository=OutboxRepositorySQLAlchemy(session),
                event_publisher=publisher,
                db_session=session,
                max_attempts=settings.outbox_max_attempts,
            )
            return await relay.relay_pending(batch_size=batch_size)
    finally:
        await publisher.close()
        await engine.dispose()


async def _relay_forever(settings: Settings, batch_size: int, interval: float) -> None:
    while True:
        result = await _relay_once(settings, batch_size)
        # A full batch means more may be waiting; poll again right away.
        if result.delivered < batch_size:
            await asyncio.sleep(interval)


async def _count_pending(settings: Settings) -> int:
    engine = build_engine(settings.database_url)
    try:
        async with build_session_maker(engine)() as session:
            return await OutboxRepositorySQLAlchemy(session).count_pending()
    finally:
        await engine.dispose()


@app.command("init-db")
def init_db() -> None:
    """Create missing database tables (existing data is never touched)."""
    configure_logging()
    asyncio.run(_init_db(get_settings()))
    console.print("[bold green]Database schema is up to date[/bold green]")


@outbox_app.command("relay")
def relay(
    once: bool = typer.Option(False, "--once", help="Run a single relay pass"),
    batch_size: Optional[int] = typer.Option(
        None, "--batch-size", help="Entries per pass (default from settings)"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", help="Seconds between passes (default from settings)"
    ),
) -> None:
    """Deliver pending outbox entries to the event channel."""
    configure_logging()
    settings = get_settings()
    batch = batch_size or settings.outbox_batch_size
    wait = interval if interval is not None else settings.outbox_poll_interval

    if once:
        result = asyncio.run(_relay_once(settings, batch))
        console.print(
            f"[green]{result.delivered}[/green] delivered, "
            f"[red]{result.failed}[/red] failed"
        )
        if result.failed:
            raise typer.Exit(code=1)
        return

    console.print(
        f"Relaying outbox to topic [cyan]{settings.kafka_topic}[/cyan] "
        f"every {wait:g}s (Ctrl+C to stop)"
    )
    try:
        asyncio.run(_relay_forever(settings, batch, wait))
    except KeyboardInterrupt:
        console.print("[dim]Relay stopped[/dim]")


@outbox_app.command("status")
def status() -> None:
    """Show how many outbox entries are waiting for delivery."""
    configure_logging()
    pending = asyncio.run(_count_pending(get_settings()))
    console.print(f"Pending outbox entries: [bold]{pending}[/bold]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
