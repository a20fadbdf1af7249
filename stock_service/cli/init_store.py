# stock_service/cli/init_store.py
import asyncio
import click

from stock_service.core.exceptions import StoreLoadError
from stock_service.store import RecordStore


@click.command()
@click.option('--database-url', default=None, help='Record store URL (defaults to DATABASE_URL)')
def init_store(database_url):
    """Create the stock table if needed and report how many stocks it holds"""
    from stock_service.core.config import get_settings
    database_url = database_url or get_settings().DATABASE_URL

    async def _init_store():
        store = await RecordStore.load_or_init(database_url)
        try:
            return await store.count()
        finally:
            await store.close()

    try:
        count = asyncio.run(_init_store())
    except StoreLoadError as e:
        raise click.ClickException(str(e))

    click.echo(f"Record store ready: {count} stocks")

if __name__ == "__main__":
    init_store()
