"""Load the bundled feed and print it, with logging and Logfire configured."""

import asyncio
import sys

import logfire

from pollexa.application.feed import PostStore
from pollexa.config import Settings
from pollexa.util.di.container import create_container
from pollexa.util.logging import setup_logging
from pollexa.util.observability import configure_logfire


async def show_feed() -> None:
    """Load the feed through the production container and print each poll."""
    container = create_container()
    try:
        async with container() as request_container:
            store = await request_container.get(PostStore)
            await store.load()

            print(f"{store.page_title}: {store.active_polls_title}")
            for cell in store.cells:
                percentages = " / ".join(f"{p}%" for p in cell.option_percentages())
                print(
                    f"- {cell.username}: {cell.title} "
                    f"[{cell.total_votes_label}; {percentages}]"
                )
    finally:
        await container.close()


def main() -> int:
    """Configure observability, then show the feed."""
    settings = Settings()

    # Configure early so startup errors are reported
    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(show_feed())
        return 0
    except Exception as e:
        logfire.error(
            "Feed startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
