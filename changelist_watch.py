import asyncio
import logging
import os

from dotenv import load_dotenv
from news_sync import NetworkFailure, NetworkOptions, create_data_source, next_cursor, split_changes

# Load NEWS_SYNC_* variables from a .env file.
load_dotenv()

logger = logging.getLogger("changelist_watch")


async def poll_once(source, cursors):
    """Fetch both change lists one after another and advance the cursors."""
    for kind, fetch in (
        ("topics", source.fetch_topic_change_list),
        ("newsresources", source.fetch_news_resource_change_list),
    ):
        changes = await fetch(after=cursors[kind])
        if not changes:
            continue
        refetch, delete = split_changes(changes)
        logger.info("%s: refetch %s, delete %s", kind, refetch, delete)
        cursors[kind] = next_cursor(changes, current=cursors[kind])
        logger.info("%s: cursor is now %s", kind, cursors[kind])


async def main():
    options = NetworkOptions.from_env(dotenv=False)
    if not options.base_url:
        raise ValueError("NEWS_SYNC_BASE_URL is not set. Check your .env file.")
    poll_sec = float(os.getenv("NEWS_SYNC_POLL_SEC", "30"))

    logging.basicConfig(
        level=logging.DEBUG if options.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cursors = {"topics": None, "newsresources": None}
    async with create_data_source(options=options) as source:
        while True:
            try:
                await poll_once(source, cursors)
            except NetworkFailure as e:
                # Keep the cursors; the next poll asks for the same range again.
                logger.warning("Poll failed: %s", e)
            await asyncio.sleep(poll_sec)


if __name__ == "__main__":
    asyncio.run(main())
