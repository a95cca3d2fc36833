#!/usr/bin/env python3
"""
mangaloom Listing Example

Searches manga by title, prints them in a table and walks the chapter feed of
the first hit.

Run with: uv run examples/list_manga.py "Solo Leveling"
"""

import asyncio
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from mangaloom import MangaloomClient, MangaQuery, Ok, configure_logging
from mangaloom.models import ContentRating, FeedOrder, FeedQuery, OrderType

console = Console()


async def main(title: str):
    load_dotenv()
    configure_logging("WARNING")

    async with MangaloomClient() as client:
        query = MangaQuery(
            title=title,
            limit=5,
            contentRating=[ContentRating.SAFE, ContentRating.SUGGESTIVE],
        )
        page = await client.manga.list(query)
        console.print(f"Found {page.total} manga matching '{title}'")

        table = Table(title=f"Manga matching '{title}'")
        table.add_column("Title", style="cyan", max_width=50)
        table.add_column("Status", style="magenta")
        table.add_column("Year", style="green")
        table.add_column("Tags")

        hits = []
        for item in page.results:
            if not isinstance(item, Ok):
                console.print(f"[red]Error element: {item.errors}[/red]")
                continue
            manga = item.value.data
            hits.append(manga)
            attributes = manga.attributes
            name = attributes.title.get("en") or next(iter(attributes.title.values()), "?")
            tags = ", ".join(tag.attributes.name.get("en", "?") for tag in attributes.tags[:3])
            table.add_row(
                name,
                attributes.status.value if attributes.status else "N/A",
                str(attributes.year or "N/A"),
                tags,
            )
        console.print(table)

        if not hits:
            return

        console.print("\n[yellow]Latest English chapters of the first hit[/yellow]")
        feed = await client.manga.feed(
            hits[0].id,
            FeedQuery(
                limit=5,
                translatedLanguage=["en"],
                order=FeedOrder(chapter=OrderType.DESC),
            ),
        )
        for chapter in feed.ok_values():
            attributes = chapter.data.attributes
            console.print(
                f"  Vol. {attributes.volume or '-'} Ch. {attributes.chapter or '-'}: {attributes.title or ''}"
            )


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "Solo Leveling"))
