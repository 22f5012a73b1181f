"""Bundled quote library loader."""

import json
import logging
from pathlib import Path

from ..db.engine import get_db_path
from ..db.repositories import QuoteRepository
from ..models.quote import Quote

logger = logging.getLogger(__name__)


def get_quotes_json_path() -> Path:
    """Get the path to the bundled quotes JSON file."""
    return Path(__file__).parent / "quotes.json"


def load_quotes(json_path: Path | None = None) -> list[Quote]:
    """Load quotes from a JSON file.

    Returns:
        List of Quote objects, empty if the file does not exist
    """
    json_path = json_path or get_quotes_json_path()
    if not json_path.exists():
        return []

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    quotes = []
    for entry in data.get("quotes", []):
        text = (entry.get("text") or "").strip()
        if not text:
            logger.warning("Skipping quote without text: %r", entry)
            continue
        quotes.append(Quote(text=text, author=entry.get("author") or None))

    return quotes


async def seed_quotes(db_path: Path | None = None, json_path: Path | None = None) -> int:
    """Populate the quotes table if it is empty.

    Returns:
        Number of quotes inserted (0 when the table already had quotes)
    """
    if db_path is None:
        db_path = get_db_path()

    repo = QuoteRepository(db_path)
    if await repo.count() > 0:
        return 0

    quotes = load_quotes(json_path)
    for quote in quotes:
        await repo.create(quote)

    logger.info("Seeded %d quotes", len(quotes))
    return len(quotes)
