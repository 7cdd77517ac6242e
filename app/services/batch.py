"""Sequential CSV enrichment: one website per row, fixed gap between requests."""

import asyncio
import io
import logging
from collections.abc import Callable

import pandas as pd

from app.exceptions.custom import CsvFormatError
from app.schemas.batch import BatchStats
from app.schemas.scrape import ScrapeResult
from app.services.website_scraper import WebsiteScraperService

logger = logging.getLogger(__name__)

WEBSITE_COLUMN = "Websites"
RESULT_COLUMNS = ("phone", "email", "scrape_error")
OUTPUT_FILENAME = "companies_with_contacts.csv"

_DELAY = 0.5
_MISSING_WEBSITE = "Website URL is required"
_ROW_FAILED = "Request failed"

Row = dict[str, str]
ProgressCallback = Callable[[BatchStats], None]


def parse_companies_csv(content: bytes) -> list[Row]:
    """Parse an uploaded CSV into rows of strings.

    Every column is kept as text so metadata passes through untouched. The
    ``Websites`` column is required.
    """
    try:
        df = pd.read_csv(
            io.BytesIO(content),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as exc:
        raise CsvFormatError("file is empty") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise CsvFormatError(f"could not parse file ({exc})") from exc

    if WEBSITE_COLUMN not in df.columns:
        raise CsvFormatError(f"missing required column '{WEBSITE_COLUMN}'")
    if df.empty:
        raise CsvFormatError("no data rows")

    return df.to_dict(orient="records")


def rows_to_csv(rows: list[Row]) -> str:
    """Serialize enriched rows, input columns first then result columns."""
    if not rows:
        return ",".join((WEBSITE_COLUMN, *RESULT_COLUMNS)) + "\n"

    columns = [c for c in rows[0] if c not in RESULT_COLUMNS]
    columns.extend(RESULT_COLUMNS)
    df = pd.DataFrame(rows, columns=columns)
    return df.to_csv(index=False, lineterminator="\n")


def enrich_row(row: Row, result: ScrapeResult) -> Row:
    return {
        **row,
        "phone": result.phone,
        "email": result.email,
        "scrape_error": result.error,
    }


class BatchScrapeService:
    def __init__(self, scraper: WebsiteScraperService, delay: float = _DELAY):
        self._scraper = scraper
        self._delay = delay

    async def process(
        self,
        rows: list[Row],
        on_progress: ProgressCallback | None = None,
    ) -> tuple[list[Row], BatchStats]:
        """Scrape every row in order, waiting ``delay`` seconds between rows."""
        stats = BatchStats(total=len(rows))
        enriched: list[Row] = []

        for i, row in enumerate(rows):
            result = await self._scrape_row(row)
            enriched.append(enrich_row(row, result))

            stats.processed += 1
            if result.phone:
                stats.with_phone += 1
            if result.email:
                stats.with_email += 1
            if result.error:
                stats.errors += 1

            if on_progress is not None:
                on_progress(stats)

            if i < len(rows) - 1:
                await asyncio.sleep(self._delay)

        logger.info(
            "Batch done: %d rows, %d with phone, %d with email, %d errors",
            stats.processed, stats.with_phone, stats.with_email, stats.errors,
        )
        return enriched, stats

    async def _scrape_row(self, row: Row) -> ScrapeResult:
        website = (row.get(WEBSITE_COLUMN) or "").strip()
        if not website:
            return ScrapeResult(error=_MISSING_WEBSITE)
        try:
            return await self._scraper.scrape(website)
        except Exception:
            logger.exception("Error processing %s", website)
            return ScrapeResult(error=_ROW_FAILED)
