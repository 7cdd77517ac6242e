import asyncio
import logging

import httpx

from app.config import DESKTOP_USER_AGENT
from app.mappers.candidate_extractor import extract_emails, extract_phones
from app.mappers.country_resolver import ensure_scheme, get_country_code_from_url
from app.mappers.email_validator import clean_emails
from app.mappers.phone_validator import clean_phone_numbers
from app.schemas.scrape import ScrapeResult

logger = logging.getLogger(__name__)

_TIMEOUT = 10.0
_MAX_ERROR_LENGTH = 50
_FALLBACK_ERROR = "Request failed"
_SEPARATOR = "; "


class HTTPStatusFailure(Exception):
    """Non-2xx response from the scraped site."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {reason}")


class WebsiteScraperService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        timeout: float = _TIMEOUT,
        user_agent: str = DESKTOP_USER_AGENT,
    ):
        self._client = client
        self._timeout = timeout
        self._user_agent = user_agent

    async def scrape(self, url: str) -> ScrapeResult:
        """Scrape a company homepage for phones and emails. Never raises."""
        url = ensure_scheme(url)
        try:
            return await self._do_scrape(url)
        except (TimeoutError, httpx.TimeoutException):
            logger.warning("Timed out fetching %s", url)
            return ScrapeResult(error="Timeout")
        except Exception as exc:
            logger.warning("Scrape failed for %s: %r", url, exc)
            message = str(exc)
            return ScrapeResult(
                error=message[:_MAX_ERROR_LENGTH] if message else _FALLBACK_ERROR
            )

    async def _do_scrape(self, url: str) -> ScrapeResult:
        html = await self._fetch_page(url)

        emails = extract_emails(html)
        phones = extract_phones(html)
        country_code = get_country_code_from_url(url)

        cleaned_phones = clean_phone_numbers(phones, country_code)
        cleaned_emails = clean_emails(emails)
        logger.debug(
            "%s: %d/%d phones, %d/%d emails kept (default code %s)",
            url, len(cleaned_phones), len(phones),
            len(cleaned_emails), len(emails), country_code,
        )

        return ScrapeResult(
            phone=_SEPARATOR.join(cleaned_phones),
            email=_SEPARATOR.join(cleaned_emails),
        )

    async def _fetch_page(self, url: str) -> str:
        """Fetch the full body as text, whatever the content type."""
        async with asyncio.timeout(self._timeout):
            resp = await self._client.get(
                url,
                follow_redirects=True,
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
            )

        if not resp.is_success:
            raise HTTPStatusFailure(resp.status_code, resp.reason_phrase)

        return resp.text
