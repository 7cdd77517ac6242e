import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import WebsiteScraperDep
from app.exceptions.custom import InvalidInputError
from app.schemas.scrape import ScrapeRequest, ScrapeResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/scrape", response_model=ScrapeResult)
async def scrape_website(
    scraper: WebsiteScraperDep,
    request: ScrapeRequest | None = None,
) -> ScrapeResult:
    website = request.website.strip() if request and request.website else ""
    if not website:
        raise InvalidInputError("Website URL is required")

    try:
        return await scraper.scrape(website)
    except Exception as exc:
        logger.exception("Scrape request failed for %s", website)
        return JSONResponse(
            status_code=500,
            content={
                "phone": "",
                "email": "",
                "error": str(exc) or "Internal server error",
            },
        )
