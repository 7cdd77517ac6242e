import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import CsvFormatError, InvalidInputError
from app.exceptions.handlers import csv_format_error_handler, invalid_input_error_handler
from app.jobs import JobStore
from app.routers.batch import router as batch_router
from app.routers.scrape import router as scrape_router
from app.services.batch import BatchScrapeService
from app.services.website_scraper import WebsiteScraperService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.scrape_timeout) as client:
        website_scraper = WebsiteScraperService(
            client,
            timeout=settings.scrape_timeout,
            user_agent=settings.user_agent,
        )

        app.state.website_scraper = website_scraper
        app.state.batch_service = BatchScrapeService(
            website_scraper, delay=settings.batch_delay_seconds
        )
        app.state.job_store = JobStore(max_jobs=settings.max_jobs)

        yield


app = FastAPI(title="Contact Scraper", lifespan=lifespan)

app.add_exception_handler(InvalidInputError, invalid_input_error_handler)
app.add_exception_handler(CsvFormatError, csv_format_error_handler)

app.include_router(scrape_router)
app.include_router(batch_router)
