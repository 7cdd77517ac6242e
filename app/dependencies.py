from typing import Annotated

from fastapi import Depends, Request

from app.jobs import JobStore
from app.services.batch import BatchScrapeService
from app.services.website_scraper import WebsiteScraperService


def get_website_scraper(request: Request) -> WebsiteScraperService:
    return request.app.state.website_scraper


def get_batch_service(request: Request) -> BatchScrapeService:
    return request.app.state.batch_service


def get_job_store(request: Request) -> JobStore:
    return request.app.state.job_store


WebsiteScraperDep = Annotated[WebsiteScraperService, Depends(get_website_scraper)]
BatchDep = Annotated[BatchScrapeService, Depends(get_batch_service)]
JobStoreDep = Annotated[JobStore, Depends(get_job_store)]
