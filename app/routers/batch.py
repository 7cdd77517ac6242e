import asyncio
import logging

from fastapi import APIRouter, HTTPException, UploadFile
from fastapi.responses import Response

from app.dependencies import BatchDep, JobStoreDep
from app.jobs import JobStatus, JobStore
from app.schemas.responses import JobStatusResponse, JobSubmittedResponse
from app.services.batch import (
    OUTPUT_FILENAME,
    BatchScrapeService,
    Row,
    parse_companies_csv,
    rows_to_csv,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_batch(
    job_id: str,
    service: BatchScrapeService,
    store: JobStore,
    rows: list[Row],
) -> None:
    store.mark_running(job_id)
    try:
        enriched, stats = await service.process(
            rows, on_progress=lambda s: store.update_progress(job_id, s)
        )
        store.mark_completed(job_id, enriched, stats)
    except Exception as exc:
        logger.exception("Batch job %s failed", job_id)
        store.mark_failed(job_id, str(exc))


@router.post("/batch", response_model=JobSubmittedResponse, status_code=202)
async def submit_batch(
    file: UploadFile,
    service: BatchDep,
    store: JobStoreDep,
) -> JobSubmittedResponse:
    rows = parse_companies_csv(await file.read())

    job = store.create_job(total=len(rows), filename=file.filename)
    asyncio.create_task(_run_batch(job.job_id, service, store, rows))
    logger.info("Batch job %s submitted with %d rows", job.job_id, len(rows))
    return JobSubmittedResponse(
        job_id=job.job_id,
        status=job.status,
        message=f"Batch job submitted ({len(rows)} websites)",
    )


@router.get("/jobs/{job_id}", response_model=JobStatusResponse)
async def get_job_status(job_id: str, store: JobStoreDep) -> JobStatusResponse:
    job = store.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return JobStatusResponse(
        **job.model_dump(exclude={"rows"}),
        progress=job.stats.progress,
    )


@router.get("/jobs/{job_id}/csv")
async def download_job_csv(job_id: str, store: JobStoreDep) -> Response:
    job = store.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    if job.status != JobStatus.completed:
        raise HTTPException(status_code=409, detail=f"Job is {job.status}")

    return Response(
        content=rows_to_csv(job.rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{OUTPUT_FILENAME}"'},
    )
