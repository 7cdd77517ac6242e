"""Tests for JobStore."""

from datetime import datetime, timedelta, timezone

from app.jobs import JobStatus, JobStore
from app.schemas.batch import BatchStats


def test_create_job_pending():
    store = JobStore()
    job = store.create_job(total=3, filename="companies.csv")

    assert job.status == JobStatus.pending
    assert job.stats.total == 3
    assert job.filename == "companies.csv"
    assert store.get_job(job.job_id) is job


def test_lifecycle_to_completed():
    store = JobStore()
    job = store.create_job(total=2)
    store.mark_running(job.job_id)
    assert job.status == JobStatus.running

    stats = BatchStats(total=2, processed=2, with_email=1)
    rows = [{"Websites": "a.com", "phone": "", "email": "x@a.com", "scrape_error": ""}]
    store.mark_completed(job.job_id, rows, stats)

    assert job.status == JobStatus.completed
    assert job.rows == rows
    assert job.stats.with_email == 1
    assert job.finished_at is not None
    assert job.is_finished


def test_mark_failed_records_error():
    store = JobStore()
    job = store.create_job(total=1)
    store.mark_failed(job.job_id, "Some error")

    assert job.status == JobStatus.failed
    assert job.error == "Some error"
    assert job.is_finished


def test_progress_is_a_snapshot():
    """Later mutation of the caller's stats does not leak into the job."""
    store = JobStore()
    job = store.create_job(total=4)
    stats = BatchStats(total=4, processed=1)

    store.update_progress(job.job_id, stats)
    stats.processed = 3

    assert job.stats.processed == 1
    assert job.stats.progress == 25


def test_unknown_job_ignored():
    store = JobStore()
    store.mark_running("nope")
    store.update_progress("nope", BatchStats())
    store.mark_failed("nope", "x")
    assert store.get_job("nope") is None


def test_eviction_removes_oldest_finished():
    store = JobStore(max_jobs=2)
    old = store.create_job(total=1)
    store.mark_failed(old.job_id, "x")
    old.created_at = datetime.now(timezone.utc) - timedelta(hours=1)
    active = store.create_job(total=1)

    newest = store.create_job(total=1)

    assert store.get_job(old.job_id) is None
    assert store.get_job(active.job_id) is active
    assert store.get_job(newest.job_id) is newest


def test_eviction_keeps_active_jobs():
    store = JobStore(max_jobs=1)
    first = store.create_job(total=1)
    second = store.create_job(total=1)

    assert store.get_job(first.job_id) is first
    assert store.get_job(second.job_id) is second


def test_progress_zero_total():
    assert BatchStats().progress == 0
