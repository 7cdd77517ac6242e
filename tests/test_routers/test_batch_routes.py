import asyncio

import respx
from httpx import AsyncClient, Response

CSV_CONTENT = (
    b"Websites,Score,Name\n"
    b"acme.com,98,Company A\n"
    b"firma.de,75,Firma B\n"
    b"gone.com,10,Company C\n"
)


def _mock_sites():
    respx.get("https://acme.com").mock(
        return_value=Response(
            200,
            html="<html><body>info@acme.com (555) 123-4567</body></html>",
        )
    )
    respx.get("https://firma.de").mock(
        return_value=Response(200, html="<html><body>Tel: 030-1234-5678</body></html>")
    )
    respx.get("https://gone.com").mock(return_value=Response(404))


async def submit_and_wait(client: AsyncClient, content: bytes, timeout: float = 5.0):
    """POST /batch -> 202, then poll GET /jobs/{job_id} until terminal state."""
    resp = await client.post(
        "/batch", files={"file": ("companies.csv", content, "text/csv")}
    )
    assert resp.status_code == 202

    data = resp.json()
    job_id = data["job_id"]
    assert data["status"] == "pending"

    deadline = asyncio.get_event_loop().time() + timeout
    while asyncio.get_event_loop().time() < deadline:
        await asyncio.sleep(0.05)
        status_resp = await client.get(f"/jobs/{job_id}")
        assert status_resp.status_code == 200
        job = status_resp.json()
        if job["status"] in ("completed", "failed"):
            return job

    raise TimeoutError(f"Job {job_id} did not complete within {timeout}s")


@respx.mock
async def test_batch_full_flow(client):
    _mock_sites()

    job = await submit_and_wait(client, CSV_CONTENT)

    assert job["status"] == "completed"
    assert job["filename"] == "companies.csv"
    assert job["progress"] == 100
    assert job["stats"] == {
        "total": 3,
        "processed": 3,
        "with_phone": 2,
        "with_email": 1,
        "errors": 1,
    }

    resp = await client.get(f"/jobs/{job['job_id']}/csv")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "companies_with_contacts.csv" in resp.headers["content-disposition"]
    assert resp.text.splitlines() == [
        "Websites,Score,Name,phone,email,scrape_error",
        "acme.com,98,Company A,+15551234567,info@acme.com,",
        "firma.de,75,Firma B,+4903012345678,,",
        "gone.com,10,Company C,,,HTTP 404: Not Found",
    ]


async def test_batch_rejects_missing_column(client):
    resp = await client.post(
        "/batch", files={"file": ("companies.csv", b"Url\nacme.com\n", "text/csv")}
    )
    assert resp.status_code == 400
    assert "Websites" in resp.json()["detail"]


async def test_batch_rejects_empty_file(client):
    resp = await client.post(
        "/batch", files={"file": ("companies.csv", b"", "text/csv")}
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "CSV error: file is empty"}


async def test_unknown_job_404(client):
    resp = await client.get("/jobs/doesnotexist")
    assert resp.status_code == 404

    resp = await client.get("/jobs/doesnotexist/csv")
    assert resp.status_code == 404


async def test_csv_not_ready_409(client):
    from app.main import app

    store = app.state.job_store
    job = store.create_job(total=1, filename="pending.csv")

    resp = await client.get(f"/jobs/{job.job_id}/csv")
    assert resp.status_code == 409

    status = await client.get(f"/jobs/{job.job_id}")
    assert status.json()["status"] == "pending"
    assert status.json()["progress"] == 0
