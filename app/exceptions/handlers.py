import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import CsvFormatError, InvalidInputError

logger = logging.getLogger(__name__)


async def invalid_input_error_handler(_request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("Rejected input: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"error": exc.message},
    )


async def csv_format_error_handler(_request: Request, exc: CsvFormatError) -> JSONResponse:
    logger.warning("CSV upload rejected: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"detail": f"CSV error: {exc.message}"},
    )
