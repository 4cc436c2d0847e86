import traceback

from fastapi import HTTPException
from fastapi.logger import logger

from containerview.exceptions import MalformedResult, NotFound, Unavailable


def to_http_exception(exc: Exception, action: str) -> HTTPException:
    """Log ``exc`` and translate it into the matching HTTP error."""
    if isinstance(exc, NotFound):
        return HTTPException(status_code=404, detail=exc.message)
    if isinstance(exc, Unavailable):
        logger.error(f"Inventory unavailable while {action}: {exc}")
        return HTTPException(status_code=503, detail=exc.message)
    if isinstance(exc, MalformedResult):
        logger.error(f"Malformed inventory result while {action}: {exc}")
        return HTTPException(status_code=502, detail=exc.message)

    logger.error(f"Error {action}: {exc}\n{traceback.format_exc()}")
    return HTTPException(status_code=500, detail=str(exc))
