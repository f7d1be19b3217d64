"""Shared JSON response writer."""

from fastapi import Response
from fastapi.responses import JSONResponse
from loguru import logger


def write_json(status_code: int, payload, headers: dict | None = None) -> Response:
    """Serialize payload as the body of a JSON response with the given status.

    The status is fixed before serialization; if the payload can't be encoded the
    failure is logged and the response goes out with an empty body.
    """
    try:
        return JSONResponse(content=payload, status_code=status_code, headers=headers)
    except (TypeError, ValueError) as e:
        logger.bind(error=str(e)).error("failed to write JSON response")
        return Response(status_code=status_code, headers=headers, media_type=JSONResponse.media_type)
