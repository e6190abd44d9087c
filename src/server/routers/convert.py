"""Convert endpoint for the API."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from carbon2html.converter import Converter
from carbon2html.exceptions import ParseError, SanitizationError, StructureError
from carbon2html.utils.logging_config import get_logger
from server.models import ConvertErrorResponse, ConvertRequest, ConvertSuccessResponse, ErrorKind

logger = get_logger(__name__)

router = APIRouter()

COMMON_CONVERT_RESPONSES: dict[int | str, dict] = {
    200: {"model": ConvertSuccessResponse, "description": "Rendered HTML"},
    400: {"model": ConvertErrorResponse, "description": "Document is not valid JSON"},
    422: {"model": ConvertErrorResponse, "description": "Invalid document structure"},
    500: {"model": ConvertErrorResponse, "description": "Inline markup failure"},
}


def _error(status_code: int, kind: ErrorKind, exc: Exception) -> JSONResponse:
    body = ConvertErrorResponse(error=str(exc), kind=kind)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.post("/api/convert", responses=COMMON_CONVERT_RESPONSES)
def api_convert(convert_request: ConvertRequest) -> JSONResponse:
    """Render a Carbon JSON document as HTML.

    **Parameters**

    - **convert_request** (`ConvertRequest`): document text and optional insert threshold

    **Returns**

    - **JSONResponse**: ``{"html": ...}`` or an error body with ``kind`` set to
      ``parse`` (400), ``structure`` (422) or ``sanitization`` (500)

    """
    converter = Converter(insert_min_chars=convert_request.insert_min_chars)
    try:
        html = converter.convert(convert_request.document)
    except ParseError as exc:
        logger.info("Rejected invalid JSON", extra={"error": str(exc)})
        return _error(400, ErrorKind.PARSE, exc)
    except StructureError as exc:
        logger.info("Rejected invalid document structure", extra={"error": str(exc)})
        return _error(422, ErrorKind.STRUCTURE, exc)
    except SanitizationError as exc:
        logger.error("Inline markup failure", extra={"error": str(exc)})
        return _error(500, ErrorKind.SANITIZATION, exc)

    return JSONResponse(content=ConvertSuccessResponse(html=html).model_dump())
