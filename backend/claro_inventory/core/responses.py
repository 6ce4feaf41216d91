"""Claro Inventory - API response helpers."""
from fastapi import status
from fastapi.responses import JSONResponse

from claro_inventory.schemas.common import OperationResult, ResultCode

FAILURE_STATUS: dict[ResultCode, int] = {
    ResultCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultCode.NOT_AVAILABLE: status.HTTP_409_CONFLICT,
    ResultCode.DUPLICATE_SERIAL: status.HTTP_409_CONFLICT,
    ResultCode.ALREADY_IN_RMA: status.HTTP_409_CONFLICT,
    ResultCode.DUPLICATE_SERVICE: status.HTTP_409_CONFLICT,
    ResultCode.VALIDATION_ERROR: 422,
}


def error_response(code: str, message: str, field_errors: list[dict] | None = None, meta: dict | None = None) -> dict:
    return {
        "data": None,
        "error": {
            "code": code,
            "message": message,
            "field_errors": field_errors or []
        },
        "meta": meta
    }


def failure_response(result: OperationResult) -> JSONResponse:
    """Render a failed service result as the error envelope with its mapped status."""
    code = result.code or ResultCode.VALIDATION_ERROR
    return JSONResponse(
        status_code=FAILURE_STATUS.get(code, status.HTTP_400_BAD_REQUEST),
        content=error_response(code.value, result.message),
    )
