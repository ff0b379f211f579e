from fastapi.responses import JSONResponse

from magicquill_proxy.schemas import ErrorResponse


def error_response(status_code: int, error: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, details=details).model_dump(),
    )
