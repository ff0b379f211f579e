import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

import magicquill_proxy.routers.api as images_router
import magicquill_proxy.routers.health as health_router
from magicquill_proxy.config import (CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS,
                                     CORS_ALLOW_ORIGINS, HOST, MAX_BODY_SIZE,
                                     get_port, is_development)
from magicquill_proxy.logging_config import setup_logging
from magicquill_proxy.magicquill import MagicQuillClient
from magicquill_proxy.middleware import BodySizeLimitMiddleware
from magicquill_proxy.responses import error_response
from magicquill_proxy.routers.api import (MISSING_PARAMETERS_DETAILS,
                                          MISSING_PARAMETERS_ERROR)

logger = logging.getLogger(__name__)


def format_validation_errors(errors) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in errors
    ]


def create_app(
    magicquill_client: Optional[MagicQuillClient] = None,
    max_body_size: Optional[int] = None,
) -> FastAPI:

    app = FastAPI(title="MagicQuill Proxy Server")
    app.state.magicquill_client = magicquill_client or MagicQuillClient()

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        # Un cuerpo que no es JSON se trata como fallo interno, igual que un error de parseo
        if any(err.get("type") == "json_invalid" for err in errors):
            logger.error("Could not parse request body on %s: %s", request.url.path, errors)
            return error_response(
                500,
                "Internal Server Error",
                format_validation_errors(errors) if is_development() else None,
            )

        logger.warning("Invalid request parameters on %s: %s", request.url.path, errors)
        return error_response(
            400,
            MISSING_PARAMETERS_ERROR,
            [MISSING_PARAMETERS_DETAILS, *format_validation_errors(errors)],
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    # Se registra primero para quedar dentro de error_middleware
    app.add_middleware(
        BodySizeLimitMiddleware,
        max_body_size=MAX_BODY_SIZE if max_body_size is None else max_body_size,
    )

    @app.middleware("http")
    async def error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(
                500,
                "Internal Server Error",
                str(e) if is_development() else None,
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.include_router(health_router.get_router())
    app.include_router(images_router.get_router(), prefix="/api")
    return app


def run():
    import uvicorn

    setup_logging()
    port = get_port()
    app = create_app()
    logger.info("Proxy server running on port %s", port)
    uvicorn.run(app, host=HOST, port=port)


if __name__ == "__main__":
    run()
