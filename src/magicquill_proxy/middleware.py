"""
Middleware ASGI que limita el tamaño del cuerpo de las peticiones.

Rechaza con 413 las peticiones cuyo Content-Length supera el límite y, para las
que llegan sin longitud (chunked), cuenta los bytes recibidos mientras la ruta
lee el cuerpo.
"""

import logging

from fastapi import HTTPException
from starlette.datastructures import Headers

from magicquill_proxy.responses import error_response

logger = logging.getLogger(__name__)

TOO_LARGE_MESSAGE = "Request entity too large"


class BodySizeLimitMiddleware:

    def __init__(self, app, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_size:
            logger.warning("Rejected request body of %s bytes", content_length)
            response = error_response(413, TOO_LARGE_MESSAGE)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    logger.warning("Rejected streamed request body over %s bytes", self.max_body_size)
                    raise HTTPException(status_code=413, detail=TOO_LARGE_MESSAGE)
            return message

        await self.app(scope, limited_receive, send)
