"""
Dependencias de FastAPI para las rutas del proxy.

get_magicquill_client entrega a cada petición el MagicQuillClient que
create_app guardó en app.state, de modo que todas comparten una única conexión
con el Space y los tests pueden pasar su propio cliente a create_app.
"""

from fastapi import Request

from magicquill_proxy.magicquill import MagicQuillClient


def get_magicquill_client(request: Request) -> MagicQuillClient:
    return request.app.state.magicquill_client
