"""
Cliente para la interacción con MagicQuill.

Este módulo contiene toda la comunicación con el Space de MagicQuill alojado en
Hugging Face, a través de gradio_client.

Responsabilidades:
- Abrir (una sola vez) la conexión con el Space
- Construir el payload con el formato que espera /generate_image_handler
- Extraer la imagen generada de la respuesta
- Traducir los fallos de conexión y de respuesta a errores propios
"""

import asyncio
import json
import logging
from dataclasses import dataclass

from gradio_client import Client

from magicquill_proxy.config import MAGICQUILL_API_NAME, MAGICQUILL_SPACE
from magicquill_proxy.exceptions import (MagicQuillConnectionError,
                                         MagicQuillResponseError)
from magicquill_proxy.utils import summarize_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationInputs:
    """Every input of /generate_image_handler, named instead of positional."""

    image: str
    mask: str
    prompt: str
    model: str
    negative_prompt: str
    grow_size: int
    edge_strength: float
    color_strength: float
    inpaint_strength: float
    seed: int
    steps: int
    cfg: float
    sampler: str
    scheduler: str

    def to_payload(self) -> list:
        """
        Build the positional argument list in the order the Space declares its inputs.
        """
        brush_data = {
            "from_frontend": {
                "add_color_image": self.image,
                "add_edge_image": self.image,
                "img": self.image,
                "original_image": self.image,
                "remove_edge_image": self.image,
                "total_mask": self.mask,
            },
            "from_backend": {
                "prompt": self.prompt,
                "generated_image": None,
            },
        }
        return [
            brush_data,
            self.model,
            self.negative_prompt,
            "enable",
            self.grow_size,
            self.edge_strength,
            self.color_strength,
            self.inpaint_strength,
            self.seed,
            self.steps,
            self.cfg,
            self.sampler,
            self.scheduler,
        ]


def normalize_response(outputs) -> dict:
    """
    gradio_client returns the bare outputs; wrap them as {"data": [...]}.
    """
    if outputs is None:
        return {}
    if isinstance(outputs, (list, tuple)):
        return {"data": list(outputs)}
    return {"data": [outputs]}


def extract_generated_image(response) -> str:
    data = response.get("data") if isinstance(response, dict) else None
    if not isinstance(data, list):
        raise MagicQuillResponseError("No valid image data returned from MagicQuill")

    first = data[0] if data else None
    from_backend = first.get("from_backend") if isinstance(first, dict) else None
    image = from_backend.get("generated_image") if isinstance(from_backend, dict) else None
    if not isinstance(image, str):
        raise MagicQuillResponseError("Unexpected image format from MagicQuill")
    return image


class MagicQuillClient:

    def __init__(self, space_id: str = MAGICQUILL_SPACE, client_factory=Client):
        self.space_id = space_id
        self.client_factory = client_factory
        self._client = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def get_client(self):
        """
        Return the Gradio client, connecting on first use.
        Concurrent callers wait on the lock so only one connection is opened.
        """
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is None:
                try:
                    logger.info("Connecting to MagicQuill space %s", self.space_id)
                    self._client = await asyncio.to_thread(
                        self.client_factory, self.space_id
                    )
                except Exception as e:
                    logger.error("Failed to connect to Gradio client: %s", e)
                    raise MagicQuillConnectionError() from e
        return self._client

    async def generate(self, inputs: GenerationInputs) -> dict:
        client = await self.get_client()
        payload = inputs.to_payload()
        logger.debug(
            "Payload sent to MagicQuill: %s",
            json.dumps(summarize_payload(payload), indent=2),
        )

        outputs = await asyncio.to_thread(
            client.predict, *payload, api_name=MAGICQUILL_API_NAME
        )

        response = normalize_response(outputs)
        logger.debug(
            "Full response from MagicQuill: %s",
            json.dumps(summarize_payload(response), indent=2, default=str),
        )
        return response
