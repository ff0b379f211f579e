"""
Servicios de generación de imágenes

Implementa la lógica de la aplicación relacionada con la edición de imágenes
a través de MagicQuill, actuando como capa intermedia entre los endpoints
de la API y el cliente MagicQuill.

Responsabilidades:
- Traducir la petición HTTP a las entradas del Space
- Interpretar la respuesta y devolver la imagen como data URL
"""

import logging

from magicquill_proxy.magicquill import (GenerationInputs, MagicQuillClient,
                                         extract_generated_image)
from magicquill_proxy.schemas import ImageRequest
from magicquill_proxy.utils import to_png_data_url

logger = logging.getLogger(__name__)


def build_generation_inputs(req: ImageRequest) -> GenerationInputs:
    return GenerationInputs(
        image=req.uploadedImage,
        # Sin selección se usa la imagen completa como máscara
        mask=req.selection or req.uploadedImage,
        prompt=req.prompt,
        model=req.selectedModel,
        negative_prompt=req.negativePrompt,
        grow_size=req.growSize,
        edge_strength=req.edgeStrength,
        color_strength=req.colorStrength,
        inpaint_strength=req.inpaintStrength,
        seed=req.seed,
        steps=req.steps,
        cfg=req.cfg,
        sampler=req.sampler,
        scheduler=req.scheduler,
    )


async def process_image(client: MagicQuillClient, req: ImageRequest) -> str:
    """Run one MagicQuill generation and return the result as a PNG data URL."""
    inputs = build_generation_inputs(req)
    logger.info(
        "Processing image: model=%s steps=%s cfg=%s seed=%s sampler=%s scheduler=%s",
        inputs.model,
        inputs.steps,
        inputs.cfg,
        inputs.seed,
        inputs.sampler,
        inputs.scheduler,
    )

    response = await client.generate(inputs)
    image_b64 = extract_generated_image(response)
    logger.info("Received generated image from MagicQuill (%d chars)", len(image_b64))
    return to_png_data_url(image_b64)
