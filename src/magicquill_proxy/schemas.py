"""
Modelos de datos y validación

Define los esquemas Pydantic utilizados para:
- Validar los datos de entrada en los endpoints
- Documentar automáticamente la API con OpenAPI

Los nombres de los campos siguen el formato camelCase que envía el frontend.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, model_validator

from magicquill_proxy.config import (DEFAULT_CFG, DEFAULT_COLOR_STRENGTH,
                                     DEFAULT_EDGE_STRENGTH,
                                     DEFAULT_GROW_SIZE,
                                     DEFAULT_INPAINT_STRENGTH, DEFAULT_MODEL,
                                     DEFAULT_NEGATIVE_PROMPT, DEFAULT_SAMPLER,
                                     DEFAULT_SCHEDULER, DEFAULT_SEED,
                                     DEFAULT_STEPS)


class ImageRequest(BaseModel):
    # uploadedImage y prompt se validan en la ruta para devolver un 400 propio
    uploadedImage: Optional[str] = None
    selection: Optional[str] = None
    prompt: Optional[str] = None
    negativePrompt: str = DEFAULT_NEGATIVE_PROMPT
    selectedModel: str = DEFAULT_MODEL
    steps: int = DEFAULT_STEPS
    cfg: float = DEFAULT_CFG
    growSize: int = DEFAULT_GROW_SIZE
    sampler: str = DEFAULT_SAMPLER
    scheduler: str = DEFAULT_SCHEDULER
    seed: int = DEFAULT_SEED
    edgeStrength: float = DEFAULT_EDGE_STRENGTH
    colorStrength: float = DEFAULT_COLOR_STRENGTH
    inpaintStrength: float = DEFAULT_INPAINT_STRENGTH

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data):
        # null en un campo opcional equivale a no enviarlo
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class SuccessResponse(BaseModel):
    success: Literal[True] = True
    generatedImage: str


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    details: Any = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
