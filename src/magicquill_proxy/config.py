"""
Ajustes del proxy: Space y endpoint de MagicQuill, límites HTTP, política CORS,
valores por defecto de generación y lectura del puerto desde el entorno.
"""

import os

from dotenv import load_dotenv

load_dotenv()

MAGICQUILL_SPACE: str = "azhan77168/mq"
MAGICQUILL_API_NAME: str = "/generate_image_handler"
MAX_BODY_SIZE: int = 100 * 1024 * 1024  # 100 MB

CORS_ALLOW_ORIGINS: list[str] = ["*"]
CORS_ALLOW_METHODS: list[str] = ["POST", "OPTIONS"]
CORS_ALLOW_HEADERS: list[str] = ["Content-Type", "Authorization"]

HOST: str = os.getenv("HOST", "0.0.0.0")
APP_ENV: str = os.getenv("APP_ENV", "production")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Valores por defecto de generación, deben coincidir con los del frontend
DEFAULT_MODEL: str = "SD1.5/realisticVisionV60B1_v51VAE.safetensors"
DEFAULT_NEGATIVE_PROMPT: str = ""
DEFAULT_STEPS: int = 20
DEFAULT_CFG: float = 5.0
DEFAULT_GROW_SIZE: int = 15
DEFAULT_SAMPLER: str = "euler_ancestral"
DEFAULT_SCHEDULER: str = "karras"
DEFAULT_SEED: int = -1
DEFAULT_EDGE_STRENGTH: float = 0.55
DEFAULT_COLOR_STRENGTH: float = 0.55
DEFAULT_INPAINT_STRENGTH: float = 1.0


class ConfigurationError(RuntimeError):
    pass


def is_development() -> bool:
    return APP_ENV.lower() == "development"


def get_port() -> int:
    """
    Read the listening port from the PORT environment variable.
    The hosting platform injects it, so there is no default.
    """
    raw_port = os.getenv("PORT")
    if not raw_port:
        raise ConfigurationError("PORT environment variable is required")
    try:
        return int(raw_port)
    except ValueError as e:
        raise ConfigurationError(f"Invalid PORT value: {raw_port!r}") from e
