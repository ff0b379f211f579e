import logging

from fastapi import APIRouter, Depends

from magicquill_proxy.deps import get_magicquill_client
from magicquill_proxy.magicquill import MagicQuillClient
from magicquill_proxy.responses import error_response
from magicquill_proxy.schemas import (ErrorResponse, ImageRequest,
                                      SuccessResponse)
from magicquill_proxy.services.generation import process_image
from magicquill_proxy.utils import is_blank

logger = logging.getLogger(__name__)

MISSING_PARAMETERS_ERROR = "Missing required parameters"
MISSING_PARAMETERS_DETAILS = "Upload an image and provide a prompt"

router = APIRouter()


@router.post(
    "/process-image",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def process_image_endpoint(
    req: ImageRequest,
    client: MagicQuillClient = Depends(get_magicquill_client),
):
    """Edit the uploaded image with MagicQuill following the prompt."""
    if is_blank(req.uploadedImage) or is_blank(req.prompt):
        return error_response(400, MISSING_PARAMETERS_ERROR, MISSING_PARAMETERS_DETAILS)

    try:
        generated_image = await process_image(client, req)
        return SuccessResponse(generatedImage=generated_image)
    except Exception as e:
        logger.exception("Image processing error: %s", e)
        return error_response(
            500,
            str(e) or "Unknown processing error",
            {"type": type(e).__name__, "message": str(e)},
        )


def get_router():
    return router
