"""Link routes: submit, redirect and delete by short code."""

import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from shortlink.errors import NotFoundError, ValidationError
from ..api.schemas import LinkRequest, MessageResponse, ShortCodeResponse

router = APIRouter()

logger = logging.getLogger("shortlink.web")


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post(
    "/shortner-link",
    response_model=ShortCodeResponse,
    responses={
        400: {"model": MessageResponse, "description": "Missing field or unknown notification type"},
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
    summary="Create short link",
    description="Return the short code for a URL, reusing the stored one if the URL was submitted before.",
)
async def create_short_link(request: Request, body: LinkRequest):
    """Create or reuse a short link."""
    service = request.app.state.service
    logger.info(f"Received request to generate short link: {body.model_dump(by_alias=True)}")

    try:
        link = await service.create_or_reuse(
            original_url=body.original_url,
            username=body.username,
            notification_type=body.notification_type,
        )
    except ValidationError as e:
        return _message(status.HTTP_400_BAD_REQUEST, str(e))

    return ShortCodeResponse(short_code=link.short_code)


@router.get(
    "/{short_code}",
    status_code=status.HTTP_302_FOUND,
    responses={
        302: {"description": "Redirect to the original URL"},
        404: {"model": MessageResponse, "description": "Short code not found"},
    },
    summary="Redirect to original URL",
)
async def redirect(request: Request, short_code: str):
    """Redirect to the original URL for a short code."""
    service = request.app.state.service
    logger.info(f"Received request to redirect for short code: {short_code}")

    try:
        target = await service.resolve_redirect(short_code)
    except NotFoundError:
        return _message(status.HTTP_404_NOT_FOUND, "Link not found")

    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)


@router.delete(
    "/",
    response_model=MessageResponse,
    responses={
        404: {"model": MessageResponse, "description": "Short code not found"},
    },
    summary="Delete short link",
)
async def delete_link(request: Request, short_code: str = Query(..., alias="shortCode")):
    """Delete the link for a short code."""
    service = request.app.state.service
    logger.info(f"Received request to delete link with short code: {short_code}")

    try:
        await service.delete_by_short_code(short_code)
    except NotFoundError:
        return _message(status.HTTP_404_NOT_FOUND, "Link not found")

    return MessageResponse(message="Link deleted successfully")
