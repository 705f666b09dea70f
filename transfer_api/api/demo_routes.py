from fastapi import APIRouter, Depends

from ..core.security import require_bearer_token
from ..models import MessageResponse


router = APIRouter(tags=["demo"])

@router.get("/")
def read_root() -> dict:
    return {
        "message": "Welcome to the Middleware Demo",
        "routes": {
            "public": "/public - No authentication required",
            "protected": "/protected - Requires a Bearer token",
        },
    }

@router.get("/public", response_model=MessageResponse)
def read_public() -> MessageResponse:
    return MessageResponse(message="This is a public route. No authentication required.")

@router.get(
    "/protected",
    response_model=MessageResponse,
    dependencies=[Depends(require_bearer_token)],
)
def read_protected() -> MessageResponse:
    return MessageResponse(
        message="You have accessed a protected route with a valid Bearer token!"
    )

__all__ = ["router"]
