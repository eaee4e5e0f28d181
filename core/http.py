"""Response helpers shared by routers."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

# Plan and onboarding data must always reflect the latest write.
NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def no_cache_response(content: Any, status_code: int = 200) -> JSONResponse:
    """Serialize `content` into a JSON response that disables caching."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content),
        headers=dict(NO_CACHE_HEADERS),
    )
