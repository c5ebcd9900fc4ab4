# backend/app/http_client.py
import httpx
from fastapi import Depends

from .config import Settings, get_settings


# ---------------------------------------------------------
# FastAPI dependency: one outbound client per inbound request
# ---------------------------------------------------------
async def get_http_client(settings: Settings = Depends(get_settings)):
    async with httpx.AsyncClient(
        headers={"User-Agent": settings.USER_AGENT},
        follow_redirects=True,
    ) as client:
        yield client
