# backend/app/routers/ui.py
from pathlib import Path
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.templating import Jinja2Templates

from .. import presenter
from ..presenter import ValidatorForm

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


async def get_api_client(request: Request):
    """Client that talks to this app's own API over an in-process transport."""
    transport = httpx.ASGITransport(app=request.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://mailcheck") as client:
        yield client


@router.get("/")
async def index(
    request: Request,
    email: Optional[str] = Query(None),
    client: httpx.AsyncClient = Depends(get_api_client),
):
    form = ValidatorForm(email or "")
    if email is not None:
        await form.submit(client)

    return templates.TemplateResponse(
        request,
        "index.html",
        {"form": form, "view": presenter},
    )
