from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from registration.deps import templates
from registration.models.user import GENDERS

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def register_page(request: Request):
    return templates.TemplateResponse(request, "register.html", {"genders": GENDERS})


@router.get("/health")
async def health():
    return {"status": "ok"}
