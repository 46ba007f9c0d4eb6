"""
Human‑readable status page.

``GET /test`` answers with a one‑line HTML page so that a deployment
can be checked from a browser without the frontend build.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/test", response_class=HTMLResponse, include_in_schema=False)
async def status_page() -> str:
    return "<h1>🚀 PaLevel Backend Running</h1>"
