"""
Welcome endpoint.

The frontend calls this route on load to show a greeting and to check
that the backend is reachable.
"""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()

WELCOME_MESSAGE = "Welcome to PaLevel API!"


@router.get("", response_model=Dict[str, str])
async def hello() -> Dict[str, str]:
    return {"message": WELCOME_MESSAGE}
