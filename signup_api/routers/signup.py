from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from signup_api.controllers.protocols import HttpRequest
from signup_api.controllers.signup_controller import SignUpController
from signup_api.core.config import get_settings
from signup_api.core.rate_limiter import rate_limit_ip
from signup_api.factories import make_signup_controller

router = APIRouter(prefix="/api", tags=["signup"])


def get_signup_controller() -> SignUpController:
    return make_signup_controller()


async def _json_body(request: Request) -> dict[str, Any]:
    """Parsed JSON object, or {} when the body is empty, malformed or not an object."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post("/signup")
async def signup(request: Request, controller: SignUpController = Depends(get_signup_controller)):
    settings = get_settings()
    rate_limit_ip(
        request,
        "signup",
        limit=settings.signup_rate_limit,
        window_seconds=settings.signup_rate_window_seconds,
    )
    response = await controller.handle(HttpRequest(body=await _json_body(request)))
    return JSONResponse(response.body_dict(), status_code=response.status_code)
