"""Signup and login endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from fridge_insights.api.models import LoginRequest, SignupRequest
from fridge_insights.errors import InvalidCredentialError, ValidationError

if TYPE_CHECKING:
    from fridge_insights.containers import AppContainer

router = APIRouter(tags=["accounts"])


@router.post("/signup", response_model=None)
async def signup(payload: SignupRequest, request: Request) -> dict | JSONResponse:
    """Create a login account and an empty fridge for a new user."""
    container: AppContainer = request.app.state.container
    try:
        container.user_service.signup(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password=payload.password,
            confirm_password=payload.confirm_password,
        )
    except (ValidationError, InvalidCredentialError) as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"signUpSuccessful": False, "error": str(exc)},
        )
    return {"signUpSuccessful": True}


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Verify an identity token and return the matching user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.login(payload.token)
    return {
        "message": "Token verified successfully",
        "id": str(user.id),
        "name": user.full_name,
        "email": user.email,
    }
