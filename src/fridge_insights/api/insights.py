"""Recipe, KPI and chat endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

from fridge_insights.api.models import ChatRequest, serialize_message

if TYPE_CHECKING:
    from fridge_insights.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}", tags=["insights"])


@router.get("/recipes")
async def recipes(user_id: UUID, request: Request) -> dict[str, object]:
    """Suggest recipes built around the soonest-expiring items."""
    container: AppContainer = request.app.state.container
    suggestions = await container.insight_service.suggest_recipes(user_id)
    return {"recipes": [recipe.model_dump() for recipe in suggestions]}


@router.get("/kpis")
async def kpis(user_id: UUID, request: Request) -> dict[str, object]:
    """Estimate waste and spending metrics."""
    container: AppContainer = request.app.state.container
    return {"kpis": await container.insight_service.compute_kpis(user_id)}


@router.post("/chat")
async def chat(
    user_id: UUID, payload: ChatRequest, request: Request
) -> dict[str, object]:
    """Run one assistant chat turn."""
    container: AppContainer = request.app.state.container
    turn = await container.insight_service.chat_turn(user_id, payload.message)
    return {
        "reply": turn.reply,
        "messages": [serialize_message(message) for message in turn.messages],
    }


@router.get("/chat")
async def chat_history(
    user_id: UUID, request: Request, include_system: bool = False
) -> dict[str, object]:
    """Return the stored chat history."""
    container: AppContainer = request.app.state.container
    messages = container.insight_service.chat_history(user_id, include_system)
    return {"messages": [serialize_message(message) for message in messages]}
