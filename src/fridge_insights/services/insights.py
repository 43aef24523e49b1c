"""Insight orchestration: recipes, KPIs and chat turns."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fridge_insights.domain.conversations import Message
from fridge_insights.domain.insights import Recipe
from fridge_insights.errors import NotFoundError, UpstreamError
from fridge_insights.services.conversations import ConversationService
from fridge_insights.services.interpreter import interpret_kpis, interpret_recipes
from fridge_insights.services.items import ItemService
from fridge_insights.services.prompts import (
    build_chat_context,
    build_chat_messages,
    build_kpi_prompt,
    build_recipe_prompt,
)
from fridge_insights.services.validation import require_string

_logger = logging.getLogger(__name__)


class LanguageModelClient(Protocol):
    """Interface for the external language model."""

    async def complete(
        self, messages: list[dict[str, str]], temperature: float
    ) -> str:
        """Return the model's text reply to a message sequence."""


@dataclass(frozen=True)
class ChatTurn:
    """Result of a single chat exchange."""

    reply: str
    messages: list[Message]


@dataclass
class InsightService:
    """Coordinates stores, prompts and the language model."""

    item_service: ItemService
    conversation_service: ConversationService
    llm_client: LanguageModelClient
    recipe_temperature: float = 0.7
    kpi_temperature: float = 0.2
    chat_temperature: float = 0.7
    timeout_seconds: float = 60.0
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return the current calendar date in the household timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    async def suggest_recipes(self, user_id: UUID) -> list[Recipe]:
        """Suggest recipes that use up the soonest-expiring items."""
        items = self.item_service.get_items(user_id)
        if not items:
            raise NotFoundError("No refrigerated items to suggest recipes from")
        prompt = build_recipe_prompt(items)
        try:
            reply = await self._ask(
                [{"role": "user", "content": prompt}], self.recipe_temperature
            )
        except UpstreamError:
            _logger.warning("Recipe suggestion degraded to empty: user_id=%s", user_id)
            return []
        return interpret_recipes(reply)

    async def compute_kpis(
        self, user_id: UUID, today: date | None = None
    ) -> dict[str, str]:
        """Estimate waste and spending metrics for the current inventory."""
        items = self.item_service.get_items(user_id)
        prompt = build_kpi_prompt(items, today or self.today())
        try:
            reply = await self._ask(
                [{"role": "user", "content": prompt}], self.kpi_temperature
            )
        except UpstreamError:
            _logger.warning("KPI estimation degraded to empty: user_id=%s", user_id)
            return {}
        return interpret_kpis(reply)

    async def chat_turn(self, user_id: UUID, text: object) -> ChatTurn:
        """Answer a chat message and persist the exchange.

        The stored log grows by three messages per turn: the inventory
        context, the user message and the assistant reply. Concurrent
        turns for the same user race; the last full write wins.
        """
        content = require_string(text, "message")
        items = self.item_service.get_items(user_id)
        conversations = self.conversation_service
        conversation = conversations.load(user_id)

        context = conversations.message("system", build_chat_context(items))
        user_message = conversations.message("user", content)
        reply = await self._ask(
            build_chat_messages(context, conversation.messages, user_message),
            self.chat_temperature,
        )
        assistant_message = conversations.message("assistant", reply)

        updated = conversations.append(
            conversation, context, user_message, assistant_message
        )
        conversations.save(updated)
        return ChatTurn(reply=reply, messages=updated.messages)

    def chat_history(
        self, user_id: UUID, include_system: bool = False
    ) -> list[Message]:
        """Return the stored conversation for a user."""
        self.item_service.require_user(user_id)
        return self.conversation_service.history(user_id, include_system)

    async def _ask(self, messages: list[dict[str, str]], temperature: float) -> str:
        """Call the model once, bounded by the configured timeout."""
        try:
            return await asyncio.wait_for(
                self.llm_client.complete(messages, temperature),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as exc:
            _logger.exception(
                "Language model timed out after %ss", self.timeout_seconds
            )
            raise UpstreamError("Language model timed out") from exc
        except UpstreamError:
            _logger.exception("Language model returned no usable reply")
            raise
        except Exception as exc:
            _logger.exception("Language model call failed")
            raise UpstreamError("Language model call failed") from exc
