"""Conversation store: per-user assistant message history."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fridge_insights.domain.conversations import Conversation, Message, Role


class ConversationRepository(Protocol):
    """Persistence interface for conversations."""

    def get_conversation(self, user_id: UUID) -> Conversation | None:
        """Return the user's conversation, if one exists."""

    def upsert_conversation(self, conversation: Conversation) -> None:
        """Insert the conversation or replace its full message list."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ConversationService:
    """Loads, extends and persists conversations."""

    repository: ConversationRepository
    clock: Callable[[], datetime] = _utcnow

    def load(self, user_id: UUID) -> Conversation:
        """Return the stored conversation or an empty one for a first turn."""
        existing = self.repository.get_conversation(user_id)
        if existing is None:
            return Conversation(user_id=user_id, messages=[])
        return existing

    def message(self, role: Role, content: str) -> Message:
        """Create a timestamped message."""
        return Message(role=role, content=content, timestamp=self.clock())

    def append(self, conversation: Conversation, *messages: Message) -> Conversation:
        """Return a copy of the conversation with messages added at the end."""
        return Conversation(
            user_id=conversation.user_id,
            messages=[*conversation.messages, *messages],
        )

    def save(self, conversation: Conversation) -> None:
        """Persist the full message list, creating the conversation if needed."""
        self.repository.upsert_conversation(conversation)

    def history(self, user_id: UUID, include_system: bool = False) -> list[Message]:
        """Return stored messages, hiding system context unless requested."""
        messages = self.load(user_id).messages
        if include_system:
            return list(messages)
        return [message for message in messages if message.role != "system"]
