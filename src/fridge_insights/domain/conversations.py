"""Domain models for assistant conversations."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

Role = Literal["user", "assistant", "system"]


@dataclass(frozen=True)
class Message:
    """Single entry in a conversation log."""

    role: Role
    content: str
    timestamp: datetime

    def as_prompt(self) -> dict[str, str]:
        """Return the role/content pair sent to the language model."""
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class Conversation:
    """Ordered message history owned by a single user."""

    user_id: UUID
    messages: list[Message] = field(default_factory=list)
