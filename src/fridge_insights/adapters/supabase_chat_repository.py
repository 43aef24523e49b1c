"""Supabase-backed conversation repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fridge_insights.domain.conversations import Conversation, Message
from fridge_insights.services.conversations import ConversationRepository


@dataclass
class SupabaseChatRepository(ConversationRepository):
    """Supabase implementation storing one chat document per user."""

    client: Client

    def get_conversation(self, user_id: UUID) -> Conversation | None:
        """Return the user's conversation, if present."""
        response = (
            self.client.table("chats")
            .select("user_id, messages")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Conversation(
            user_id=UUID(str(row["user_id"])),
            messages=[_parse_message(raw) for raw in row.get("messages") or []],
        )

    def upsert_conversation(self, conversation: Conversation) -> None:
        """Insert or replace the conversation's full message list."""
        self.client.table("chats").upsert(
            {
                "user_id": str(conversation.user_id),
                "messages": [
                    {
                        "role": message.role,
                        "content": message.content,
                        "timestamp": message.timestamp.isoformat(),
                    }
                    for message in conversation.messages
                ],
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_message(raw: dict[str, object]) -> Message:
    timestamp_raw = raw.get("timestamp")
    timestamp = (
        datetime.fromisoformat(timestamp_raw)
        if isinstance(timestamp_raw, str) and timestamp_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    return Message(
        role=raw.get("role", "user"),
        content=str(raw.get("content", "")),
        timestamp=timestamp,
    )
