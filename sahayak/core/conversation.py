"""
Conversation turns exchanged with the client.

The server keeps no conversation state: the client sends its recent
history with every chat request.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

ASSISTANT_ROLES = {"assistant", "bot", "model"}


def new_session_id() -> str:
    """Random 128-bit session identifier."""
    return str(uuid4())


@dataclass(frozen=True)
class ConversationTurn:
    """Single turn in conversation."""
    role: str  # "user" or "assistant"
    content: str
    language: Optional[str] = None

    @classmethod
    def from_client(cls, data: Mapping[str, Any]) -> Optional["ConversationTurn"]:
        """
        Build a turn from a client history entry.

        Accepts `{sender|type|role, text|content}`; entries without text
        are skipped (None).
        """
        text = data.get("text") or data.get("content") or ""
        if not isinstance(text, str) or not text.strip():
            return None
        sender = str(data.get("sender") or data.get("type") or data.get("role") or "user").lower()
        role = "assistant" if sender in ASSISTANT_ROLES else "user"
        return cls(role=role, content=text.strip(), language=data.get("language"))

    def to_llm_message(self) -> Dict[str, str]:
        """Convert to LLM message format."""
        return {"role": self.role, "content": self.content}
