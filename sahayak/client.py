"""
HTTP client for the Sahayak API.
Keeps the conversation history on the caller's side, as the web front-end does.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from sahayak.core.languages import LanguageCode

logger = logging.getLogger(__name__)


class SahayakClient:
    """Async client for the chat and scheme endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = 30.0,
        history_limit: int = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)
        self.history: List[Dict[str, str]] = []
        self.history_limit = history_limit
        self.session_id: Optional[str] = None

    async def chat(self, message: str, language: LanguageCode) -> Dict[str, Any]:
        """Send a message; the session id and history are carried forward."""
        payload = {
            "message": message,
            "language": language.value,
            "conversationHistory": self.history[-self.history_limit:],
            "sessionId": self.session_id
        }
        response = await self._client.post("/api/chat", json=payload)
        data = response.json()

        if response.status_code != 200:
            logger.warning(f"Chat failed ({response.status_code}): {data.get('errorCode')}")
            # The error body carries a localized apology the user can hear
            return {"response": data.get("error"), "schemes": [], "error": data.get("errorCode")}

        self.session_id = data.get("sessionId", self.session_id)
        self.history.append({"sender": "user", "text": message})
        self.history.append({"sender": "assistant", "text": data.get("response", "")})
        return data

    async def search_schemes(
        self,
        query: str = "",
        category: Optional[str] = None,
        state: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        params = {k: v for k, v in {"query": query, "category": category, "state": state}.items() if v}
        response = await self._client.get("/api/schemes", params=params)
        response.raise_for_status()
        return response.json()["data"]

    async def close(self):
        await self._client.aclose()
