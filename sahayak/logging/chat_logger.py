"""
Chat Logger for Markdown Conversation Logs.
Creates human-readable logs of chat turns and failures for review.
"""

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
import json

logger = logging.getLogger(__name__)


class ChatLogger:
    """
    Markdown logger for the chat assistant.

    Documents:
    - System lifecycle events
    - Chat turns (message, detected language, reply, suggested schemes)
    - Errors surfaced to users
    """

    def __init__(self, log_path: str = "logs/chat_log.md"):
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        self._queue: asyncio.Queue = asyncio.Queue()
        self._writer_task: Optional[asyncio.Task] = None
        self._running = False

        # Start the async writer
        self._start_writer()

    def _start_writer(self):
        """Start the background log writer when an event loop is running."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No event loop, will write synchronously
            return
        self._running = True
        self._writer_task = asyncio.create_task(self._write_loop())

    async def _write_loop(self):
        """Background loop to write logs asynchronously."""
        while self._running:
            try:
                entry = await self._queue.get()
                self._sync_write(entry)
            except asyncio.CancelledError:
                break

    def _sync_write(self, entry: str):
        """Append an entry to the log file."""
        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(entry)
                f.write("\n")
        except OSError as e:
            logger.error(f"Failed to write chat log: {e}")

    async def _log(self, entry: str):
        """Add a log entry to the queue."""
        if self._running and self._writer_task:
            await self._queue.put(entry)
        else:
            self._sync_write(entry)

    # =========================
    # Public Logging Methods
    # =========================

    async def log_chat_turn(
        self,
        session_id: str,
        message: str,
        language: str,
        response: str,
        scheme_ids: List[str],
        detection: Optional[Dict[str, Any]] = None,
        extracted_info: Optional[Dict[str, Any]] = None,
        latency_ms: Optional[float] = None
    ):
        """Log a completed chat turn."""
        timestamp = datetime.now().strftime("%H:%M:%S")

        detected = "n/a"
        if detection:
            detected = f"{detection['language']} ({detection['confidence']:.2f})"

        latency = f"{latency_ms:.0f}ms" if latency_ms is not None else "n/a"
        schemes = ", ".join(f"`{sid}`" for sid in scheme_ids) or "none"

        entry = f"""### 💬 Chat Turn | {timestamp}

**Session:** `{session_id}`
**Language:** {language} | **Detected:** {detected} | **Latency:** {latency}

> **User:** {message}

> **Assistant:** {response}

**Suggested schemes:** {schemes}
"""
        if extracted_info:
            entry += f"**Extracted info:** `{json.dumps(extracted_info, ensure_ascii=False)}`\n"

        await self._log(entry)

    async def log_error(
        self,
        session_id: Optional[str],
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """Log an error returned to the user."""
        timestamp = datetime.now().strftime("%H:%M:%S")

        entry = f"""### ❌ Error | {timestamp}

**Session:** `{session_id or 'n/a'}`
**Code:** `{error_code}`
**Message:** {message}
"""
        if details:
            entry += f"""
```json
{json.dumps(details, indent=2, ensure_ascii=False, default=str)}
```
"""
        await self._log(entry)

    async def log_system_event(
        self,
        event: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """Log a system lifecycle event."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        entry = f"""---

## ⚙️ {event}

**Timestamp:** {timestamp}
"""
        for key, value in (details or {}).items():
            entry += f"**{key}:** {value}  \n"

        await self._log(entry)

    async def close(self):
        """Flush pending entries and stop the writer."""
        self._running = False

        if self._writer_task:
            self._writer_task.cancel()
            try:
                await self._writer_task
            except asyncio.CancelledError:
                pass
            self._writer_task = None

        while not self._queue.empty():
            self._sync_write(self._queue.get_nowait())
