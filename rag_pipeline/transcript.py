"""
transcript.py
=============
Role-tagged conversation passed to the chat-completion service.

A Transcript belongs to exactly one request: QueryPipeline creates a fresh
one per answer() call, so concurrent requests never see each other's turns.
"""

from __future__ import annotations

from typing import Dict, List, Optional

SYSTEM_PROMPT = """You are an enthusiastic movie expert who loves recommending movies to people. You will be given two pieces of information - some context about movies and a question. Your main job is to formulate a short answer to the question using the provided context. If you are unsure, say "Sorry, I don't know the answer." Do not make up answers."""


class Transcript:
    """Ordered system/user/assistant messages, seeded with one system instruction."""

    def __init__(self, system_prompt: Optional[str] = None):
        self._messages: List[Dict[str, str]] = [
            {"role": "system", "content": system_prompt or SYSTEM_PROMPT},
        ]

    def add_user(self, content: str) -> None:
        self._messages.append({"role": "user", "content": content})

    def add_assistant(self, content: str) -> None:
        self._messages.append({"role": "assistant", "content": content})

    @property
    def messages(self) -> List[Dict[str, str]]:
        """Copy of the messages, in the shape the chat API expects."""
        return [dict(m) for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)
