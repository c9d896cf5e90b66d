"""
llm_engine.py
=============
OpenAI chat completion for RAG-grounded movie recommendations.

  • model             : gpt-4
  • temperature       : 0.65
  • frequency_penalty : 0.5

The model only sees the retrieved context and the user's question, and is
told to answer "Sorry, I don't know the answer." when the context does not
cover the question (including when no documents matched at all).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from rag_pipeline.config import (
    DEFAULT_CHAT_MODEL,
    DEFAULT_FREQUENCY_PENALTY,
    DEFAULT_TEMPERATURE,
)
from rag_pipeline.errors import GenerationFailed
from rag_pipeline.transcript import Transcript

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate a conversational response."

_USER_PROMPT_TEMPLATE = "Context: {context} Question: {question}"


def build_user_prompt(context: str, question: str) -> str:
    return _USER_PROMPT_TEMPLATE.format(context=context, question=question)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def respond(
    client: Any,
    transcript: Transcript,
    context: str,
    question: str,
    model: str = DEFAULT_CHAT_MODEL,
    temperature: float = DEFAULT_TEMPERATURE,
    frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY,
) -> Optional[str]:
    """
    Ask the chat model to answer *question* from *context*.

    The user turn is appended to *transcript* before the call and the
    assistant turn after it, so on success the transcript grows by exactly
    two messages.  The returned text is the first choice's content, verbatim.

    Raises GenerationFailed on any service error; the underlying detail is
    logged only.
    """
    transcript.add_user(build_user_prompt(context, question))

    try:
        completion = await client.chat.completions.create(
            model             = model,
            messages          = transcript.messages,
            temperature       = temperature,
            frequency_penalty = frequency_penalty,
        )
        message = completion.choices[0].message
    except Exception as exc:
        logger.error("Chat completion failed (%s): %s", model, exc)
        raise GenerationFailed(GENERATION_FAILED_MESSAGE) from exc

    content = message.content
    transcript.add_assistant(content or "")
    logger.info("Chat response: %s", content)
    return content
