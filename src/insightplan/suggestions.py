import logging
from typing import Any, Dict, List, Optional

import openai
from openai import AsyncOpenAI

from .config import SuggestionConfig, get_config

logger = logging.getLogger(__name__)

FALLBACK_SUGGESTION = "⚠️ AI could not generate suggestions."

SYSTEM_PROMPT = """You are an AI educational assistant. Based on the subject performance provided, generate AI-powered study tips.

Use this exact format:
- Each subject title must be **bold with emoji and performance** (e.g., **Math 🤔**: 61.65%)
- Add 3-4 bullet points starting with '-' (not '*')
- Add a **Pro Tip:** for each subject with some unique learning advice
- Use emojis for fun and engagement
- Add a line break between each bullet point
- After each subject, include a horizontal line (---) for visual separation
- End with a **General Improvement Tips 💪** section (4-5 tips with the same structure)
- Format using markdown style
- If a subject has no valid data or no tips to suggest, skip it entirely (no heading, no line)
- Do not include empty or placeholder subjects"""


def build_messages(summary_text: str) -> List[Dict[str, str]]:
    user_prompt = (
        f"Here is the subject performance summary:\n\n{summary_text}\n\n"
        "Now generate the AI-powered study tips."
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


def extract_content(response: Any) -> Optional[str]:
    """Pull the first choice's text out of a chat completion, or None."""
    try:
        choices = response.choices
        if not choices:
            return None
        content = choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError):
        return None
    if not isinstance(content, str) or not content.strip():
        return None
    return content


class SuggestionGateway:
    """Single-shot adapter around an OpenAI-compatible chat completions API.

    Every failure (no key, network error, bad status, empty or malformed
    payload) collapses to ``FALLBACK_SUGGESTION``; nothing is retried.
    """

    def __init__(self, config: Optional[SuggestionConfig] = None, client: Optional[Any] = None):
        self._config = config or get_config().suggestions
        self._client = client

    def _get_client(self) -> Optional[Any]:
        if self._client is not None:
            return self._client
        if not self._config.api_key:
            logger.warning("No API key configured for the suggestion service")
            return None
        self._client = AsyncOpenAI(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
            max_retries=0,
        )
        return self._client

    async def suggest(self, summary_text: str) -> str:
        if not summary_text or not summary_text.strip():
            logger.info("Empty performance summary; skipping suggestion request")
            return FALLBACK_SUGGESTION

        client = self._get_client()
        if client is None:
            return FALLBACK_SUGGESTION

        try:
            response = await client.chat.completions.create(
                model=self._config.model,
                messages=build_messages(summary_text),
            )
        except (openai.OpenAIError, ValueError) as exc:
            # A 200 reply whose JSON body does not decode surfaces as ValueError.
            logger.warning("Suggestion request failed: %s", exc)
            return FALLBACK_SUGGESTION

        content = extract_content(response)
        if content is None:
            logger.warning("Suggestion service returned no usable content")
            return FALLBACK_SUGGESTION
        return content
