"""
External-service responder for the Virtual Health Assistant.

Provides:
- call_openai_llm: one chat completion for a question; returns the raw text
- LLMResponder: responder callable that falls back to the keyword rule when
  the service is unconfigured, errors, or answers with nothing
"""

import logging
from typing import Optional

from openai import OpenAI

from responder import Responder, keyword_responder

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM_PROMPT = (
    "You are a conservative educational health assistant. Answer in two or three plain sentences. "
    "Do NOT diagnose, and do NOT include treatments, dosages, or prescriptions. "
    "If the question mentions symptoms, recommend consulting a physician. "
    "If emergency signs are described (chest pain, severe breathlessness, severe bleeding, fainting), "
    "start with \"Seek emergency care immediately.\""
)


def call_openai_llm(client: OpenAI, question: str, model: str = DEFAULT_MODEL, timeout_secs: float = 15) -> str:
    """
    Returns the stripped text of a single chat completion.
    Errors from the client propagate to the caller.
    """
    resp = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ],
        temperature=0.0,
        max_tokens=300,
        timeout=timeout_secs,
    )
    text = resp.choices[0].message.content or ""
    return text.strip()


class LLMResponder:
    def __init__(
        self,
        client: Optional[OpenAI] = None,
        model: str = DEFAULT_MODEL,
        timeout_secs: float = 15,
        fallback: Responder = keyword_responder,
    ):
        self.client = client
        self.model = model
        self.timeout_secs = timeout_secs
        self.fallback = fallback

    @classmethod
    def from_settings(cls, settings) -> "LLMResponder":
        client = OpenAI(api_key=settings.openai_api_key) if settings.openai_api_key else None
        if client is None:
            logger.warning("OPENAI_API_KEY is not set; llm responder will use the keyword rule")
        return cls(client=client, model=settings.openai_model, timeout_secs=settings.llm_timeout_secs)

    def __call__(self, question: str) -> str:
        if self.client is None:
            return self.fallback(question)
        try:
            text = call_openai_llm(self.client, question, model=self.model, timeout_secs=self.timeout_secs)
        except Exception as e:
            logger.warning("LLM call failed, using fallback: %s", e)
            return self.fallback(question)
        if not text:
            logger.warning("LLM returned empty output, using fallback")
            return self.fallback(question)
        return text
