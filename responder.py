from typing import Callable, Optional

# A responder maps a question to an answer and never raises.
Responder = Callable[[str], str]

KEYWORD = "symptom"

RECOMMENDATION = (
    "Based on the symptoms you describe, it is recommended that you consult a physician "
    "for a proper evaluation."
)
GENERIC_PROMPT = "Could you please provide more details about your question so I can help you better?"

BACKENDS = ("keyword", "llm")


def keyword_responder(question: str) -> str:
    if KEYWORD in question.lower():
        return RECOMMENDATION
    return GENERIC_PROMPT


def get_responder(backend: Optional[str] = None, settings=None) -> Responder:
    """
    Resolve the configured responder variant:
    - "keyword": the substring rule above
    - "llm": OpenAI chat completion, falling back to the keyword rule
    """
    if settings is None:
        from config import get_settings
        settings = get_settings()
    name = (backend or settings.responder).strip().lower()
    if name == "keyword":
        return keyword_responder
    if name == "llm":
        # imported here, llm_wrapper depends on keyword_responder
        from llm_wrapper import LLMResponder
        return LLMResponder.from_settings(settings)
    raise ValueError(f"Unknown responder backend {name!r}; expected one of {', '.join(BACKENDS)}")
