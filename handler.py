import logging
from typing import Optional

from pydantic_models import AnswerResponse
from query_log import QueryLogSink
from responder import Responder, keyword_responder

logger = logging.getLogger(__name__)

EMPTY_QUESTION_MESSAGE = "Please enter a question."


class EmptyQuestionError(ValueError):
    def __init__(self, message: str = EMPTY_QUESTION_MESSAGE):
        super().__init__(message)
        self.message = message


def handle_question(
    question: Optional[str],
    responder: Responder = keyword_responder,
    sink: Optional[QueryLogSink] = None,
) -> AnswerResponse:
    """
    Validate a submitted question, answer it, and append the pair to the sink.

    Raises EmptyQuestionError for a missing, non-string or blank question; the responder
    and the sink are not touched in that case. A failing sink is logged and
    the answer is still returned.
    """
    if not isinstance(question, str) or not question.strip():
        raise EmptyQuestionError()

    answer = responder(question)
    logger.info("Answered question (%d chars) with %s", len(question), getattr(responder, "__name__", type(responder).__name__))

    if sink is not None:
        try:
            sink.append(question, answer)
        except Exception:
            logger.exception("Failed to append query log entry")

    return AnswerResponse(answer=answer)
