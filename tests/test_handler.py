import logging

import pytest

from handler import EMPTY_QUESTION_MESSAGE, EmptyQuestionError, handle_question
from responder import GENERIC_PROMPT, RECOMMENDATION, keyword_responder


class RecordingResponder:
    def __init__(self, answer="ok"):
        self.answer = answer
        self.calls = []

    def __call__(self, question):
        self.calls.append(question)
        return self.answer


class BrokenSink:
    def append(self, question, response):
        raise RuntimeError("disk full")

    def recent(self, limit=10):
        return []


@pytest.mark.parametrize("question", ["Symptom check", "I have a headache", "  x  "])
def test_valid_question_answered_by_responder(question):
    result = handle_question(question)
    assert result.answer == keyword_responder(question)


def test_question_passed_to_responder_untrimmed():
    responder = RecordingResponder()
    handle_question("  fever?  ", responder=responder)
    assert responder.calls == ["  fever?  "]


@pytest.mark.parametrize("question", [None, "", " ", "\t\n  ", 42, b"symptom"])
def test_empty_question_rejected_without_calling_responder(question, memory_sink):
    responder = RecordingResponder()
    with pytest.raises(EmptyQuestionError) as exc:
        handle_question(question, responder=responder, sink=memory_sink)
    assert exc.value.message == EMPTY_QUESTION_MESSAGE
    assert responder.calls == []
    assert memory_sink.recent() == []


def test_successful_request_appends_one_entry(memory_sink):
    handle_question("symptom list", sink=memory_sink)
    entries = memory_sink.recent()
    assert len(entries) == 1
    assert entries[0].question == "symptom list"
    assert entries[0].response == RECOMMENDATION


def test_entry_ids_increase(sqlite_sink):
    handle_question("first", sink=sqlite_sink)
    handle_question("second", sink=sqlite_sink)
    newest, older = sqlite_sink.recent()
    assert newest.id > older.id
    assert (newest.question, newest.response) == ("second", GENERIC_PROMPT)


def test_sink_failure_does_not_affect_answer(caplog):
    with caplog.at_level(logging.ERROR, logger="handler"):
        result = handle_question("symptom", sink=BrokenSink())
    assert result.answer == RECOMMENDATION
    assert "Failed to append query log entry" in caplog.text
