# app.py - Flask backend
import logging
from typing import Optional

from flask import Flask, jsonify, request
from pydantic import ValidationError

from config import Settings, get_settings
from handler import EMPTY_QUESTION_MESSAGE, EmptyQuestionError, handle_question
from pydantic_models import ErrorResponse, HistoryResponse, QuestionRequest
from query_log import QueryLogSink, SQLiteQueryLog
from responder import Responder, get_responder

logger = logging.getLogger(__name__)

MAX_HISTORY = 100


def _error(message: str, status: int):
    return jsonify(ErrorResponse(error=message).model_dump()), status


def create_app(
    responder: Optional[Responder] = None,
    sink: Optional[QueryLogSink] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    settings = settings or get_settings()
    if responder is None:
        responder = get_responder(settings.responder, settings)
    if sink is None and settings.query_log_enabled:
        sink = SQLiteQueryLog(settings.query_log_db)

    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def index():
        return "Virtual Health Assistant - POST /api/ask with {'question':'...'}"

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/ask", methods=["POST"])
    def ask():
        data = request.get_json(force=True, silent=True)
        try:
            body = QuestionRequest.model_validate(data if isinstance(data, dict) else {})
        except ValidationError:
            return _error(EMPTY_QUESTION_MESSAGE, 400)
        try:
            result = handle_question(body.question, responder=responder, sink=sink)
        except EmptyQuestionError as e:
            logger.info("Rejected empty question")
            return _error(e.message, 400)
        return jsonify(result.model_dump())

    @app.route("/api/history", methods=["GET"])
    def history():
        if sink is None:
            return _error("Query logging is disabled.", 404)
        limit = request.args.get("limit", default=10, type=int)
        if limit is None or limit < 1:
            return _error("'limit' must be a positive integer.", 400)
        entries = sink.recent(min(limit, MAX_HISTORY))
        return jsonify(HistoryResponse(entries=entries).model_dump(mode="json"))

    return app


if __name__ == "__main__":
    logging.basicConfig(level=get_settings().log_level, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
    create_app().run(host="0.0.0.0", port=5000)
