from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class QuestionRequest(BaseModel):
    question: Optional[str] = None


class AnswerResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str


class QueryLogEntry(BaseModel):
    id: int
    question: str
    response: str
    created_at: datetime


class HistoryResponse(BaseModel):
    entries: List[QueryLogEntry] = Field(default_factory=list)
