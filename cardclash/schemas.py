from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr

class Question(BaseModel):
    # Wire format is camelCase; unknown keys are kept so the raw JSON stays authoritative.
    model_config = ConfigDict(extra="allow")

    question_text: StrictStr = Field(alias="questionText", min_length=1)
    option_a: StrictStr = Field(alias="optionA", min_length=1)
    option_b: StrictStr = Field(alias="optionB", min_length=1)
    option_c: StrictStr = Field(alias="optionC", min_length=1)
    option_d: StrictStr = Field(alias="optionD", min_length=1)
    correct_answer: Literal["A", "B", "C", "D"] = Field(alias="correctAnswer")

class ValidatedDeckContent(BaseModel):
    raw: str
    questions: List[Question]

class Deck(BaseModel):
    id: int
    title: str
    content_json: str

class SessionMetrics(BaseModel):
    rounds_played: int = 0
    average_accuracy: str = "N/A"
    average_response_time: str = "N/A"

class GameSession(BaseModel):
    id: int
    deck_id: Optional[int] = None
    deck_title: Optional[str] = None
    created_at: Optional[str] = None
    summary_paragraphs: Optional[List[str]] = None
    metrics: Optional[SessionMetrics] = None

class DeckSummary(BaseModel):
    id: int
    title: str
    question_count: int = 0

class SessionSummary(BaseModel):
    id: int
    deck_id: Optional[int] = None
    deck_title: str
    created_at: str
    summary_preview: Optional[str] = None
    metrics: SessionMetrics

class SessionDetail(BaseModel):
    id: int
    deck_title: str
    created_at: str
    summary_paragraphs: List[str]
    metrics: SessionMetrics

class DashboardView(BaseModel):
    decks: List[DeckSummary]
    sessions: List[SessionSummary]
