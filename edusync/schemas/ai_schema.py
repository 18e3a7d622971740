from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SummarizeRequest(BaseModel):
    text: str = Field(min_length=1)


class QuestionRequest(BaseModel):
    question: str = Field(min_length=1)
    context: Optional[str] = None


class QuizRequest(BaseModel):
    subject: str
    topic: str
    count: int = Field(default=5, ge=1, le=20)


class QuizQuestion(BaseModel):
    question: str
    options: List[str]
    correct_answer: str


class QuizResponse(BaseModel):
    questions: List[QuizQuestion]


class PerformanceRequest(BaseModel):
    data: Dict[str, Any]
