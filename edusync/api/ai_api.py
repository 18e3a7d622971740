from fastapi import APIRouter, Depends, Request

from edusync.auth.dependencies import any_user, staff_only
from edusync.schemas.ai_schema import (
    PerformanceRequest, QuestionRequest, QuizRequest, QuizResponse, SummarizeRequest,
)
from edusync.services.ai_service import TutorAssistant

router = APIRouter(prefix="/ai", tags=["AI Tutor"])


def get_tutor(request: Request) -> TutorAssistant:
    return request.app.state.tutor


@router.post("/summarize", dependencies=[Depends(any_user)])
def summarize(payload: SummarizeRequest, tutor: TutorAssistant = Depends(get_tutor)):
    return {"summary": tutor.summarize(payload.text)}


@router.post("/question", dependencies=[Depends(any_user)])
def answer_question(payload: QuestionRequest, tutor: TutorAssistant = Depends(get_tutor)):
    return {"answer": tutor.answer_question(payload.question, payload.context)}


@router.post("/quiz", response_model=QuizResponse, dependencies=[Depends(any_user)])
def generate_quiz(payload: QuizRequest, tutor: TutorAssistant = Depends(get_tutor)):
    return QuizResponse(questions=tutor.generate_quiz(payload.subject, payload.topic, payload.count))


@router.post("/performance", dependencies=[Depends(staff_only)])
def analyze_performance(payload: PerformanceRequest, tutor: TutorAssistant = Depends(get_tutor)):
    return {"analysis": tutor.analyze_performance(payload.data)}
