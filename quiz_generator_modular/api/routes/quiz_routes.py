# api/routes/quiz_routes.py
import logging
from typing import Optional
import httpx
from fastapi import APIRouter, Depends, Request
from ..dependencies import get_http_transport
from ..models import QuizResponse, QuizErrorResponse, QuizItem, HealthResponse
from quiz_generator_modular.config import get_api_key
from quiz_generator_modular.services.errors import QuizGenerationError
from quiz_generator_modular.services.quiz_generator import generate_quizzes

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_model=dict)
def root_endpoint():
    """Root endpoint to check if API is running"""
    return {"message": "Quiz Generator API is running"}

@router.get("/health", response_model=HealthResponse)
def health_endpoint():
    """Liveness check; reports whether an API key is set, never the key itself"""
    return HealthResponse(status="ok", api_key_configured=get_api_key() is not None)

@router.post(
    "/api/quiz",
    response_model=QuizResponse,
    responses={400: {"model": QuizErrorResponse}, 500: {"model": QuizErrorResponse}},
)
async def generate_quiz_endpoint(
    request: Request,
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_http_transport),
):
    """Generate up to 5 question/answer pairs from the posted text"""
    try:
        body = await request.json()
        quizzes = await generate_quizzes(body, transport=transport)
        return QuizResponse(quizzes=[QuizItem(**quiz) for quiz in quizzes])
    except QuizGenerationError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while generating quizzes")
        raise QuizGenerationError(500, "Unexpected server error", details=str(e) or type(e).__name__)
