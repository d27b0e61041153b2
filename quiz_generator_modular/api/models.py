# api/models.py
from pydantic import BaseModel
from typing import List, Optional

class QuizItem(BaseModel):
    """One generated question/answer pair"""
    question: str
    answer: str

class QuizResponse(BaseModel):
    """Successful generation, 1 to 5 items"""
    quizzes: List[QuizItem]

class QuizErrorResponse(BaseModel):
    """Error body for 400/500 responses"""
    error: str
    details: Optional[str] = None
    raw: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    api_key_configured: bool
