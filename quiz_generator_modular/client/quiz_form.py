# client/quiz_form.py
"""
Form state for the quiz generator client.

Holds the text being edited, the last generated quizzes, the loading flag and
the current error message. Every user-facing message is Japanese, matching
the browser page served at /quiz.
"""

import logging
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Union
import httpx
from quiz_generator_modular.config import config
from quiz_generator_modular.parsers.text_input import sanitize_text, truncate_text

logger = logging.getLogger(__name__)

FILE_READ_ERROR = "ファイルの読み込みに失敗しました。"
EMPTY_TEXT_ERROR = "テキストが空です。入力またはファイルをアップロードしてください。"
API_ERROR_FALLBACK = "APIエラーが発生しました"
UNKNOWN_ERROR_FALLBACK = "不明なエラーが発生しました"

class QuizApiError(Exception):
    """Non-success response from POST /api/quiz"""

class QuizFormController:
    """Client-side state and actions of the quiz form"""

    def __init__(self, api_url: Optional[str] = None, transport: Optional[httpx.BaseTransport] = None):
        self.api_url = api_url or config.quiz_api_url
        self.transport = transport
        self.text: str = ""
        self.quizzes: List[Dict[str, Any]] = []
        self.loading: bool = False
        self.error: Optional[str] = None

    @property
    def can_generate(self) -> bool:
        """Mirrors the enabled state of the generate button"""
        return not self.loading and bool(self.text.strip())

    def load_file(self, source: Union[str, Path, IO]) -> bool:
        """Replace text with the first max_text_length characters of a file"""
        try:
            if isinstance(source, (str, Path)):
                content = Path(source).read_text(encoding="utf-8")
            else:
                content = source.read()
            if isinstance(content, bytes):
                content = content.decode("utf-8")
        except Exception as e:
            logger.warning(f"⚠️ Could not read text file: {e}")
            self.error = FILE_READ_ERROR
            return False

        self.text = truncate_text(content)
        return True

    def edit_text(self, value: str) -> None:
        self.text = truncate_text(value)

    def clear(self) -> None:
        self.text, self.quizzes, self.error = "", [], None

    def generate(self) -> List[Dict[str, Any]]:
        """Send the trimmed text to the API once and store the outcome"""
        payload = sanitize_text(self.text)
        if not payload:
            self.error = EMPTY_TEXT_ERROR
            return self.quizzes

        self.loading = True
        self.error = None
        self.quizzes = []
        try:
            with httpx.Client(transport=self.transport, timeout=None) as client:
                response = client.post(self.api_url, json={"text": payload})
            data = response.json()

            if not response.is_success:
                message = data.get("error") if isinstance(data, dict) else None
                raise QuizApiError(message or API_ERROR_FALLBACK)

            quizzes = data.get("quizzes") if isinstance(data, dict) else None
            self.quizzes = list(quizzes[:config.max_quizzes]) if isinstance(quizzes, list) else []
        except Exception as e:
            logger.info(f"Quiz generation failed: {e}")
            self.error = str(e) or UNKNOWN_ERROR_FALLBACK
        finally:
            self.loading = False

        return self.quizzes
