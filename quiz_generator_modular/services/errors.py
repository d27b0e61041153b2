# services/errors.py
from typing import Any, Dict, Optional

class QuizGenerationError(Exception):
    """Terminal failure of one quiz request, carrying its HTTP response shape"""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None, raw: Optional[str] = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details
        self.raw = raw

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        if self.raw is not None:
            body["raw"] = self.raw
        return body

class ProviderError(Exception):
    """Non-success response from the model provider"""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None, response: Optional[str] = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.response = response
        super().__init__(f"{provider}: {message}")
