# services/openai_client.py
import logging
from typing import Any, Dict, List, Optional
import httpx
from quiz_generator_modular.config import get_model_config
from quiz_generator_modular.services.errors import ProviderError

logger = logging.getLogger(__name__)

class OpenAIChatClient:
    """Single-shot chat-completions caller (no retry, no streaming)"""

    def __init__(self, api_key: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        model_config = get_model_config()
        self.url = model_config["api_url"]
        self.model = model_config["model_name"]
        self.temperature = model_config["temperature"]
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

    async def create_chat_completion(self, messages: List[Dict[str, str]]) -> Any:
        """POST the messages and return the decoded JSON body"""
        # No client-side deadline, the request waits for the provider
        async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
            response = await client.post(self.url, headers=self.headers, json=self.build_payload(messages))

        logger.info(f"OpenAI responded with status {response.status_code}")
        if not response.is_success:
            raise ProviderError(
                "OpenAI",
                message="API request failed",
                status_code=response.status_code,
                response=response.text or response.reason_phrase,
            )

        return response.json()
