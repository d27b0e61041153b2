import json
import httpx
import pytest
from fastapi.testclient import TestClient
from quiz_generator_modular.api.dependencies import get_http_transport
from quiz_generator_modular.api.fastapi_app import app
from quiz_generator_modular.config import API_KEY_ENV_VARS

def completion(content):
    """Minimal chat-completions body carrying content in choices[0].message"""
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}

def quiz_content(count):
    return json.dumps({
        "quizzes": [{"question": f"Q{i}", "answer": f"A{i}"} for i in range(1, count + 1)]
    })

class ProviderStub:
    """Scripted OpenAI endpoint backed by httpx.MockTransport"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = completion(quiz_content(5))
        self.text = None

    def reply(self, body=None, status_code=200, text=None):
        self.body, self.status_code, self.text = body, status_code, text

    def handler(self, request):
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def sent_payload(self):
        return json.loads(self.requests[-1].content)

@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    return "sk-test"

@pytest.fixture
def provider():
    stub = ProviderStub()
    app.dependency_overrides[get_http_transport] = lambda: httpx.MockTransport(stub.handler)
    yield stub
    app.dependency_overrides.clear()

@pytest.fixture
def client(provider):
    return TestClient(app)
