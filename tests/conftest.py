"""
Shared fixtures: in-process app with a stubbed upstream provider
"""
import json
from typing import List, Optional

import httpx
import pytest

from ai_pm.config import Settings
from ai_pm.main import create_app
from ai_pm.services.ai import AIService, get_ai_service


class UpstreamStub:
    """Stands in for the Groq API behind an httpx.MockTransport"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.content: Optional[str] = "OK"
        self.status_code = 200
        self.body: Optional[str] = None
        self.error: Optional[Exception] = None

    def reply(self, content: str) -> None:
        self.content = content

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(
            self.status_code,
            json={"choices": [{"message": {"role": "assistant", "content": self.content}}]},
        )

    @property
    def calls(self) -> int:
        return len(self.requests)

    def payload(self, n: int = -1) -> dict:
        return json.loads(self.requests[n].content)


@pytest.fixture
def settings():
    return Settings(groq_api_key="test-key", _env_file=None)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def ai_service(settings, upstream):
    return AIService(settings, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def app(settings, upstream):
    app = create_app(settings)
    app.dependency_overrides[get_ai_service] = lambda: AIService(
        settings, transport=httpx.MockTransport(upstream.handler)
    )
    return app


@pytest.fixture
async def client(app):
    """Async HTTP client talking to the app in-process"""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
