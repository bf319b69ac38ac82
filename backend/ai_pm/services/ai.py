"""
AI Service - Groq chat-completion API interactions
"""
import httpx
import logging
from typing import List, Optional

from fastapi import Depends

from ..config import Settings, get_app_settings
from ..errors import UpstreamError

logger = logging.getLogger(__name__)


class AIService:
    """Forwards chat-completion requests to the upstream provider"""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = settings.groq_api_key
        self.url = settings.groq_api_url
        self.model = settings.groq_model
        self.temperature = settings.temperature
        self.max_tokens = settings.max_tokens
        self.timeout = settings.upstream_timeout
        self._transport = transport

    async def chat_completion(self, messages: List[dict]) -> str:
        """
        Call the chat completion API (single, non-streaming)

        Args:
            messages: List of message dicts with 'role' and 'content'

        Returns:
            Content of the first choice's message, verbatim

        Raises:
            UpstreamError: key missing, transport failure, non-2xx status
                or malformed response envelope
        """
        if not self.api_key:
            logger.error("Groq API key not configured")
            raise UpstreamError("Groq API key not configured")

        logger.debug(f"Calling AI API: {self.url}, model: {self.model}")
        logger.debug(f"Messages count: {len(messages)}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json"
                    },
                    json={
                        "model": self.model,
                        "messages": messages,
                        "temperature": self.temperature,
                        "max_tokens": self.max_tokens
                    }
                )
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"Groq API error: {e.response.status_code} - {e.response.text}")
            raise UpstreamError(f"Upstream returned HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Groq API error: {type(e).__name__} - {str(e)}")
            raise UpstreamError(f"Upstream request failed: {type(e).__name__}") from e
        except ValueError as e:
            logger.error(f"Groq API error: response body is not JSON - {str(e)}")
            raise UpstreamError("Upstream returned a non-JSON body") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Groq API error: malformed envelope - {data!r}")
            raise UpstreamError("Upstream returned a malformed envelope") from e

        if not isinstance(content, str):
            logger.error(f"Groq API error: message content is {type(content).__name__}")
            raise UpstreamError("Upstream returned a malformed envelope")

        logger.debug(f"Response content length: {len(content)}")
        return content

    async def generate(self, prompt: str) -> str:
        """Forward a free-text prompt as one user message"""
        return await self.chat_completion([{"role": "user", "content": prompt}])


def get_ai_service(settings: Settings = Depends(get_app_settings)) -> AIService:
    """Dependency for getting the AI service in routes"""
    return AIService(settings)
