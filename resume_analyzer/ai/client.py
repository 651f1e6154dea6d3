# resume_analyzer/ai/client.py
import logging
from typing import Optional, Protocol

import requests
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log
)

from resume_analyzer.exceptions import AIProviderFailure

logger = logging.getLogger(__name__)


class AIProvider(Protocol):
    """
    Anything that turns a prompt into text

    Implementations raise AIProviderFailure when no usable reply is produced.
    """

    def complete(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        ...


class LLMClient:
    """
    Client for an Ollama-compatible chat API
    """

    name = "llm"

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "llama3.2:3b",
        timeout: float = 20.0,
        max_retries: int = 2,
        temperature: float = 0.4,
        max_tokens: int = 600
    ):
        """
        Initialize client

        Args:
            base_url: API endpoint
            model: Model to use (llama3.2:3b, mistral, etc.)
            timeout: Request timeout in seconds
            max_retries: Extra attempts on connection errors and timeouts
            temperature: Creativity (0.0-1.0)
            max_tokens: Max response length
        """
        self.base_url = base_url.rstrip('/')
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

        self._post = retry(
            stop=stop_after_attempt(max_retries + 1),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True
        )(self._post_once)

    @classmethod
    def from_config(cls, config) -> 'LLMClient':
        return cls(
            base_url=config.base_url,
            model=config.model,
            timeout=config.timeout_seconds,
            max_retries=config.max_retries,
            temperature=config.temperature,
            max_tokens=config.max_tokens
        )

    def is_available(self) -> bool:
        """Check if the server is running"""
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout=5)
            return response.status_code == 200
        except requests.RequestException as e:
            logger.warning(f"LLM server not available: {e}")
            return False

    def complete(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Generate text

        Args:
            prompt: User prompt
            system_prompt: System instruction

        Returns:
            Generated text

        Raises:
            AIProviderFailure: On timeout, HTTP error or empty reply
        """
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "options": {
                "temperature": self.temperature,
                "num_predict": self.max_tokens
            }
        }

        try:
            result = self._post(payload)
        except requests.Timeout as e:
            logger.error(f"LLM request timed out after {self.timeout}s")
            raise AIProviderFailure(
                f"Request timed out after {self.timeout}s", provider=self.name, retryable=True
            ) from e
        except requests.RequestException as e:
            logger.error(f"LLM request failed: {e}")
            raise AIProviderFailure(f"Request failed: {e}", provider=self.name, retryable=True) from e
        except ValueError as e:
            logger.error(f"LLM returned invalid JSON: {e}")
            raise AIProviderFailure("Invalid JSON in response", provider=self.name) from e

        content = ((result or {}).get("message") or {}).get("content", "").strip()
        if not content:
            raise AIProviderFailure("Empty response", provider=self.name)
        return content

    def _post_once(self, payload: dict) -> dict:
        response = requests.post(
            f"{self.base_url}/api/chat",
            json=payload,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()
