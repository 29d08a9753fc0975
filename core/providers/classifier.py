"""Text-classification capability backed by an OpenAI-compatible chat endpoint."""

from __future__ import annotations

from typing import Dict, List, Protocol

import httpx

from core.providers.errors import ProviderError


class TextClassifier(Protocol):
    async def classify(self, prompt: str) -> str:
        ...


class OpenAICompatClassifier:
    """Send a single-message prompt to ``/chat/completions`` and return the raw completion."""

    max_tokens = 5
    temperature = 0.1

    def __init__(self, client: httpx.AsyncClient, endpoint: str, api_key: str, model: str, timeout: float):
        self.client, self.endpoint, self.api_key, self.model = client, endpoint, api_key, model
        self.timeout = timeout

    def build_payload(self, prompt: str) -> Dict:
        messages: List[Dict[str, str]] = [{"role": "user", "content": prompt}]
        return {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    async def classify(self, prompt: str) -> str:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            response = await self.client.post(
                f"{self.endpoint}/chat/completions",
                json=self.build_payload(prompt),
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            content = response.json()["choices"][0]["message"]["content"]
        except httpx.HTTPError as exc:
            raise ProviderError("classifier", str(exc) or exc.__class__.__name__) from exc
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ProviderError("classifier", f"unexpected response shape ({exc!r})") from exc
        if not isinstance(content, str):
            raise ProviderError("classifier", "completion content is not text")
        return content
