from typing import Dict, List, Optional

import requests

from planner.errors import UpstreamError
from planner.llm.base import LLMClient, SamplingConfig
from planner.utils.logger import logger


class ChatCompletionsClient(LLMClient):
    """
    Client for any OpenAI-compatible /chat/completions endpoint.

    The returned text is passed through untouched (fences, prose and all);
    cleaning it up is the recovery pipeline's job.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str = "",
        timeout: float = 300,
        extra_headers: Optional[Dict[str, str]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.extra_headers = dict(extra_headers or {})

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        headers.update(self.extra_headers)
        return headers

    def generate(self, messages: List[Dict], sampling: Optional[SamplingConfig] = None) -> str:
        sampling = sampling or SamplingConfig()
        url = f"{self.base_url}/chat/completions"

        try:
            response = requests.post(
                url,
                headers=self._headers(),
                json={
                    "model": self.model,
                    "messages": messages,
                    "temperature": sampling.temperature,
                    "max_tokens": sampling.max_tokens,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise UpstreamError(
                f"Upstream returned HTTP {response.status_code}: {response.text[:500]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamError(f"Malformed completion response: {e}") from e

        logger.debug(f"[LLM] {self.model} returned {len(content or '')} chars")
        return content or ""

    def complete(
        self,
        system_instruction: str,
        user_text: str,
        sampling: SamplingConfig,
    ) -> str:
        messages = [
            {"role": "system", "content": system_instruction},
            {"role": "user", "content": user_text},
        ]
        return self.generate(messages, sampling)
