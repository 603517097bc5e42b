from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SamplingConfig:
    temperature: float = 0.2
    max_tokens: int = 16000


class LLMClient(ABC):
    @abstractmethod
    def complete(
        self,
        system_instruction: str,
        user_text: str,
        sampling: SamplingConfig,
    ) -> str:
        """Return the assistant text for one system + user exchange.

        Raises UpstreamError when the call fails. An empty string is a valid
        return value; callers decide what it means.
        """
        pass
