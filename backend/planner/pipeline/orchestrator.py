import asyncio
from dataclasses import dataclass
from typing import Optional

from planner.errors import EmptyResponseError, GenerationExhaustedError, RecoveryError
from planner.ir.blueprint import Blueprint
from planner.llm.base import LLMClient, SamplingConfig
from planner.llm.prompt import SYSTEM_PROMPT
from planner.recovery.pipeline import RecoveryPipeline
from planner.utils.logger import logger, preview


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3      # retries after the first attempt
    retry_delay: float = 1.5  # fixed pause between attempts, seconds

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


@dataclass
class GenerationOutcome:
    blueprint: Blueprint
    raw_output: str     # kept for audit/debugging, never reparsed
    attempts: int
    strategy: str


class GenerationOrchestrator:
    """
    Drives one "generate a blueprint" request to completion.

    Every attempt is a full round trip: upstream call, then recovery. A
    failing call, an empty reply and unrecoverable text all count against
    the same retry budget. Between attempts the coroutine sleeps for a fixed
    delay; once the budget is spent GenerationExhaustedError is raised.
    """

    def __init__(
        self,
        client: LLMClient,
        policy: Optional[RetryPolicy] = None,
        sampling: Optional[SamplingConfig] = None,
        pipeline: Optional[RecoveryPipeline] = None,
        system_instruction: str = SYSTEM_PROMPT,
    ):
        self.client = client
        self.policy = policy or RetryPolicy()
        self.sampling = sampling or SamplingConfig()
        self.pipeline = pipeline or RecoveryPipeline()
        self.system_instruction = system_instruction

    async def run(self, user_text: str) -> GenerationOutcome:
        total = self.policy.max_attempts
        last_error: Optional[BaseException] = None

        for attempt in range(1, total + 1):
            logger.info(f"[Orchestrator] Generating blueprint (attempt {attempt}/{total})")

            try:
                return await self._attempt(user_text, attempt)
            except Exception as e:
                last_error = e
                logger.warning(
                    f"[Orchestrator] Attempt {attempt}/{total} failed: "
                    f"{type(e).__name__}: {e}"
                )

            if attempt < total:
                logger.info(f"[Orchestrator] Retrying in {self.policy.retry_delay}s")
                await asyncio.sleep(self.policy.retry_delay)

        raise GenerationExhaustedError(total, last_error)

    async def _attempt(self, user_text: str, attempt: int) -> GenerationOutcome:
        # The client blocks on HTTP; keep it off the event loop
        raw_output = await asyncio.to_thread(
            self.client.complete,
            self.system_instruction,
            user_text,
            self.sampling,
        )

        if not raw_output or not raw_output.strip():
            raise EmptyResponseError()

        logger.debug(f"[Orchestrator] Raw output: {preview(raw_output)}")

        recovered = self.pipeline.run(raw_output)
        if recovered is None:
            raise RecoveryError()

        return GenerationOutcome(
            blueprint=recovered.blueprint,
            raw_output=raw_output,
            attempts=attempt,
            strategy=recovered.strategy,
        )
