from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from planner.errors import GenerationExhaustedError
from planner.ir.blueprint import Blueprint
from planner.llm.prompt import build_user_prompt
from planner.pipeline.orchestrator import GenerationOrchestrator
from planner.recovery.audit import audit_blueprint
from planner.schemas import PlanningData, PlanningResponse
from planner.utils.logger import logger


@dataclass
class PlanningResult:
    success: bool
    blueprint: Optional[Blueprint] = None
    raw_output: Optional[str] = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    attempts: int = 0

    def to_response(self) -> Dict[str, Any]:
        if not self.success:
            envelope = PlanningResponse(success=False, error=self.error)
        else:
            envelope = PlanningResponse(
                success=True,
                data=PlanningData(
                    blueprint=self.blueprint.to_dict(),
                    raw_output=self.raw_output or "",
                ),
                warnings=self.warnings,
            )

        payload = envelope.model_dump(by_alias=True, exclude_unset=True)
        if not payload.get("warnings"):
            payload.pop("warnings", None)
        return payload


class BlueprintService:
    """
    Boundary around the orchestrator: requirements in, envelope out.

    Never raises. Exhausted retries (and anything unexpected) come back as
    ``success=False`` with a readable ``error``.
    """

    def __init__(self, orchestrator: GenerationOrchestrator):
        self.orchestrator = orchestrator

    @classmethod
    def from_config(cls) -> "BlueprintService":
        from planner.config import get_llm_client, get_retry_policy, get_sampling_config

        return cls(
            GenerationOrchestrator(
                client=get_llm_client(),
                policy=get_retry_policy(),
                sampling=get_sampling_config(),
            )
        )

    async def generate(self, requirements: str) -> PlanningResult:
        try:
            outcome = await self.orchestrator.run(build_user_prompt(requirements))
        except GenerationExhaustedError as e:
            logger.error(f"[Planning] {e}")
            return PlanningResult(success=False, error=str(e), attempts=e.attempts)
        except Exception as e:
            logger.exception("[Planning] Unexpected failure while generating blueprint")
            return PlanningResult(success=False, error=f"Unexpected error: {e}")

        audit = audit_blueprint(outcome.blueprint)
        logger.info(
            f"[Planning] Blueprint generated in {outcome.attempts} attempt(s) "
            f"via '{outcome.strategy}' | {audit.get_summary()}"
        )
        for issue in audit.warnings:
            logger.warning(f"[Planning] {issue.code}: {issue.message}")

        return PlanningResult(
            success=True,
            blueprint=outcome.blueprint,
            raw_output=outcome.raw_output,
            warnings=[issue.message for issue in audit.warnings],
            attempts=outcome.attempts,
        )
