import json
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from planner.ir.blueprint import Blueprint
from planner.recovery.strategies import STRATEGIES, Strategy
from planner.recovery.validator import to_blueprint
from planner.utils.logger import logger


@dataclass
class RecoveredBlueprint:
    blueprint: Blueprint
    strategy: str


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def strict_json_loads(text: str) -> Any:
    """json.loads without the NaN / Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


class RecoveryPipeline:
    """
    Ordered, validation-gated extraction of a blueprint from model output.

    Usage:
        pipeline = RecoveryPipeline()
        recovered = pipeline.run(raw_text)

        if recovered:
            print(recovered.strategy, recovered.blueprint.project_name)

    Strategies are tried one at a time against the ORIGINAL text; the first
    candidate that parses and validates wins. Never raises.
    """

    def __init__(self, strategies: Optional[List[Tuple[str, Strategy]]] = None):
        self.strategies = list(strategies if strategies is not None else STRATEGIES)

    def run(self, raw_output: str) -> Optional[RecoveredBlueprint]:
        if not raw_output or not isinstance(raw_output, str):
            logger.warning("[Recovery] Nothing to parse")
            return None

        logger.debug(f"[Recovery] Starting JSON extraction ({len(raw_output)} chars)")

        for name, strategy in self.strategies:
            blueprint = self._attempt(name, strategy, raw_output)
            if blueprint is not None:
                logger.info(f"[Recovery] Parsed blueprint via '{name}'")
                return RecoveredBlueprint(blueprint=blueprint, strategy=name)

        logger.warning("[Recovery] All parsing strategies failed")
        return None

    def _attempt(self, name: str, strategy: Strategy, raw_output: str) -> Optional[Blueprint]:
        try:
            candidate = strategy(raw_output)
            parsed = strict_json_loads(candidate)
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError
            logger.debug(f"[Recovery] '{name}': parse failed: {e}")
            return None

        try:
            blueprint = to_blueprint(parsed)
        except RecursionError as e:
            logger.debug(f"[Recovery] '{name}': too deeply nested to convert: {e}")
            return None

        if blueprint is None:
            logger.debug(f"[Recovery] '{name}': parsed but validation failed")
        return blueprint


def extract_blueprint(raw_output: str) -> Optional[Blueprint]:
    """Convenience wrapper: the recovered Blueprint or None."""
    recovered = RecoveryPipeline().run(raw_output)
    return recovered.blueprint if recovered else None
