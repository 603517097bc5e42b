import copy
import json
from typing import Any, Dict, List

import pytest

from planner.llm.base import LLMClient, SamplingConfig
from planner.pipeline.orchestrator import GenerationOrchestrator, RetryPolicy

MINIMAL_BLUEPRINT: Dict[str, Any] = {
    "projectName": "Cake Shop",
    "workflow": {
        "nodes": [
            {"id": "home-page", "type": "page", "label": "Home", "category": "Frontend"},
            {"id": "orders-api", "type": "api", "label": "Orders API", "category": "Backend"},
            {"id": "orders-db", "type": "database", "label": "Orders DB", "category": "Database"},
        ],
        "edges": [
            {"id": "e1", "source": "home-page", "target": "orders-api", "label": "place order", "type": "http"},
            {"id": "e2", "source": "orders-api", "target": "orders-db", "label": "save order", "type": "database"},
        ],
    },
}


class ScriptedClient(LLMClient):
    """Replays a fixed list of replies; Exception entries are raised."""

    def __init__(self, replies: List[Any]):
        self.replies = list(replies)
        self.calls: List[tuple] = []

    def complete(self, system_instruction: str, user_text: str, sampling: SamplingConfig) -> str:
        self.calls.append((system_instruction, user_text, sampling))
        reply = self.replies[min(len(self.calls), len(self.replies)) - 1]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def blueprint_dict() -> Dict[str, Any]:
    return copy.deepcopy(MINIMAL_BLUEPRINT)


@pytest.fixture
def blueprint_json() -> str:
    return json.dumps(MINIMAL_BLUEPRINT)


@pytest.fixture
def make_client():
    def _make(*replies: Any) -> ScriptedClient:
        return ScriptedClient(list(replies))
    return _make


@pytest.fixture
def no_delay() -> RetryPolicy:
    return RetryPolicy(max_retries=3, retry_delay=0)


@pytest.fixture
def make_orchestrator(no_delay):
    def _make(client: LLMClient, policy: RetryPolicy = None) -> GenerationOrchestrator:
        return GenerationOrchestrator(client=client, policy=policy or no_delay)
    return _make
