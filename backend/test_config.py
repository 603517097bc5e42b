from planner import config
from planner.llm.client import ChatCompletionsClient
from planner.pipeline.orchestrator import RetryPolicy
from planner.services.planning_service import BlueprintService


def test_runtime_objects_follow_config():
    policy = config.get_retry_policy()
    sampling = config.get_sampling_config()
    client = config.get_llm_client()

    assert policy == RetryPolicy(
        max_retries=config.PLANNING_MAX_RETRIES,
        retry_delay=config.PLANNING_RETRY_DELAY,
    )
    assert sampling.temperature == config.PLANNING_TEMPERATURE
    assert sampling.max_tokens == config.PLANNING_MAX_TOKENS
    assert isinstance(client, ChatCompletionsClient)
    assert client.model == config.LLM_MODEL
    assert client.extra_headers["X-Title"] == config.APP_TITLE


def test_service_from_config_wires_orchestrator():
    service = BlueprintService.from_config()

    assert service.orchestrator.policy == config.get_retry_policy()
    assert service.orchestrator.sampling == config.get_sampling_config()
