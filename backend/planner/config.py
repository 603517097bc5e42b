import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# ---- Upstream model ----
LLM_BASE_URL = os.getenv(
    "LLM_BASE_URL",
    "https://generativelanguage.googleapis.com/v1beta/openai",
)
LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
LLM_API_KEY = os.getenv("LLM_API_KEY") or os.getenv("GEMINI_API_KEY", "")
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "300"))

APP_URL = os.getenv("APP_URL", "http://localhost:3000")
APP_TITLE = os.getenv("APP_TITLE", "Multi-Agent Planning System")

# ---- Sampling ----
PLANNING_TEMPERATURE = float(os.getenv("PLANNING_TEMPERATURE", "0.2"))
PLANNING_MAX_TOKENS = int(os.getenv("PLANNING_MAX_TOKENS", "16000"))

# ---- Retry policy ----
PLANNING_MAX_RETRIES = int(os.getenv("PLANNING_MAX_RETRIES", "3"))
PLANNING_RETRY_DELAY = float(os.getenv("PLANNING_RETRY_DELAY", "1.5"))

# ---- HTTP ----
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_llm_client():
    from planner.llm.client import ChatCompletionsClient

    return ChatCompletionsClient(
        base_url=LLM_BASE_URL,
        model=LLM_MODEL,
        api_key=LLM_API_KEY,
        timeout=LLM_TIMEOUT,
        extra_headers={
            "HTTP-Referer": APP_URL,
            "X-Title": APP_TITLE,
        },
    )


def get_sampling_config():
    from planner.llm.base import SamplingConfig

    return SamplingConfig(
        temperature=PLANNING_TEMPERATURE,
        max_tokens=PLANNING_MAX_TOKENS,
    )


def get_retry_policy():
    from planner.pipeline.orchestrator import RetryPolicy

    return RetryPolicy(
        max_retries=PLANNING_MAX_RETRIES,
        retry_delay=PLANNING_RETRY_DELAY,
    )
