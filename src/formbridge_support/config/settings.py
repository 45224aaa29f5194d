"""
Environment-specific configuration settings.

Cost-conscious defaults: a small Haiku model, short replies, one model attempt.
"""

from dataclasses import dataclass
import os


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


@dataclass
class Settings:
    """Application settings read once per warm container."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"

    # Bedrock generation
    model_id: str = "anthropic.claude-3-haiku-20240307-v1:0"
    max_output_tokens: int = 300
    temperature: float = 0.4  # Low on purpose; answers should be plain and repeatable
    model_timeout_seconds: int = 20

    # Retrieval and prompt assembly
    history_window: int = 6
    default_search_limit: int = 5
    max_search_limit: int = 20

    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = (
            os.environ.get("BEDROCK_REGION")
            or os.environ.get("AWS_REGION")
            or "eu-west-2"
        )
        common = dict(
            environment=env,
            aws_region=region,
            model_id=os.environ.get("MODEL_ID", cls.model_id),
            max_output_tokens=_env_int("MAX_OUTPUT_TOKENS", cls.max_output_tokens),
            temperature=_env_float("MODEL_TEMPERATURE", cls.temperature),
            history_window=_env_int("HISTORY_WINDOW", cls.history_window),
            max_search_limit=_env_int("MAX_SEARCH_LIMIT", cls.max_search_limit),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )

        # Production overrides
        if env == "prod":
            return cls(
                model_timeout_seconds=_env_int("MODEL_TIMEOUT_SECONDS", 30),
                **common,
            )

        return cls(
            model_timeout_seconds=_env_int("MODEL_TIMEOUT_SECONDS", cls.model_timeout_seconds),
            **common,
        )
