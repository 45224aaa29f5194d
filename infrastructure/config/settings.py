"""
Deployment settings for the support chat stack.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deploy-time settings; runtime tuning lives in formbridge_support.config."""

    environment: str = "dev"
    aws_region: str = "eu-west-2"

    # Bedrock
    model_id: str = "anthropic.claude-3-haiku-20240307-v1:0"  # Cost-optimized
    model_timeout_seconds: int = 20

    # Lambda
    lambda_memory_mb: int = 256  # Corpus is in-process; no vector store to talk to
    lambda_timeout_seconds: int = 29  # HTTP API integration ceiling

    log_level: str = "INFO"
    allowed_origins: tuple = ("*",)

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", cls.aws_region)
        model_id = os.environ.get("MODEL_ID", cls.model_id)
        origins = tuple(
            origin.strip()
            for origin in os.environ.get("ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ) or ("*",)

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                model_id=model_id,
                model_timeout_seconds=25,
                lambda_memory_mb=512,
                log_level="WARNING",
                allowed_origins=origins,
            )

        return cls(
            environment=env,
            aws_region=region,
            model_id=model_id,
            allowed_origins=origins,
        )
