"""
Amazon Bedrock generation client.

The orchestrator depends only on the ``GenerationClient`` protocol; this module
supplies the Bedrock implementation that handlers inject in production.
"""

from __future__ import annotations

import json
import time
from typing import Any, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from formbridge_support.config.settings import Settings
from formbridge_support.utils.error_handling import GenerationError
from formbridge_support.utils.logging_config import get_logger

logger = get_logger(__name__)


class GenerationClient(Protocol):
    """Anything that turns a prompt into reply text, raising on failure."""

    def generate(self, prompt: str, *, max_output_tokens: int, temperature: float) -> str:
        ...


class BedrockGenerationClient:
    """Single-attempt text generation against a Bedrock Anthropic model."""

    def __init__(
        self,
        model_id: str,
        region: str,
        timeout_seconds: int = 20,
        client: Optional[Any] = None,
    ):
        self.model_id = model_id
        # One attempt only; retries belong to the caller, not the chat core.
        self.client = client or boto3.client(
            "bedrock-runtime",
            region_name=region,
            config=Config(
                connect_timeout=5,
                read_timeout=timeout_seconds,
                retries={"total_max_attempts": 1, "mode": "standard"},
            ),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "BedrockGenerationClient":
        return cls(
            model_id=settings.model_id,
            region=settings.aws_region,
            timeout_seconds=settings.model_timeout_seconds,
        )

    def generate(self, prompt: str, *, max_output_tokens: int, temperature: float) -> str:
        start = time.perf_counter()
        try:
            response = self.client.invoke_model(
                modelId=self.model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(
                    {
                        "anthropic_version": "bedrock-2023-05-31",
                        "messages": [
                            {"role": "user", "content": [{"type": "text", "text": prompt}]}
                        ],
                        "max_tokens": max_output_tokens,
                        "temperature": temperature,
                    }
                ),
            )
            payload = json.loads(response["body"].read())
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            raise GenerationError(f"Bedrock call failed: {code}", code=code) from exc
        except BotoCoreError as exc:
            raise GenerationError(f"Bedrock transport failed: {exc}", code=type(exc).__name__) from exc
        finally:
            logger.info(
                "Model call latency captured",
                extra={"duration_ms": int((time.perf_counter() - start) * 1000)},
            )

        return self._extract_text(payload)

    @staticmethod
    def _extract_text(payload: dict) -> str:
        """Join the text blocks of a messages-API reply; empty output is an error."""
        try:
            blocks = payload["content"]
            text = "".join(
                block.get("text", "") for block in blocks if block.get("type") == "text"
            ).strip()
        except (KeyError, TypeError, AttributeError) as exc:
            raise GenerationError("Malformed model response", code="MalformedResponse") from exc

        if not text:
            raise GenerationError("Model returned an empty response", code="EmptyResponse")
        return text
