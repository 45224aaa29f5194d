"""
API layer construct: one Lambda behind an HTTP API.

A single Lambda keeps the knowledge store and Bedrock client warm across
all three support chat routes. Uses Docker bundling for dependencies.
"""

from typing import Sequence

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct

HANDLER = "formbridge_support.handlers.main.lambda_handler"


class ApiLayerConstruct(Construct):
    """Expose the support chat endpoints via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        model_id: str,
        bedrock_region: str,
        model_timeout_seconds: int,
        log_level: str = "INFO",
        allowed_origins: Sequence[str] = ("*",),
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 29,
    ) -> None:
        super().__init__(scope, construct_id)

        # Install the project itself so the bundled corpus ships with the code.
        bundled_code = _lambda.Code.from_asset(
            ".",
            exclude=["cdk.out", ".git", "tests", "infrastructure", "**/__pycache__"],
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install . -t /asset-output",
                ],
            ),
        )

        self.main_lambda = _lambda.Function(
            self,
            "SupportChatHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler=HANDLER,
            code=bundled_code,
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=_lambda.Architecture.X86_64,
            environment={
                "ENVIRONMENT": environment,
                "MODEL_ID": model_id,
                "BEDROCK_REGION": bedrock_region,
                "MODEL_TIMEOUT_SECONDS": str(model_timeout_seconds),
                "LOG_LEVEL": log_level,
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"formbridge-support-api-{environment}",
            cors_preflight=apigw.CorsPreflightOptions(
                allow_origins=list(allowed_origins),
                allow_methods=[apigw.CorsHttpMethod.GET, apigw.CorsHttpMethod.POST],
                allow_headers=["Content-Type"],
            ),
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        route_defs = [
            (apigw.HttpMethod.POST, "/support-chat"),
            (apigw.HttpMethod.GET, "/support-chat/knowledge"),
            (apigw.HttpMethod.GET, "/support-chat/knowledge/{id}"),
            (apigw.HttpMethod.GET, "/health"),
        ]

        for method, path in route_defs:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integration,
            )
