"""
CDK stack for the FormBridge support chat service.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
    aws_iam as iam,
)
from constructs import Construct

from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class SupportChatStack(Stack):
    """Lambda + HTTP API, with permission to invoke the one configured model."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        Tags.of(self).add("Project", "formbridge-support")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            model_id=settings.model_id,
            bedrock_region=settings.aws_region,
            model_timeout_seconds=settings.model_timeout_seconds,
            log_level=settings.log_level,
            allowed_origins=settings.allowed_origins,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        # Only the configured foundation model; the chat core makes no other AWS calls.
        api_construct.main_lambda.add_to_role_policy(
            iam.PolicyStatement(
                actions=["bedrock:InvokeModel"],
                resources=[
                    f"arn:aws:bedrock:{settings.aws_region}::foundation-model/{settings.model_id}"
                ],
            )
        )

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "HandlerName", value=api_construct.main_lambda.function_name)
