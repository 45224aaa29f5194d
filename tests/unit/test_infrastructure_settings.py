"""
Deployment settings tests. These do not import aws_cdk.

Run with: pytest tests/unit/test_infrastructure_settings.py -v
"""

from infrastructure.config.settings import Settings


def test_dev_defaults(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    settings = Settings.from_environment()

    assert settings.lambda_memory_mb == 256
    assert settings.lambda_timeout_seconds == 29
    assert settings.allowed_origins == ("*",)


def test_prod_overrides(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://forms.example.ca, https://staging.example.ca")

    settings = Settings.from_environment()

    assert settings.environment == "prod"
    assert settings.lambda_memory_mb == 512
    assert settings.log_level == "WARNING"
    assert settings.allowed_origins == ("https://forms.example.ca", "https://staging.example.ca")
    # Lambda must outlive the model call.
    assert settings.model_timeout_seconds < settings.lambda_timeout_seconds
