"""
Settings tests.

Run with: pytest tests/unit/test_settings.py -v
"""

from formbridge_support.config.settings import Settings


def test_defaults_are_cost_conscious():
    settings = Settings()

    assert settings.max_output_tokens == 300
    assert settings.temperature == 0.4
    assert settings.history_window == 6
    assert settings.model_timeout_seconds == 20


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("BEDROCK_REGION", "ca-central-1")
    monkeypatch.setenv("MAX_OUTPUT_TOKENS", "500")
    monkeypatch.setenv("MODEL_TEMPERATURE", "0.1")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_environment()

    assert settings.environment == "staging"
    assert settings.aws_region == "ca-central-1"
    assert settings.max_output_tokens == 500
    assert settings.temperature == 0.1
    assert settings.log_level == "DEBUG"


def test_bad_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("MAX_OUTPUT_TOKENS", "lots")
    monkeypatch.setenv("MODEL_TEMPERATURE", "warm")

    settings = Settings.from_environment()

    assert settings.max_output_tokens == 300
    assert settings.temperature == 0.4


def test_prod_gets_longer_timeout(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.delenv("MODEL_TIMEOUT_SECONDS", raising=False)

    assert Settings.from_environment().model_timeout_seconds == 30
