import pytest

from llmwire.config import (
    ANTHROPIC_API_VERSION,
    APIType,
    default_anthropic_config,
    default_azure_config,
    default_config,
)


@pytest.mark.parametrize(
    ("model", "expected"),
    [
        ("gpt-3.5-turbo", "gpt-35-turbo"),
        ("gpt-3.5-turbo-0301", "gpt-35-turbo-0301"),
        ("text-embedding-ada-002", "text-embedding-ada-002"),
        ("", ""),
        ("models", "models"),
    ],
)
def test_get_azure_deployment_by_model(model, expected):
    conf = default_azure_config("", "https://test.openai.azure.com/")
    assert conf.get_azure_deployment_by_model(model) == expected


def test_get_azure_deployment_with_custom_mapper():
    mapping = {"gpt-3.5-turbo": "my-gpt35"}
    conf = default_azure_config("", "https://test.openai.azure.com/")
    conf.azure_model_mapper = lambda model: mapping.get(model, model)
    assert conf.get_azure_deployment_by_model("gpt-3.5-turbo") == "my-gpt35"
    assert conf.get_azure_deployment_by_model("other") == "other"


def test_default_config_leaves_model_untouched():
    conf = default_config("token")
    assert conf.get_azure_deployment_by_model("gpt-3.5-turbo") == "gpt-3.5-turbo"
    assert conf.api_type == APIType.OPENAI
    assert conf.base_url == "https://api.openai.com/v1"
    assert conf.assistant_version == "v2"
    assert conf.empty_messages_limit == 300


def test_default_anthropic_config():
    base_url = "https://api.anthropic.com/v1"
    config = default_anthropic_config("placeholder", base_url)
    assert config.api_type == APIType.ANTHROPIC
    assert config.api_version == ANTHROPIC_API_VERSION
    assert config.api_version == "2023-06-01"
    assert config.base_url == base_url
    assert config.empty_messages_limit == 300


def test_default_anthropic_config_with_empty_values():
    config = default_anthropic_config("", "")
    assert config.api_type == APIType.ANTHROPIC
    assert config.api_version == ANTHROPIC_API_VERSION
    assert config.base_url == "https://api.anthropic.com/v1"


def test_string_hides_token():
    config = default_config("secret")
    assert str(config) == "<OpenAI API ClientConfig>"
    assert "secret" not in repr(config)


def test_azure_config_version():
    config = default_azure_config("placeholder", "https://test.openai.azure.com/")
    assert config.api_type == APIType.AZURE
    assert config.api_version == "2023-05-15"