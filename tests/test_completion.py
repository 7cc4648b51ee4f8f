import pytest

from llmwire.completion import (
    GPT3_DOT5_TURBO,
    CompletionPromptTypeNotSupportedError,
    CompletionRequest,
    CompletionResponse,
    CompletionStreamNotSupportedError,
    CompletionUnsupportedModelError,
    check_endpoint_supports_model,
    check_prompt_type,
    validate_completion_request,
)


def test_completions_wrong_model():
    with pytest.raises(CompletionUnsupportedModelError):
        validate_completion_request(CompletionRequest(max_tokens=5, model=GPT3_DOT5_TURBO))


def test_completion_with_stream():
    with pytest.raises(CompletionStreamNotSupportedError):
        validate_completion_request(CompletionRequest(stream=True))


def test_completions():
    body = validate_completion_request(CompletionRequest(max_tokens=5, model="ada", prompt="Lorem ipsum"))
    assert body == {"model": "ada", "prompt": "Lorem ipsum", "max_tokens": 5}


def test_multiple_prompts_completions_wrong():
    request = CompletionRequest(max_tokens=5, model="ada", prompt=["Lorem ipsum", 9])
    with pytest.raises(CompletionPromptTypeNotSupportedError):
        validate_completion_request(request)


def test_multiple_prompts_completions():
    request = CompletionRequest(max_tokens=5, model="ada", prompt=["Lorem ipsum", "Lorem ipsum"])
    body = validate_completion_request(request)
    assert body["prompt"] == ["Lorem ipsum", "Lorem ipsum"]


def test_missing_prompt_rejected():
    with pytest.raises(CompletionPromptTypeNotSupportedError):
        validate_completion_request(CompletionRequest(model="ada"))


@pytest.mark.parametrize(
    ("prompt", "expected"),
    [("text", True), (["a", "b"], True), ([], True), (["a", 1], False), (None, False), (3, False)],
)
def test_check_prompt_type(prompt, expected):
    assert check_prompt_type(prompt) is expected


def test_check_endpoint_supports_model():
    assert check_endpoint_supports_model("/completions", "gpt-4o") is False
    assert check_endpoint_supports_model("/chat/completions", "davinci") is False
    assert check_endpoint_supports_model("/chat/completions", "gpt-4o") is True
    assert check_endpoint_supports_model("/completions", "babbage-002") is True
    assert check_endpoint_supports_model("/other", "gpt-4o") is True


def test_to_dict_keeps_seed_zero_and_omits_zero_values():
    body = CompletionRequest(model="ada", seed=0, stop=[], temperature=0.0).to_dict()
    assert body == {"model": "ada", "seed": 0}


def test_response_from_dict():
    response = CompletionResponse.from_dict(
        {
            "id": "1",
            "object": "test-object",
            "created": 1692661014,
            "model": "ada",
            "choices": [
                {"text": "aaaaa", "index": 0},
                {"text": "Lorem ipsumaaaaa", "index": 1, "logprobs": {"tokens": ["a"], "text_offset": [0]}},
            ],
            "usage": {"prompt_tokens": 2, "completion_tokens": 10, "total_tokens": 12},
        }
    )
    assert response.model == "ada"
    assert [choice.text for choice in response.choices] == ["aaaaa", "Lorem ipsumaaaaa"]
    assert response.choices[1].logprobs.tokens == ["a"]
    assert response.choices[1].logprobs.text_offset == [0]
    assert response.choices[0].logprobs.tokens == []
    assert response.usage.total_tokens == 12