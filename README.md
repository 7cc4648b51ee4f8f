# llmwire

`llmwire` holds the wire-level pieces for talking to OpenAI-compatible HTTP
APIs: typed request and response models, endpoint and model checks, multipart
form encoding, request building, API error parsing and a small JSON Schema
helper. It uses only the standard library.

## What it does not do

`llmwire` never sends anything over the network. There is no client object
that performs calls, no streaming support, no retry logic and no command-line
tool. It builds bodies, paths and `urllib.request.Request` objects and parses
replies you have already received; sending them is up to your HTTP client.
There are no chat-completion request models.

## Installation

```
pip install llmwire
```

## Configuration

```python
from llmwire.config import APIType, default_config, default_azure_config, default_anthropic_config

config = default_config("placeholder")           # api.openai.com/v1, APIType.OPENAI
azure = default_azure_config("placeholder", "https://example.com/")
azure.get_azure_deployment_by_model("gpt-3.5-turbo")  # "gpt-35-turbo" ('.' and ':' removed)
anthropic = default_anthropic_config("placeholder", "")  # empty base URL -> https://api.anthropic.com/v1
```

`ClientConfig` holds the token, base URL, organisation id, `APIType`, API and
assistant versions, an optional Azure model mapper, an `http_client` slot and
`empty_messages_limit` (300 by default). Its `str()` never shows the token.

## Completions

```python
from llmwire.completion import CompletionRequest, CompletionResponse, validate_completion_request

request = CompletionRequest(model="babbage-002", prompt="Lorem ipsum", max_tokens=5)
body = validate_completion_request(request)  # the JSON body, zero-valued fields left out
response = CompletionResponse.from_dict(decoded_reply)
```

`validate_completion_request` raises `CompletionStreamNotSupportedError` when
`stream` is set, `CompletionUnsupportedModelError` for chat-only models, and
`CompletionPromptTypeNotSupportedError` when the prompt is neither a string nor
a list of strings. All three derive from `CompletionError`, a `ValueError`.
`check_endpoint_supports_model` and `check_prompt_type` expose the underlying
checks.

## Embeddings

```python
from llmwire.embeddings import (
    Embedding, EmbeddingRequestStrings, EmbeddingModel, decode_base64_embedding,
)

a = Embedding(embedding=[1.0, 2.0, 3.0])
b = Embedding(embedding=[2.0, 4.0, 6.0])
a.dot_product(b)  # 28.0; vectors of different length raise VectorLengthMismatchError

decode_base64_embedding("pHCdP4XrkUDhevxA")  # about [1.23, 4.56, 7.89] (float32 values)

request = EmbeddingRequestStrings(input=["hello"], model=EmbeddingModel.ADA_EMBEDDING_V2)
request.convert().to_dict()
```

`EmbeddingResponseBase64.from_dict(...).to_embedding_response()` decodes every
base64 vector into an `EmbeddingResponse`.

## Errors

```python
from llmwire.errors import APIError, ErrorResponse

error = APIError.from_json('{"message": ["foo", "bar"], "code": 418}')
error.message  # "foo, bar"
error.code     # 418

ErrorResponse.from_json('{"error": {"message": "boom"}}').error.message  # "boom"
```

`APIError.from_dict` raises `ValueError` for a missing or malformed message,
a non-string `type` or `param`, or a non-object `innererror`. `RequestError`
wraps a failed request with its status and body.

## Other models

- `llmwire.edits`: `EditsRequest`, `EditsResponse`.
- `llmwire.models`: `Engine`, `EnginesList`, `Model`, `Permission`, `ModelsList`,
  `FineTuneModelDeleteResponse`.
- `llmwire.fine_tunes`: legacy `FineTuneRequest`, `FineTune`, `FineTuneList`,
  `FineTuneEvent`, `FineTuneEventList`, `FineTuneDeleteResponse`.
- `llmwire.fine_tuning_job`: `FineTuningJob`, `FineTuningJobRequest`,
  `Hyperparameters`, `FineTuningJobEvent`, `FineTuningJobEventList`, and
  `fine_tuning_job_events_path(job_id, after, limit)`.
- `llmwire.messages`: `Message`, `MessagesList`, `MessageRequest`,
  `MessageFile`, `MessageFilesList`, `MessageDeletionStatus`,
  `messages_path(thread_id, limit, order, after, before, run_id)` and
  `modify_message_body(metadata)`.
- `llmwire.common`: `Usage` and its token detail breakdowns.

```python
from llmwire.messages import messages_path

messages_path("thread_abc123", limit=1, order="desc")
# "/threads/thread_abc123/messages?limit=1&order=desc"
```

## Uploads

```python
import io
from llmwire.files import FileBytesRequest, PurposeType, encode_file_bytes_upload
from llmwire.form_builder import FormBuilder

body = io.BytesIO()
content_type = encode_file_bytes_upload(
    FileBytesRequest(name="data.jsonl", bytes=b"{}", purpose=PurposeType.FINE_TUNE),
    FormBuilder(body),
)
# send body.getvalue() with the returned Content-Type
```

`encode_file_upload` does the same for a local file path, and
`llmwire.image.encode_edit_image` / `encode_variation_image` encode image edit
and variation requests. `FormBuilder` raises `ValueError` for an empty file
name.

## Building requests

```python
from llmwire.request_builder import HTTPRequestBuilder

request = HTTPRequestBuilder().build(
    "POST", "https://example.com/v1/completions", {"model": "babbage-002"},
    {"Authorization": "Bearer token"},
)
```

Bodies are encoded by `llmwire.marshalling.JSONMarshaller` (objects with a
`to_dict` method are encoded through it); bytes and readable objects are sent
as they are. `llmwire.error_accumulator.ErrorAccumulator` collects raw error
bytes.

## JSON Schema

```python
from llmwire.schema import DataType, Definition, validate, verify_schema_and_unmarshal

schema = Definition(
    type=DataType.OBJECT,
    properties={"location": Definition(type=DataType.STRING)},
    required=["location"],
)
validate(schema, {"location": "Boston"})  # True
data = verify_schema_and_unmarshal(schema, '{"location": "Boston"}')
```

`verify_schema_and_unmarshal` raises `SchemaValidationError` when the data does
not match. `generate_schema_for_type` builds a `Definition` from a Python type:
`str`, `int`, `float`, `bool`, lists, `Optional` and dataclasses (field metadata
may set `json`, `omitempty`, `description` and `required`).

## Running the tests

```
pip install -e ".[test]"
pytest
```