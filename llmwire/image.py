"""Image generation, edit and variation requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Protocol

CREATE_IMAGE_SIZE_256X256 = "256x256"
CREATE_IMAGE_SIZE_512X512 = "512x512"
CREATE_IMAGE_SIZE_1024X1024 = "1024x1024"
# Supported by dall-e-3 only.
CREATE_IMAGE_SIZE_1792X1024 = "1792x1024"
CREATE_IMAGE_SIZE_1024X1792 = "1024x1792"

CREATE_IMAGE_RESPONSE_FORMAT_URL = "url"
CREATE_IMAGE_RESPONSE_FORMAT_B64_JSON = "b64_json"

CREATE_IMAGE_MODEL_DALL_E_2 = "dall-e-2"
CREATE_IMAGE_MODEL_DALL_E_3 = "dall-e-3"

CREATE_IMAGE_QUALITY_HD = "hd"
CREATE_IMAGE_QUALITY_STANDARD = "standard"

CREATE_IMAGE_STYLE_VIVID = "vivid"
CREATE_IMAGE_STYLE_NATURAL = "natural"

IMAGE_GENERATIONS_SUFFIX = "/images/generations"
IMAGE_EDITS_SUFFIX = "/images/edits"
IMAGE_VARIATIONS_SUFFIX = "/images/variations"


class _FormBuilder(Protocol):
    def create_form_file(self, fieldname: str, file: Any) -> None: ...

    def write_field(self, fieldname: str, value: str) -> None: ...

    def close(self) -> None: ...

    def form_data_content_type(self) -> str: ...


@dataclass
class ImageRequest:
    """Parameters of an image generation request."""

    prompt: str = ""
    model: str = ""
    n: int = 0
    quality: str = ""
    size: str = ""
    style: str = ""
    response_format: str = ""
    user: str = ""

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; empty fields are left out."""
        fields = [
            ("prompt", self.prompt),
            ("model", self.model),
            ("n", self.n),
            ("quality", self.quality),
            ("size", self.size),
            ("style", self.style),
            ("response_format", self.response_format),
            ("user", self.user),
        ]
        return {key: value for key, value in fields if value}


@dataclass
class ImageResponseDataInner:
    """One generated image, as a URL or base64 JSON."""

    url: str = ""
    b64_json: str = ""
    revised_prompt: str = ""


@dataclass
class ImageResponse:
    """Reply to an image request."""

    created: int = 0
    data: list[ImageResponseDataInner] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ImageResponse:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            created=data.get("created") or 0,
            data=[
                ImageResponseDataInner(
                    url=(item or {}).get("url") or "",
                    b64_json=(item or {}).get("b64_json") or "",
                    revised_prompt=(item or {}).get("revised_prompt") or "",
                )
                for item in data.get("data") or []
            ],
        )


@dataclass
class ImageEditRequest:
    """Parameters of an image edit request; ``mask`` is optional."""

    image: BinaryIO | None = None
    mask: BinaryIO | None = None
    prompt: str = ""
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""


@dataclass
class ImageVariRequest:
    """Parameters of an image variation request."""

    image: BinaryIO | None = None
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""


def encode_edit_image(request: ImageEditRequest, form_builder: _FormBuilder) -> str:
    """Write the multipart body of an edit request and return its content type."""
    form_builder.create_form_file("image", request.image)
    if request.mask is not None:
        form_builder.create_form_file("mask", request.mask)
    form_builder.write_field("prompt", request.prompt)
    form_builder.write_field("n", str(request.n))
    form_builder.write_field("size", request.size)
    form_builder.write_field("response_format", request.response_format)
    form_builder.close()
    return form_builder.form_data_content_type()


def encode_variation_image(request: ImageVariRequest, form_builder: _FormBuilder) -> str:
    """Write the multipart body of a variation request and return its content type."""
    form_builder.create_form_file("image", request.image)
    form_builder.write_field("n", str(request.n))
    form_builder.write_field("size", request.size)
    form_builder.write_field("response_format", request.response_format)
    form_builder.close()
    return form_builder.form_data_content_type()