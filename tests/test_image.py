import io

import pytest

from llmwire.form_builder import FormBuilder
from llmwire.image import (
    CREATE_IMAGE_RESPONSE_FORMAT_URL,
    CREATE_IMAGE_SIZE_256X256,
    ImageEditRequest,
    ImageRequest,
    ImageResponse,
    ImageVariRequest,
    encode_edit_image,
    encode_variation_image,
)


class MockFailure(Exception):
    pass


class MockFormBuilder:
    def __init__(self, fail_file=None, fail_field=None, fail_close=False):
        self.fail_file = fail_file
        self.fail_field = fail_field
        self.fail_close = fail_close
        self.calls = []

    def create_form_file(self, fieldname, file):
        self.calls.append(("file", fieldname))
        if self.fail_file is True or self.fail_file == fieldname:
            raise MockFailure("mock form builder fail")

    def write_field(self, fieldname, value):
        self.calls.append(("field", fieldname, value))
        if fieldname == self.fail_field:
            raise MockFailure("mock form builder fail")

    def close(self):
        self.calls.append(("close",))
        if self.fail_close:
            raise MockFailure("mock form builder fail")

    def form_data_content_type(self):
        return "multipart/form-data; boundary=mock"


def test_image_request_to_dict_omits_empty():
    req = ImageRequest(
        prompt="Parrot on a skateboard",
        size=CREATE_IMAGE_SIZE_256X256,
        response_format=CREATE_IMAGE_RESPONSE_FORMAT_URL,
        n=1,
    )
    assert req.to_dict() == {
        "prompt": "Parrot on a skateboard",
        "n": 1,
        "size": "256x256",
        "response_format": "url",
    }


def test_image_response_from_dict():
    res = ImageResponse.from_dict(
        {"created": 5, "data": [{"url": "http://localhost/a.png", "revised_prompt": "p"}]}
    )
    assert res.created == 5
    assert res.data[0].url == "http://localhost/a.png"
    assert res.data[0].revised_prompt == "p"
    assert res.data[0].b64_json == ""


def test_image_response_empty():
    res = ImageResponse.from_dict({})
    assert res.created == 0
    assert res.data == []


def test_edit_image_fails_on_image_file():
    req = ImageEditRequest(mask=io.BytesIO())
    with pytest.raises(MockFailure):
        encode_edit_image(req, MockFormBuilder(fail_file=True))


def test_edit_image_fails_on_mask():
    req = ImageEditRequest(mask=io.BytesIO())
    builder = MockFormBuilder(fail_file="mask")
    with pytest.raises(MockFailure):
        encode_edit_image(req, builder)
    assert builder.calls == [("file", "image"), ("file", "mask")]


@pytest.mark.parametrize("field_name", ["prompt", "n", "size", "response_format"])
def test_edit_image_fails_on_field(field_name):
    req = ImageEditRequest(mask=io.BytesIO())
    with pytest.raises(MockFailure):
        encode_edit_image(req, MockFormBuilder(fail_field=field_name))


def test_edit_image_fails_on_close():
    req = ImageEditRequest(mask=io.BytesIO())
    with pytest.raises(MockFailure):
        encode_edit_image(req, MockFormBuilder(fail_close=True))


def test_edit_image_without_mask_skips_mask():
    builder = MockFormBuilder()
    content_type = encode_edit_image(ImageEditRequest(prompt="x", n=2), builder)
    assert content_type == "multipart/form-data; boundary=mock"
    assert ("file", "mask") not in builder.calls
    assert ("field", "n", "2") in builder.calls


def test_variation_image_fails_on_image_file():
    with pytest.raises(MockFailure):
        encode_variation_image(ImageVariRequest(), MockFormBuilder(fail_file=True))


@pytest.mark.parametrize("field_name", ["n", "size", "response_format"])
def test_variation_image_fails_on_field(field_name):
    with pytest.raises(MockFailure):
        encode_variation_image(ImageVariRequest(), MockFormBuilder(fail_field=field_name))


def test_variation_image_fails_on_close():
    with pytest.raises(MockFailure):
        encode_variation_image(ImageVariRequest(), MockFormBuilder(fail_close=True))


def test_variation_image_field_order():
    builder = MockFormBuilder()
    encode_variation_image(ImageVariRequest(n=3, size="512x512", response_format="url"), builder)
    assert builder.calls == [
        ("file", "image"),
        ("field", "n", "3"),
        ("field", "size", "512x512"),
        ("field", "response_format", "url"),
        ("close",),
    ]


def test_edit_image_with_real_builder(tmp_path):
    image_path = tmp_path / "image.png"
    image_path.write_bytes(b"imagedata")
    body = io.BytesIO()
    builder = FormBuilder(body, boundary="testboundary")
    with open(image_path, "rb") as image:
        content_type = encode_edit_image(
            ImageEditRequest(image=image, prompt="a cat", n=1, size="256x256"), builder
        )
    payload = body.getvalue()
    assert content_type == "multipart/form-data; boundary=testboundary"
    assert b"imagedata" in payload
    assert b'name="prompt"' in payload
    assert b"a cat" in payload
    assert payload.endswith(b"--testboundary--\r\n")