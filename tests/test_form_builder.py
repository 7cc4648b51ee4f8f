import email.policy
import io
import re
from email.parser import BytesParser

import pytest

from llmwire.form_builder import FormBuilder


class _MockWriterError(Exception):
    pass


_WRITER_FAILURE = _MockWriterError("mock writer failed")


class _FailingWriter:
    def write(self, data):
        raise _WRITER_FAILURE


def _parse(body: bytes, content_type: str):
    raw = b"Content-Type: " + content_type.encode() + b"\r\n\r\n" + body
    message = BytesParser(policy=email.policy.HTTP).parsebytes(raw)
    return list(message.iter_parts())


def test_form_builder_with_failing_writer(tmp_path):
    path = tmp_path / "upload.bin"
    path.write_bytes(b"")
    with path.open("rb") as file:
        builder = FormBuilder(_FailingWriter())
        with pytest.raises(_MockWriterError) as info:
            builder.create_form_file("file", file)
    assert info.value is _WRITER_FAILURE


def test_form_builder_with_closed_file(tmp_path):
    path = tmp_path / "upload.bin"
    path.write_bytes(b"hello")
    file = path.open("rb")
    file.close()

    builder = FormBuilder(io.BytesIO())
    with pytest.raises(ValueError):
        builder.create_form_file("file", file)


def test_exact_wire_format():
    body = io.BytesIO()
    builder = FormBuilder(body, boundary="testboundary")
    builder.write_field("purpose", "fine-tune")
    builder.create_form_file_reader("file", io.BytesIO(b"hello"), "dir/data.jsonl")
    builder.close()
    assert body.getvalue() == (
        b"--testboundary\r\n"
        b'Content-Disposition: form-data; name="purpose"\r\n'
        b"\r\n"
        b"fine-tune"
        b"\r\n--testboundary\r\n"
        b'Content-Disposition: form-data; name="file"; filename="data.jsonl"\r\n'
        b"Content-Type: application/octet-stream\r\n"
        b"\r\n"
        b"hello"
        b"\r\n--testboundary--\r\n"
    )
    assert builder.form_data_content_type() == "multipart/form-data; boundary=testboundary"


def test_random_boundary_and_parse_round_trip(tmp_path):
    path = tmp_path / "image.png"
    path.write_bytes(b"\x89PNG data")
    body = io.BytesIO()
    builder = FormBuilder(body)
    assert re.fullmatch(r"[0-9a-f]{60}", builder.boundary)

    with path.open("rb") as file:
        builder.create_form_file("image", file)
    builder.write_field("n", "2")
    builder.close()

    parts = _parse(body.getvalue(), builder.form_data_content_type())
    assert len(parts) == 2
    image, count = parts
    assert image.get_param("name", header="content-disposition") == "image"
    assert image.get_filename() == str(path)
    assert image.get_payload(decode=True) == b"\x89PNG data"
    assert count.get_param("name", header="content-disposition") == "n"
    assert count.get_payload(decode=True) == b"2"


def test_empty_file_name_is_rejected():
    reader = io.BytesIO(b"data")
    reader.name = ""
    builder = FormBuilder(io.BytesIO())
    with pytest.raises(ValueError, match="filename cannot be empty"):
        builder.create_form_file("file", reader)


@pytest.mark.parametrize(
    "filename, expected",
    [("a/b/", b'filename="b"'), ("", b'filename="."'), ("plain.txt", b'filename="plain.txt"')],
)
def test_reader_file_name_uses_last_path_element(filename, expected):
    body = io.BytesIO()
    builder = FormBuilder(body, boundary="xyz")
    builder.create_form_file_reader("file", io.BytesIO(b"x"), filename)
    assert expected in body.getvalue()


def test_quotes_in_field_names_are_escaped():
    body = io.BytesIO()
    builder = FormBuilder(body, boundary="xyz")
    builder.write_field('a"b', "v")
    assert b'name="a\\"b"' in body.getvalue()


def test_text_reader_is_encoded():
    body = io.BytesIO()
    builder = FormBuilder(body, boundary="xyz")
    builder.create_form_file_reader("file", io.StringIO("héllo"), "t.txt")
    builder.close()
    parts = _parse(body.getvalue(), builder.form_data_content_type())
    assert parts[0].get_payload(decode=True) == "héllo".encode("utf-8")


def test_boundary_with_special_characters_is_quoted():
    builder = FormBuilder(io.BytesIO(), boundary="a b")
    assert builder.form_data_content_type() == 'multipart/form-data; boundary="a b"'