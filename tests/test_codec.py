from __future__ import annotations

import string

import pytest

from quizlink.core.codec import (
    CodecError,
    compress_text,
    decode_base64_text,
    decompress_text,
    encode_base64_text,
)

_URI_ALPHABET = set(string.ascii_letters + string.digits + "+-$")


@pytest.mark.parametrize(
    "text",
    [
        '{"t":"T","q":[{"s":"S","y":"tf","a":true}]}',
        "Café, naïve, Straße",
        "Emoji survive too 🎉🧠",
        "a" * 5000,
    ],
)
def test_compress_round_trip(text):
    assert decompress_text(compress_text(text)) == text


def test_compress_output_is_url_component_safe():
    payload = compress_text('{"title":"Capitals 🌍","questions":[]}' * 20)
    assert set(payload) <= _URI_ALPHABET


def test_compress_is_deterministic():
    text = '{"t":"Same input","q":[]}'
    assert compress_text(text) == compress_text(text)


def test_compress_shrinks_repetitive_json():
    text = '{"s":"Which is larger?","y":"sc","o":["1","2"],"a":1},' * 30
    assert len(compress_text(text)) < len(text) / 3


def test_decompress_accepts_form_decoded_plus_signs():
    payload = compress_text("some text that compresses " * 10)
    assert decompress_text(payload.replace("+", " ")) == "some text that compresses " * 10


@pytest.mark.parametrize("payload", ["", "!!!!", "%%%"])
def test_decompress_rejects_corrupt_payloads(payload):
    with pytest.raises(CodecError):
        decompress_text(payload)


def test_base64_round_trip_unicode():
    text = '{"title":"Ça marche 🎉"}'
    assert decode_base64_text(encode_base64_text(text)) == text


def test_base64_encoding_is_standard_alphabet():
    assert encode_base64_text("hi>") == "aGk+"
    assert encode_base64_text("hi?") == "aGk/"


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ("aGk+", "hi>"),
        ("aGk ", "hi>"),
        ("aGk-", "hi>"),
        ("aGk_", "hi?"),
        ("aGk", "hi"),
        ("aGk+\n", "hi>"),
    ],
)
def test_base64_decoding_is_lenient(payload, expected):
    assert decode_base64_text(payload) == expected


@pytest.mark.parametrize("payload", ["", "@@@@", "a", "//4="])
def test_base64_decoding_rejects_garbage(payload):
    with pytest.raises(CodecError):
        decode_base64_text(payload)


@pytest.mark.parametrize("payload", ["é", "ü==", "aGké"])
def test_base64_rejects_non_ascii_payloads(payload):
    with pytest.raises(CodecError):
        decode_base64_text(payload)
