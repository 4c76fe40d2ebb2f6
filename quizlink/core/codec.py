"""Text codecs used to carry quiz JSON inside a URL query parameter.

Two encodings are supported:

* LZ-string in its ``EncodedURIComponent`` flavour. The output alphabet
  (``A-Z a-z 0-9 + - $``) survives a query string without percent-encoding and
  is byte-compatible with the lz-string JavaScript build, so links produced
  by the browser editor decode here and vice versa.
* Plain base64 of the UTF-8 text, used by legacy links and the editor import
  entry point. The decoder accepts the standard and URL-safe alphabets,
  missing padding, and spaces left behind when ``+`` was form-decoded.
"""

from __future__ import annotations

import base64

from lzstring import LZString

_LZ = LZString()
_BASE64_URLSAFE_TABLE = str.maketrans({"-": "+", "_": "/", " ": "+"})


class CodecError(Exception):
    """Raised when a payload cannot be encoded or decoded."""


def compress_text(text: str) -> str:
    try:
        return _LZ.compressToEncodedURIComponent(_to_utf16_units(text))
    except Exception as exc:
        raise CodecError(f"Compression failed: {exc}") from exc


def decompress_text(payload: str) -> str:
    if not payload:
        raise CodecError("Compressed payload is empty.")
    try:
        # A literal "+" comes back as a space once the query string is form-decoded.
        text = _LZ.decompressFromEncodedURIComponent(payload.replace(" ", "+"))
    except Exception as exc:
        # Corrupt streams surface as arbitrary lookup/index errors inside lzstring.
        raise CodecError(f"Compressed payload is corrupt: {exc!r}") from exc
    if not text:
        raise CodecError("Compressed payload is corrupt.")
    return _from_utf16_units(text)


def encode_base64_text(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64_text(payload: str) -> str:
    normalized = payload.translate(_BASE64_URLSAFE_TABLE).strip()
    if not normalized:
        raise CodecError("Base64 payload is empty.")
    normalized += "=" * (-len(normalized) % 4)
    try:
        raw = base64.b64decode(normalized, validate=True)
    except ValueError as exc:
        # binascii.Error for bad alphabet or padding, plain ValueError for non-ASCII input.
        raise CodecError(f"Payload is not valid base64: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CodecError("Base64 payload is not UTF-8 text.") from exc


def _to_utf16_units(text: str) -> str:
    """Split astral characters into surrogate pairs, as JavaScript strings hold them."""
    if text.isascii():
        return text
    units = text.encode("utf-16-le", "surrogatepass")
    return "".join(
        chr(int.from_bytes(units[index : index + 2], "little"))
        for index in range(0, len(units), 2)
    )


def _from_utf16_units(text: str) -> str:
    """Join surrogate pairs back into real code points."""
    if text.isascii():
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
