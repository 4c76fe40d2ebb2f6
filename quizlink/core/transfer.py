"""Encode quizzes into shareable URLs and decode them back.

Wire formats, in decode priority order:

``?c=``       LZ-string compressed JSON. Current format. The JSON is the
              compact projection; payloads written by an earlier release
              carry the full-field shape instead and are still accepted.
``?q=``       base64 of the full-field JSON. Legacy format, accepted forever.
``?import=``  base64 of the full-field JSON, read only by the editor entry
              point through ``decode_import_payload``.

Callers pass the query (or the whole URL) explicitly; nothing here reads
ambient browser or process state. Decoding never raises: every outcome is a
``DecodeResult`` so the caller can tell "no quiz in this link" apart from
"a quiz was there but could not be read".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import json
import logging
from typing import Any, Mapping
from urllib.parse import parse_qs, quote, urlsplit

from quizlink.constants.quiz_constants import (
    COMPACT_QUERY_KEY,
    EDITOR_PATH,
    IMPORT_QUERY_KEY,
    LEGACY_QUERY_KEY,
)
from quizlink.core.codec import CodecError, compress_text, decode_base64_text, decompress_text
from quizlink.core.compact import compact_quiz, expand_quiz, is_compact_shape, is_full_shape
from quizlink.core.models import Quiz
from quizlink.core.quiz_exporter import quiz_to_base64
from quizlink.core.quiz_importer import QuizImportError, quiz_from_dict

logger = logging.getLogger(__name__)

QueryInput = str | Mapping[str, Any]


class TransferFormat(Enum):
    """Known wire formats, valued by their query parameter name."""

    COMPACT = COMPACT_QUERY_KEY
    LEGACY = LEGACY_QUERY_KEY
    IMPORT = IMPORT_QUERY_KEY


class DecodeStatus(Enum):
    ABSENT = "absent"
    DECODED = "decoded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Outcome of reading a quiz out of a query string."""

    status: DecodeStatus
    quiz: Quiz | None = None
    format: TransferFormat | None = None
    error: str | None = None

    @property
    def is_absent(self) -> bool:
        return self.status is DecodeStatus.ABSENT

    @property
    def is_decoded(self) -> bool:
        return self.status is DecodeStatus.DECODED

    @property
    def is_failed(self) -> bool:
        return self.status is DecodeStatus.FAILED


_ABSENT = DecodeResult(status=DecodeStatus.ABSENT)
_DECODE_ORDER = (TransferFormat.COMPACT, TransferFormat.LEGACY)


def encode_quiz_payload(quiz: Quiz, *, compress: bool = True) -> tuple[TransferFormat, str]:
    """Return the wire format and raw (not percent-encoded) parameter value."""
    if compress:
        try:
            return TransferFormat.COMPACT, compress_text(_dump_json(compact_quiz(quiz)))
        except CodecError:
            logger.warning("Compression failed; falling back to legacy base64 link", exc_info=True)
    return TransferFormat.LEGACY, quiz_to_base64(quiz)


def encode_quiz_to_url(quiz: Quiz, origin: str, *, compress: bool = True) -> str:
    transfer_format, payload = encode_quiz_payload(quiz, compress=compress)
    return build_transfer_url(origin, transfer_format, payload)


def encode_import_url(quiz: Quiz, origin: str, path: str = EDITOR_PATH) -> str:
    """Link that opens the quiz in the editor through the ``?import=`` entry point."""
    return build_transfer_url(origin.rstrip("/") + path, TransferFormat.IMPORT, quiz_to_base64(quiz))


def decode_quiz_from_url(url: str) -> DecodeResult:
    return decode_quiz_from_query(urlsplit(url).query)


def decode_quiz_from_query(query: QueryInput) -> DecodeResult:
    """Read the quiz from the first format that decodes, in priority order.

    A malformed compressed payload falls through to the legacy parameter when
    one is present; if nothing decodes, the first failure is reported.
    """
    params = _normalize_query(query)
    first_failure: DecodeResult | None = None
    for transfer_format in _DECODE_ORDER:
        payload = params.get(transfer_format.value)
        if payload is None:
            continue
        result = _decode_payload(transfer_format, payload)
        if result.is_decoded:
            return result
        if first_failure is None:
            first_failure = result
    return first_failure or _ABSENT


def decode_import_payload(query: QueryInput) -> DecodeResult:
    payload = _normalize_query(query).get(TransferFormat.IMPORT.value)
    if payload is None:
        return _ABSENT
    return _decode_payload(TransferFormat.IMPORT, payload)


def _decode_payload(transfer_format: TransferFormat, payload: str) -> DecodeResult:
    try:
        quiz = _PAYLOAD_READERS[transfer_format](payload)
    except (CodecError, QuizImportError) as exc:
        logger.warning("Failed to decode quiz from '%s' parameter: %s", transfer_format.value, exc)
        return DecodeResult(
            status=DecodeStatus.FAILED,
            format=transfer_format,
            error=str(exc),
        )
    logger.debug(
        "Decoded quiz '%s' (%d questions) from '%s' parameter",
        quiz.title,
        len(quiz.questions),
        transfer_format.value,
    )
    return DecodeResult(status=DecodeStatus.DECODED, quiz=quiz, format=transfer_format)


def _read_compressed(payload: str) -> Quiz:
    data = _load_json(decompress_text(payload))
    if is_compact_shape(data):
        return expand_quiz(data)
    if is_full_shape(data):
        return quiz_from_dict(data)
    raise QuizImportError("Compressed payload matches no known quiz shape.")


def _read_base64(payload: str) -> Quiz:
    data = _load_json(decode_base64_text(payload))
    if not is_full_shape(data):
        raise QuizImportError("Payload is not a full quiz document.")
    return quiz_from_dict(data)


_PAYLOAD_READERS = {
    TransferFormat.COMPACT: _read_compressed,
    TransferFormat.LEGACY: _read_base64,
    TransferFormat.IMPORT: _read_base64,
}


def _normalize_query(query: QueryInput) -> dict[str, str]:
    """Flatten a query string or mapping into first-value-wins parameters."""
    if isinstance(query, str):
        # keep_blank_values so that "?c=" is reported as malformed, not absent.
        parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items() if values}
    params: dict[str, str] = {}
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[0]
        if value is not None:
            params[key] = str(value)
    return params


def build_transfer_url(base: str, transfer_format: TransferFormat, payload: str) -> str:
    # The LZ-string URI alphabet stays literal; base64 "+", "/" and "=" are escaped.
    safe = "+-$" if transfer_format is TransferFormat.COMPACT else ""
    return f"{base}?{transfer_format.value}={quote(payload, safe=safe)}"


def _dump_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuizImportError(f"Payload is not valid JSON: {exc.msg}.") from exc
    except RecursionError as exc:
        raise QuizImportError("Payload is nested too deeply.") from exc
