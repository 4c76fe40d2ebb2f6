"""Share-link construction gated by validation and the QR transport limit."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from quizlink.constants.quiz_constants import QR_URL_MAX_LENGTH
from quizlink.core.models import Quiz
from quizlink.core.transfer import TransferFormat, build_transfer_url, encode_quiz_payload
from quizlink.core.validator import validate_quiz

logger = logging.getLogger(__name__)


class InvalidQuizError(Exception):
    """Raised when a quiz fails validation and therefore cannot be shared."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        super().__init__("Quiz is not valid: " + "; ".join(errors))
        self.errors = errors


@dataclass(frozen=True, slots=True)
class ShareLink:
    """A ready-to-share URL plus whether it fits in a QR code."""

    url: str
    format: TransferFormat
    max_length: int

    @property
    def length(self) -> int:
        return len(self.url)

    @property
    def fits_qr(self) -> bool:
        return self.length <= self.max_length


def build_share_link(
    quiz: Quiz,
    origin: str,
    *,
    compress: bool = True,
    max_length: int = QR_URL_MAX_LENGTH,
) -> ShareLink:
    validation = validate_quiz(quiz)
    if not validation.is_valid:
        raise InvalidQuizError(validation.errors)

    transfer_format, payload = encode_quiz_payload(quiz, compress=compress)
    link = ShareLink(
        url=build_transfer_url(origin, transfer_format, payload),
        format=transfer_format,
        max_length=max_length,
    )
    if not link.fits_qr:
        logger.info(
            "Share link for '%s' is %d characters, above the QR limit of %d",
            quiz.title,
            link.length,
            max_length,
        )
    return link
