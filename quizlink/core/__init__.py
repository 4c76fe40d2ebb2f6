"""Quiz link codec, evaluation, and scoring."""

from .evaluator import is_answer_correct
from .models import (
    MultipleChoiceQuestion,
    Question,
    Quiz,
    SingleChoiceQuestion,
    TrueFalseQuestion,
)
from .scoring import calculate_score
from .share import InvalidQuizError, ShareLink, build_share_link
from .transfer import (
    DecodeResult,
    DecodeStatus,
    TransferFormat,
    decode_import_payload,
    decode_quiz_from_query,
    decode_quiz_from_url,
    encode_import_url,
    encode_quiz_to_url,
)
from .validator import ValidationResult, validate_quiz

__all__ = [
    "DecodeResult",
    "DecodeStatus",
    "InvalidQuizError",
    "MultipleChoiceQuestion",
    "Question",
    "Quiz",
    "ShareLink",
    "SingleChoiceQuestion",
    "TransferFormat",
    "TrueFalseQuestion",
    "ValidationResult",
    "build_share_link",
    "calculate_score",
    "decode_import_payload",
    "decode_quiz_from_query",
    "decode_quiz_from_url",
    "encode_import_url",
    "encode_quiz_to_url",
    "is_answer_correct",
    "validate_quiz",
]
