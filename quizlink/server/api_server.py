"""FastAPI server that exposes the quiz link codec to the browser runner and editor."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field
import uvicorn

from quizlink.constants.about import APP_NAME, APP_VERSION
from quizlink.core.evaluator import is_answer_correct
from quizlink.core.markdown_renderer import renderer
from quizlink.core.models import Quiz
from quizlink.core.quiz_exporter import quiz_to_dict
from quizlink.core.quiz_importer import QuizImportError, question_from_dict, quiz_from_dict
from quizlink.core.scoring import calculate_score
from quizlink.core.services.scoreboard import Scoreboard
from quizlink.core.share import InvalidQuizError, build_share_link
from quizlink.core.transfer import (
    DecodeResult,
    decode_import_payload,
    decode_quiz_from_query,
    encode_import_url,
)
from quizlink.utils.settings import AppSettings

logger = logging.getLogger(__name__)

_NO_QUIZ_DETAIL = (
    "No quiz data found. Open this page with a quiz link containing a "
    "'c' (compressed) or 'q' (legacy base64) parameter."
)
_DECODE_FAILED_DETAIL = "Failed to decode quiz data"


class AnswerPayload(BaseModel):
    """Payload schema for scoring a single answer."""

    question: dict[str, Any]
    user_answer: Any = None
    response_time: float = Field(0.0, ge=0, allow_inf_nan=False)
    quiz_duration: int | None = Field(None, gt=0)
    multiplier: float | None = Field(None, allow_inf_nan=False)


class RecordedAnswerPayload(BaseModel):
    """One answer from a completed play-through."""

    question_index: int = Field(ge=0)
    user_answer: Any = None
    response_time: float = Field(0.0, ge=0, allow_inf_nan=False)


class ResultsPayload(BaseModel):
    """Payload schema for summarizing a completed play-through."""

    quiz: dict[str, Any]
    answers: list[RecordedAnswerPayload]


def _get_settings_dependency(settings: AppSettings):
    def dependency() -> AppSettings:
        return settings

    return dependency


def _parse_quiz_body(data: dict[str, Any]) -> Quiz:
    try:
        return quiz_from_dict(data)
    except QuizImportError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _decoded_quiz_response(result: DecodeResult) -> dict[str, object]:
    if result.is_absent:
        raise HTTPException(status_code=404, detail=_NO_QUIZ_DETAIL)
    if result.is_failed:
        raise HTTPException(
            status_code=422,
            detail={"message": _DECODE_FAILED_DETAIL, "reason": result.error},
        )
    return {
        "format": result.format.value,
        "quiz": quiz_to_dict(result.quiz),
        "rendered": renderer.render_quiz(result.quiz),
    }


def create_api_app(settings: AppSettings) -> FastAPI:
    """Create a FastAPI application wired to the provided settings."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    settings_dep = _get_settings_dependency(settings)

    @app.get("/api/about")
    def get_about() -> dict[str, object]:
        return {"name": APP_NAME, "version": APP_VERSION}

    @app.get("/api/quiz")
    def get_quiz(request: Request) -> dict[str, object]:
        return _decoded_quiz_response(decode_quiz_from_query(request.url.query))

    @app.get("/api/import")
    def get_import(request: Request) -> dict[str, object]:
        return _decoded_quiz_response(decode_import_payload(request.url.query))

    @app.post("/api/share")
    def share_quiz(
        data: dict[str, Any] = Body(...),
        config: AppSettings = Depends(settings_dep),
    ) -> dict[str, object]:
        quiz = _parse_quiz_body(data)
        try:
            link = build_share_link(
                quiz,
                config.public_origin,
                compress=config.compress_links,
                max_length=config.qr_max_url_length,
            )
        except InvalidQuizError as exc:
            raise HTTPException(
                status_code=422,
                detail={
                    "message": "Please fix the following issues before sharing",
                    "errors": list(exc.errors),
                },
            ) from exc
        return {
            "url": link.url,
            "format": link.format.value,
            "length": link.length,
            "fits_qr": link.fits_qr,
            "editor_url": encode_import_url(quiz, config.public_origin),
        }

    @app.post("/api/answer")
    def score_answer(payload: AnswerPayload) -> dict[str, object]:
        try:
            question = question_from_dict(payload.question)
        except QuizImportError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        is_correct = is_answer_correct(question, payload.user_answer)
        points = calculate_score(
            question,
            is_correct,
            payload.response_time,
            payload.quiz_duration,
            payload.multiplier,
        )
        return {"is_correct": is_correct, "points": points}

    @app.post("/api/results")
    def summarize_results(payload: ResultsPayload) -> dict[str, object]:
        quiz = _parse_quiz_body(payload.quiz)
        scoreboard = Scoreboard(quiz)
        for answer in payload.answers:
            try:
                scoreboard.record_answer(
                    answer.question_index, answer.user_answer, answer.response_time
                )
            except IndexError as exc:
                raise HTTPException(status_code=422, detail=str(exc)) from exc
        return {
            "total_score": scoreboard.total_score,
            "max_score": scoreboard.max_score,
            "correct_answers": scoreboard.correct_answers,
            "total_questions": len(quiz.questions),
            "percentage": scoreboard.percentage,
            "message": scoreboard.score_message(),
            "summary": scoreboard.format_results(),
            "answers": [
                {
                    "question_index": record.question_index,
                    "is_correct": record.is_correct,
                    "points": record.points_earned,
                }
                for record in scoreboard.answers
            ],
        }

    return app


def run_api_server(settings: AppSettings) -> None:
    """Serve the API in the current thread until interrupted."""
    app = create_api_app(settings)
    logger.info("Serving %s on %s:%d", APP_NAME, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

