"""Single-slot draft persistence for the editor."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import time

from quizlink.core.models import Quiz
from quizlink.core.quiz_exporter import quiz_to_dict
from quizlink.core.quiz_importer import QuizImportError, quiz_from_dict

logger = logging.getLogger(__name__)


class DraftStore:
    """Keeps the editor's working copy as ``{"quiz": ..., "timestamp": ...}`` JSON.

    A missing slot means "no draft". A slot that cannot be read is logged and
    also reported as no draft, so a damaged file never blocks the editor.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def save(self, quiz: Quiz) -> None:
        data = {"quiz": quiz_to_dict(quiz), "timestamp": int(time.time() * 1000)}
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def load(self) -> Quiz | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise QuizImportError("Draft slot is not a JSON object.")
            return quiz_from_dict(data.get("quiz"))
        except (OSError, json.JSONDecodeError, RecursionError, QuizImportError) as exc:
            logger.error("Failed to load quiz draft from %s: %s", self._path, exc)
            return None

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
