"""QuizLink: shareable quiz links and answer scoring."""

from quizlink.constants.about import APP_VERSION as __version__

__all__ = ["__version__"]
