"""Static metadata describing QuizLink."""

APP_NAME = "QuizLink"
APP_VERSION = "0.1.0"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizLink packs a whole quiz into a shareable link or QR code and scores "
    "answers in the browser runner. No account or server-side storage needed."
)
