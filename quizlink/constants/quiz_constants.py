"""Quiz-related constants shared by the codec, scorer, and editor helpers."""

DEFAULT_POINTS: int = 100
DEFAULT_DURATION_SECONDS: int = 30
DEFAULT_RESPONSE_TIME_MULTIPLIER: float = 1.0

# Longest share URL the QR renderer accepts without degrading scannability.
QR_URL_MAX_LENGTH: int = 3000

COMPACT_QUERY_KEY: str = "c"
LEGACY_QUERY_KEY: str = "q"
IMPORT_QUERY_KEY: str = "import"

EDITOR_PATH: str = "/editor"
