"""Network configuration constants for the quiz link host."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
DEFAULT_PUBLIC_ORIGIN: str = "http://localhost:8000"
