"""Network settings for the question provider.

Every value can be overridden through the environment so the app can be
pointed at a mirror or made more patient on slow connections.
"""

import os


def _int_from_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


DEFAULT_API_URL: str = os.getenv("TRIVIA_API_URL", "https://opentdb.com/api.php")
DEFAULT_TIMEOUT_SECONDS: int = _int_from_env("TRIVIA_TIMEOUT_SECONDS", 5)
DEFAULT_MAX_RETRIES: int = _int_from_env("TRIVIA_MAX_RETRIES", 3)
RETRY_BACKOFF_STEP_SECONDS: float = 0.4

# Open Trivia Database response codes
RESPONSE_CODE_SUCCESS: int = 0
RESPONSE_CODE_NO_RESULTS: int = 1
RESPONSE_CODE_RATE_LIMIT: int = 5
