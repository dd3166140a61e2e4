"""Quiz-related constants shared across UI and core layers."""

MIN_QUESTION_AMOUNT: int = 1
MAX_QUESTION_AMOUNT: int = 50
DEFAULT_QUESTION_AMOUNT: int = 10

TICK_INTERVAL_MS: int = 1000
DEFAULT_TIMER_DURATION_SECONDS: int = 60

# (label, seconds)
TIMER_OPTIONS: tuple[tuple[str, int], ...] = (
    ("30 seconds", 30),
    ("1 minute", 60),
    ("5 minutes", 300),
    ("10 minutes", 600),
    ("1 hour", 3600),
)

# (Open Trivia Database category id, label)
CATEGORIES: tuple[tuple[int, str], ...] = (
    (9, "General Knowledge"),
    (11, "Movies"),
    (12, "Music"),
    (15, "Video Games"),
    (17, "Science & Nature"),
    (18, "Computers"),
    (23, "History"),
    (27, "Animals"),
    (31, "Japanese Anime & Manga"),
)

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

# (api value, label)
QUESTION_TYPES: tuple[tuple[str, str], ...] = (
    ("multiple", "Multiple Choice"),
    ("boolean", "True / False"),
)
DEFAULT_QUESTION_TYPE: str = "multiple"

# Slider positions below these bounds map to easy / medium; the rest is hard.
DIFFICULTY_EASY_UPPER_BOUND: float = 0.33
DIFFICULTY_MEDIUM_UPPER_BOUND: float = 0.66
DEFAULT_DIFFICULTY_SLIDER_VALUE: float = 0.5
