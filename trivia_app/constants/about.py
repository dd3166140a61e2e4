"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TriviaQt is a single-player trivia quiz built with Qt. "
    "It pulls a fresh batch of questions from the Open Trivia Database, "
    "runs a countdown and scores your answers when you submit or time runs out."
)
QUESTION_SOURCE_CREDIT = "Questions provided by the Open Trivia Database (opentdb.com)."
