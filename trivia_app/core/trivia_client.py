"""HTTP client for the Open Trivia Database question API."""

from __future__ import annotations

import html
import logging
import time
from typing import Any, Callable

import requests
from pydantic import BaseModel, Field

from trivia_app.constants.network_constants import (
    DEFAULT_API_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_SECONDS,
    RESPONSE_CODE_NO_RESULTS,
    RESPONSE_CODE_RATE_LIMIT,
    RESPONSE_CODE_SUCCESS,
    RETRY_BACKOFF_STEP_SECONDS,
)
from trivia_app.core.models import RawQuestion
from trivia_app.core.quiz_options import QuizOptions

logger = logging.getLogger(__name__)


class TriviaFetchError(Exception):
    """Raised when no usable question batch could be obtained."""


class TriviaQuestionPayload(BaseModel):
    """One entry of the ``results`` array returned by the API."""

    question: str
    correct_answer: str
    incorrect_answers: list[str]
    type: str = "multiple"
    difficulty: str = ""
    category: str = ""


class TriviaResponsePayload(BaseModel):
    """Top-level API response."""

    response_code: int = RESPONSE_CODE_SUCCESS
    results: list[TriviaQuestionPayload] = Field(default_factory=list)


def build_query_params(options: QuizOptions) -> dict[str, Any]:
    params: dict[str, Any] = {"amount": options.amount}
    if options.category_id is not None:
        params["category"] = options.category_id
    if options.difficulty:
        params["difficulty"] = options.difficulty
    if options.question_type:
        params["type"] = options.question_type
    return params


def decode_question(payload: TriviaQuestionPayload) -> RawQuestion:
    """Convert an API entry into a ``RawQuestion`` with HTML entities resolved."""
    return RawQuestion(
        prompt_text=html.unescape(payload.question),
        correct_answer=html.unescape(payload.correct_answer),
        distractor_answers=tuple(html.unescape(answer) for answer in payload.incorrect_answers),
        question_type=payload.type,
        difficulty=payload.difficulty,
        category=html.unescape(payload.category),
    )


class TriviaClient:
    """Fetches question batches with a small linear-backoff retry loop."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
        retries: int = DEFAULT_MAX_RETRIES,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self.retries = max(1, retries)
        self._sleep = sleep

    def fetch_questions(self, options: QuizOptions) -> list[RawQuestion]:
        """Return decoded questions for ``options``.

        An empty list means the API had no questions matching the options.

        Raises:
            TriviaFetchError: On network failures, HTTP errors, malformed
                payloads or API error codes once all retries are used up.
        """
        params = build_query_params(options)
        last_error: Exception | None = None

        for attempt in range(self.retries):
            if attempt:
                self._sleep(attempt * RETRY_BACKOFF_STEP_SECONDS)
            try:
                response = requests.get(self.api_url, params=params, timeout=self.timeout)
                response.raise_for_status()
                payload = TriviaResponsePayload.model_validate(response.json())
            except (requests.RequestException, ValueError) as exc:
                last_error = exc
                logger.warning("Trivia request attempt %d/%d failed: %s", attempt + 1, self.retries, exc)
                continue

            if payload.response_code == RESPONSE_CODE_SUCCESS:
                logger.info("Fetched %d trivia questions", len(payload.results))
                return [decode_question(entry) for entry in payload.results]
            if payload.response_code == RESPONSE_CODE_NO_RESULTS:
                logger.info("Trivia API has no questions for %s", params)
                return []
            if payload.response_code == RESPONSE_CODE_RATE_LIMIT:
                last_error = TriviaFetchError("Too many requests, please wait a moment.")
                logger.warning("Trivia API rate limited attempt %d/%d", attempt + 1, self.retries)
                continue
            raise TriviaFetchError(f"Trivia API rejected the request (response code {payload.response_code}).")

        raise TriviaFetchError(f"Unable to reach the trivia service: {last_error}") from last_error
