"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Trivia Game"

OPTIONS_AMOUNT_LABEL: str = "Number of Questions"
OPTIONS_AMOUNT_PLACEHOLDER: str = "Enter a number (1–50)"
OPTIONS_CATEGORY_LABEL: str = "Category"
OPTIONS_DIFFICULTY_TEMPLATE: str = "Difficulty: {difficulty}"
OPTIONS_TYPE_LABEL: str = "Question Type"
OPTIONS_TIMER_LABEL: str = "Timer Duration"
OPTIONS_ANY_CHOICE: str = "Any"
START_BUTTON: str = "Start Trivia"

INVALID_INPUT_TITLE: str = "Invalid Input"
INVALID_INPUT_MESSAGE: str = "Enter valid numbers."

LOADING_MESSAGE: str = "Loading..."
FETCH_FAILED_TITLE: str = "Loading failed"
FETCH_FAILED_TEMPLATE: str = "Could not load questions: {reason}"
RETRY_BUTTON: str = "Try Again"
BACK_BUTTON: str = "Back to Options"
TIME_REMAINING_TEMPLATE: str = "Time Remaining: {seconds}s"
TIME_UP_MESSAGE: str = "Time is up!"
SUBMIT_BUTTON: str = "Submit Answers"
DONE_BUTTON: str = "Done"
EMPTY_QUIZ_MESSAGE: str = "No questions matched these options."

SCORE_TITLE: str = "Your Score"
SCORE_TEMPLATE: str = "{correct} out of {total}"

LEAVE_QUIZ_TITLE: str = "Leave Quiz"
LEAVE_QUIZ_MESSAGE: str = "Your answers will be lost. Leave the quiz?"

ANSWER_BUTTON_MIN_HEIGHT: int = 36
