"""State machine behind the landing page signup form.

    IDLE -> SUBMITTING -> SUCCESS | ERROR -> (reset) IDLE

The flow owns the field value and the display messages. It runs the shared
email rule before submitting, allows one submission in flight at a time,
and keeps the typed value when a submission fails so it can be corrected.
"""
import enum
import logging

from errors import NetworkError
from validation import validate_email_address

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."
SUCCESS_BANNER = "Thanks! We'll be in touch soon."

logger = logging.getLogger(__name__)


class SignupState(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class SignupFlow:
    """Drives one signup form.

    ``submit`` receives the email and returns ``(status_code, body)`` the way
    ``POST /api/subscribe`` answers. Any exception it raises is treated as
    the endpoint being unreachable.
    """

    def __init__(self, submit):
        self.submit = submit
        self.state = SignupState.IDLE
        self.value = ""
        self.field_error = None
        self.message = None
        self.subscription = None

    @property
    def is_pending(self):
        return self.state is SignupState.SUBMITTING

    def submit_email(self, value):
        if self.is_pending:
            return self.state

        self.value = value
        self.message = None
        self.field_error = validate_email_address(value)
        if self.field_error:
            self.state = SignupState.IDLE
            return self.state

        self.state = SignupState.SUBMITTING
        try:
            status_code, body = self._send(value)
        except NetworkError as e:
            logger.error(f"Subscription error: {e.message}")
            return self._fail()

        if status_code == 200 and body.get("success"):
            self.state = SignupState.SUCCESS
            self.value = ""
            self.message = SUCCESS_BANNER
            self.subscription = body.get("subscription")
            return self.state

        return self._fail()

    def reset(self):
        self.state = SignupState.IDLE
        self.field_error = None
        self.message = None

    def _send(self, value):
        try:
            status_code, body = self.submit(value)
        except Exception as e:
            raise NetworkError(f"Could not reach the subscription endpoint: {e}") from e
        return status_code, body or {}

    def _fail(self):
        self.state = SignupState.ERROR
        self.message = GENERIC_ERROR_MESSAGE
        return self.state
