"""
Newsletter signup client.

NewsletterSubscriber validates an email locally and submits it to
POST /api/newsletter/subscribe/. NewsletterPopup owns one subscriber per
opening of the signup popup.

State machine:
    IDLE -> SUBMITTING -> SUBMITTED   (2xx response)
    IDLE -> SUBMITTING -> ERROR       (network failure or non-2xx)
    ERROR -> IDLE                     (next edit or submit)
    SUBMITTED is terminal until the popup is reopened.

Invalid emails never leave the client: submit() raises
NewsletterValidationError and no request is made. There is no automatic
retry.

Any component that should be able to open the signup popup is handed the
popup itself (or its bound ``open`` method) instead of broadcasting a
global event.

Usage:
    popup = NewsletterPopup()
    open_signup = popup.open        # pass this to buttons/banners
    open_signup()
    popup.submit("user@example.com")
    popup.state                     # SubscriptionState.SUBMITTED
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

import httpx

from tastemongers.services import client_settings
from tastemongers.utils.validation import is_valid_email

logger = logging.getLogger(__name__)

SUBSCRIBE_PATH = "/api/newsletter/subscribe/"

INVALID_EMAIL_MESSAGE = "Please enter a valid email address."
SUBMIT_FAILED_MESSAGE = "Failed to subscribe. Please try again."


class NewsletterValidationError(ValueError):
    """The email address failed local validation."""

    pass


class NewsletterSubmissionError(Exception):
    """The subscription request failed (network error or error status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SubscriptionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    ERROR = "error"


StateListener = Callable[[SubscriptionState], None]


class NewsletterSubscriber:
    """
    One signup attempt sequence, as shown in a single popup instance.

    Args:
        http_client: httpx.Client used for the POST; when omitted a client
            is created per request from settings.TASTEMONGERS_API_BASE_URL
        listener: Optional callable notified of every state transition
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        listener: Optional[StateListener] = None,
    ):
        self.http_client = http_client
        self.listener = listener
        self.state = SubscriptionState.IDLE
        self.error_message: Optional[str] = None
        self.last_error: Optional[NewsletterSubmissionError] = None

    def _transition(self, state: SubscriptionState) -> None:
        self.state = state
        if self.listener is not None:
            self.listener(state)

    def edit(self) -> None:
        """The user changed the form; an error state goes back to idle."""
        if self.state is SubscriptionState.ERROR:
            self.error_message = None
            self._transition(SubscriptionState.IDLE)

    def submit(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> SubscriptionState:
        """
        Validate and submit a signup.

        Returns:
            The resulting state (SUBMITTED or ERROR; unchanged if already
            SUBMITTED or SUBMITTING)

        Raises:
            NewsletterValidationError: If the email is malformed (no request is sent)
        """
        if self.state in (SubscriptionState.SUBMITTED, SubscriptionState.SUBMITTING):
            return self.state

        self.edit()

        email = (email or "").strip()
        if not is_valid_email(email):
            raise NewsletterValidationError(INVALID_EMAIL_MESSAGE)

        payload = {"email": email}
        if first_name:
            payload["firstName"] = first_name.strip()
        if last_name:
            payload["lastName"] = last_name.strip()

        self._transition(SubscriptionState.SUBMITTING)
        try:
            self._post(payload)
        except NewsletterSubmissionError as e:
            logger.warning("Newsletter subscription failed: %s", e)
            self.last_error = e
            self.error_message = SUBMIT_FAILED_MESSAGE
            self._transition(SubscriptionState.ERROR)
            return self.state

        self.last_error = None
        self._transition(SubscriptionState.SUBMITTED)
        return self.state

    def _post(self, payload: dict) -> None:
        try:
            if self.http_client is not None:
                response = self.http_client.post(SUBSCRIBE_PATH, json=payload)
            else:
                base_url, timeout = client_settings()
                with httpx.Client(base_url=base_url, timeout=timeout) as client:
                    response = client.post(SUBSCRIBE_PATH, json=payload)
        except httpx.HTTPError as e:
            raise NewsletterSubmissionError(f"Request failed: {e}") from e

        if not response.is_success:
            raise NewsletterSubmissionError(
                f"HTTP {response.status_code}", status_code=response.status_code
            )


class NewsletterPopup:
    """
    Shared open/closed state of the signup popup.

    Every open() starts a fresh subscriber in IDLE, so a SUBMITTED popup
    can be reopened for another signup.
    """

    def __init__(self, subscriber_factory: Callable[[], NewsletterSubscriber] = NewsletterSubscriber):
        self.subscriber_factory = subscriber_factory
        self.is_open = False
        self.subscriber: Optional[NewsletterSubscriber] = None
        self.validation_error: Optional[str] = None
        self.history: List[SubscriptionState] = []

    @property
    def state(self) -> Optional[SubscriptionState]:
        return self.subscriber.state if self.subscriber is not None else None

    @property
    def message(self) -> Optional[str]:
        """Text to show under the form, if any."""
        if self.validation_error:
            return self.validation_error
        if self.subscriber is not None:
            return self.subscriber.error_message
        return None

    def open(self) -> None:
        self.is_open = True
        self.validation_error = None
        self.subscriber = self.subscriber_factory()
        self.subscriber.listener = self.history.append
        self.history[:] = [self.subscriber.state]

    def close(self) -> None:
        self.is_open = False

    def edit(self) -> None:
        self.validation_error = None
        if self.subscriber is not None:
            self.subscriber.edit()

    def submit(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Optional[SubscriptionState]:
        """
        Submit the form. Validation problems are kept in validation_error
        instead of being raised.
        """
        if not self.is_open or self.subscriber is None:
            raise RuntimeError("Newsletter popup is not open")

        self.validation_error = None
        try:
            self.subscriber.submit(email, first_name=first_name, last_name=last_name)
        except NewsletterValidationError as e:
            self.validation_error = str(e)
        return self.state
