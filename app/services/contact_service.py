import logging
from enum import Enum
from typing import Dict

import httpx

from app.schemas.contact import ContactSubmission
from app.settings import Settings

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you soon."
ERROR_MESSAGE = "There was an error submitting your message. Please try again."

FORM_FIELDS = ("name", "email", "message")


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class ContactDeliveryError(Exception):
    pass


class ContactFormBusy(Exception):
    pass


class ContactSender:
    """
    Posts a submission to the external form endpoint. One request, no retry;
    the response status is logged but not interpreted.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, current_settings: Settings) -> "ContactSender":
        return cls(
            endpoint=current_settings.CONTACT_FORM_ENDPOINT,
            timeout=current_settings.CONTACT_TIMEOUT,
        )

    async def send(self, submission: ContactSubmission) -> None:
        if not self.endpoint:
            raise ContactDeliveryError("No contact form endpoint configured")

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self.transport
            ) as client:
                response = await client.post(self.endpoint, json=submission.model_dump())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ContactDeliveryError(str(e)) from e

        if response.status_code >= 400:
            logger.warning(
                f"Contact endpoint answered {response.status_code}, treating as delivered"
            )


class ContactForm:
    """
    Contact form state: idle -> submitting -> success | error.
    Fields are kept after an error so the visitor can retry.
    """

    def __init__(self, name: str = "", email: str = "", message: str = ""):
        self.fields: Dict[str, str] = {"name": name, "email": email, "message": message}
        self.status = FormStatus.IDLE
        self.error = ""

    def update(self, field: str, value: str) -> None:
        if field not in FORM_FIELDS:
            raise KeyError(field)
        self.fields[field] = value

    @property
    def message(self) -> str:
        if self.status is FormStatus.SUCCESS:
            return SUCCESS_MESSAGE
        if self.status is FormStatus.ERROR:
            return self.error
        return ""

    def reset(self) -> None:
        self.fields = dict.fromkeys(FORM_FIELDS, "")
        self.status = FormStatus.IDLE
        self.error = ""

    async def submit(self, sender: ContactSender) -> FormStatus:
        if self.status is FormStatus.SUBMITTING:
            raise ContactFormBusy("A submission is already in flight")

        # invalid fields raise before any state change
        submission = ContactSubmission(**self.fields)

        self.status = FormStatus.SUBMITTING
        self.error = ""
        try:
            await sender.send(submission)
        except ContactDeliveryError as e:
            logger.error(f"Form submission error: {e}")
        else:
            self.status = FormStatus.SUCCESS
            self.fields = dict.fromkeys(FORM_FIELDS, "")
        finally:
            # never left in SUBMITTING, even when send() raises something unexpected
            if self.status is not FormStatus.SUCCESS:
                self.status = FormStatus.ERROR
                self.error = ERROR_MESSAGE
        return self.status
