"""Log filter masking rider contact details."""

import logging
import re


class PIIFilter(logging.Filter):
    """Masks emails and phone numbers in the rendered log message.

    Arguments are merged into the message before masking, so a number passed
    as a %-argument is caught too. Phone numbers follow the local format used
    in rider profiles (e.g. +90 555 555 55 55).
    """

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
    PHONE_PATTERN = re.compile(r"(?:\+?\d{2}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{2}[-.\s]?\d{2}")

    @classmethod
    def mask(cls, text: str) -> str:
        if "@" in text:
            text = cls.EMAIL_PATTERN.sub("[EMAIL]", text)
        if any(c.isdigit() for c in text):
            text = cls.PHONE_PATTERN.sub("[PHONE]", text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = self.mask(message)
        if masked != message:
            record.msg = masked
            record.args = None
        destination = getattr(record, "destination", None)
        if isinstance(destination, str):
            record.destination = self.mask(destination)
        return True
