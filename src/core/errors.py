"""Errors raised by the URL builder and modifier.

Validators never raise; they return result models instead.
"""


class LinkedInURLError(ValueError):
    """Base class for URL building/modification failures."""

    default_message = "LinkedIn URL error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidInputError(LinkedInURLError):
    """Required search keywords are missing or blank."""

    default_message = "Job designation/keywords are required"


class InvalidURLFormatError(LinkedInURLError):
    """The URL cannot be parsed as an http(s) URL."""

    default_message = "Invalid URL format. Please provide a valid URL."


class NotLinkedInDomainError(LinkedInURLError):
    """The URL host is not a linkedin.com host."""

    default_message = "Provided URL is not a LinkedIn URL."
