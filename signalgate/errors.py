"""
SignalGate Errors
=================
Everything the client raises derives from RequestError, so an agent can
catch one type and still tell a timeout from a rejected payment.
"""


class RequestError(Exception):
    """Base class. Raised directly for transport failures (DNS, refused, reset)."""


class RequestTimeoutError(RequestError, TimeoutError):
    """A request leg did not complete inside the configured wall-clock timeout."""

    def __init__(self, timeout, leg="initial"):
        self.timeout = timeout
        self.leg = leg
        super().__init__(f"{leg} request timed out after {timeout}s")


class UpstreamError(RequestError):
    """The first response was neither 2xx nor 402."""

    def __init__(self, status_code, reason=""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"SignalGate API error: {status_code} {reason}".rstrip())


class PaymentRejectedError(RequestError):
    """The paid retry came back non-2xx."""

    def __init__(self, status_code, detail=""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Payment failed or rejected: {status_code}")


class PaymentRequiredError(RequestError):
    """402 received while auto-pay is disabled. Carries the server's payment details."""

    def __init__(self, details):
        self.details = details
        super().__init__(f"Payment required: {details}")


class ParseError(RequestError):
    """Body was not valid JSON, or did not match the expected shape."""
