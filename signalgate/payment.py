"""
x402 Payment Header
===================
Turns the body of a 402 response into the X-Payment header value.

    details = PaymentDetails.from_body(resp.json())
    token = PaymentToken.from_details(details, default_amount="0.05", ...)
    headers = {"X-Payment": token.encode()}
"""

import base64
import json
from dataclasses import dataclass, asdict
from typing import Any, Optional

from .errors import ParseError

PAYMENT_HEADER = "X-Payment"


def _present(value):
    # Missing, null and "" all count as "not provided by the server".
    return value is not None and value != ""


@dataclass(frozen=True)
class PaymentDetails:
    """What the server asks for in a 402 body."""
    pay_to: str
    nonce: Any
    amount: Optional[Any] = None
    currency: Optional[str] = None
    network: Optional[str] = None

    @classmethod
    def from_body(cls, body):
        if not isinstance(body, dict):
            raise ParseError(f"402 body is not a JSON object: {body!r}")
        if not _present(body.get("payTo")):
            raise ParseError("402 body is missing 'payTo'")
        if body.get("nonce") is None:
            raise ParseError("402 body is missing 'nonce'")

        return cls(
            pay_to=body["payTo"],
            nonce=body["nonce"],
            amount=body.get("amount"),
            currency=body.get("currency"),
            network=body.get("network"),
        )


@dataclass(frozen=True)
class PaymentToken:
    payTo: str
    amount: Any
    currency: str
    network: str
    nonce: Any

    @classmethod
    def from_details(cls, details, default_amount, default_currency, default_network):
        """Server-provided terms win; anything absent falls back to the client defaults."""
        return cls(
            payTo=details.pay_to,
            amount=details.amount if _present(details.amount) else default_amount,
            currency=details.currency if _present(details.currency) else default_currency,
            network=details.network if _present(details.network) else default_network,
            nonce=details.nonce,
        )

    def to_dict(self):
        return asdict(self)

    def encode(self):
        """base64(json) with compact separators, key order payTo/amount/currency/network/nonce."""
        raw = json.dumps(self.to_dict(), separators=(",", ":"))
        return base64.b64encode(raw.encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, header_value):
        try:
            data = json.loads(base64.b64decode(header_value, validate=True).decode("utf-8"))
        except (ValueError, UnicodeDecodeError) as e:
            raise ParseError(f"Invalid payment header: {e}") from e
        if not isinstance(data, dict):
            raise ParseError("Payment header does not hold a JSON object")

        missing = [k for k in ("payTo", "amount", "currency", "network", "nonce") if k not in data]
        if missing:
            raise ParseError(f"Payment header missing fields: {', '.join(missing)}")
        return cls(
            payTo=data["payTo"],
            amount=data["amount"],
            currency=data["currency"],
            network=data["network"],
            nonce=data["nonce"],
        )
