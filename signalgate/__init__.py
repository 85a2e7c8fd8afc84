"""
SignalGate
==========
Crypto sentiment skill for AI agents, paid per call via x402.

Usage:
    from signalgate import SignalGateClient, signalgate_sentiment
"""

from .client import SignalGateClient
from .config import ClientConfig
from .errors import (
    ParseError,
    PaymentRejectedError,
    PaymentRequiredError,
    RequestError,
    RequestTimeoutError,
    UpstreamError,
)
from .models import SentimentQuery, SentimentResult
from .payment import PaymentDetails, PaymentToken
from .sentiment_skill import build_sentiment_skill, signalgate_sentiment
from .skills import Skill, SkillRegistry, create_skill

__version__ = "0.1.0"
__all__ = [
    "SignalGateClient",
    "ClientConfig",
    "RequestError",
    "RequestTimeoutError",
    "UpstreamError",
    "PaymentRejectedError",
    "PaymentRequiredError",
    "ParseError",
    "SentimentQuery",
    "SentimentResult",
    "PaymentDetails",
    "PaymentToken",
    "Skill",
    "SkillRegistry",
    "create_skill",
    "build_sentiment_skill",
    "signalgate_sentiment",
]
