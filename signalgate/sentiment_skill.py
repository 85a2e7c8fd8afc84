"""
signalgate-sentiment: the skill agents install to read BTC/ETH/SOL sentiment.
"""

from .client import SignalGateClient
from .models import SentimentQuery, SentimentResult
from .skills import create_skill

SKILL_NAME = "signalgate-sentiment"
SKILL_DESCRIPTION = (
    "Real-time AI-powered crypto market sentiment for BTC, ETH, and SOL. "
    "Returns bullish/bearish/neutral signal with confidence score and reasoning. "
    "Costs $0.05 USDC per call via x402 micropayment on Base, no API key needed."
)


def build_sentiment_skill(client: SignalGateClient = None):
    """
    Bind the skill to a client. Without one, the client is built lazily from
    SIGNALGATE_* env vars on first use.
    """
    holder = {"client": client}

    async def execute(query: SentimentQuery) -> SentimentResult:
        if holder["client"] is None:
            holder["client"] = SignalGateClient()
        return await holder["client"].get_sentiment(query.ticker)

    return create_skill(
        name=SKILL_NAME,
        description=SKILL_DESCRIPTION,
        input_model=SentimentQuery,
        output_model=SentimentResult,
        execute=execute,
    )


signalgate_sentiment = build_sentiment_skill()
