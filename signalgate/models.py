from typing import Literal, Optional, get_args

from pydantic import BaseModel, Field

Ticker = Literal["BTC", "ETH", "SOL"]
Signal = Literal["bullish", "bearish", "neutral"]

TICKERS = get_args(Ticker)
SIGNALS = get_args(Signal)


class SentimentQuery(BaseModel):
    """Skill input."""
    ticker: Ticker = Field(description="The crypto asset to get sentiment for")


class SentimentResult(BaseModel):
    """
    Sentiment verdict returned by the upstream API.
    timestamp is only sent by some deployments, so it stays optional.
    """
    ticker: str
    signal: Signal
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str
    timestamp: Optional[str] = None
