"""
SignalGate Client
=================
Async client for the SignalGate sentiment API.

Handles the x402 flow transparently:
1. GET {endpoint}?ticker=BTC
2. 402 -> build X-Payment from the body and retry exactly once
3. anything else non-2xx -> UpstreamError

Usage:
    from signalgate import SignalGateClient, ClientConfig

    client = SignalGateClient(ClientConfig(endpoint="http://localhost:8402/api/sentiment-x402"))
    result = await client.get_sentiment("BTC")
    print(result.signal, result.confidence)
"""

import asyncio
import logging

import httpx
from pydantic import ValidationError

from .config import ClientConfig
from .errors import (
    ParseError,
    PaymentRejectedError,
    PaymentRequiredError,
    RequestError,
    RequestTimeoutError,
    UpstreamError,
)
from .models import TICKERS, SentimentResult
from .payment import PAYMENT_HEADER, PaymentDetails, PaymentToken

logger = logging.getLogger("SignalGate")


class SignalGateClient:
    """
    Holds only configuration; every call opens its own HTTP connection pool,
    so one instance can serve concurrent calls from the agent.
    """

    def __init__(self, config: ClientConfig = None, transport: httpx.AsyncBaseTransport = None):
        self.config = config or ClientConfig.from_env()
        # Injected by tests / mock gateway (httpx.MockTransport, httpx.ASGITransport)
        self._transport = transport

    async def get_sentiment(self, ticker: str) -> SentimentResult:
        if ticker not in TICKERS:
            raise ValueError(f"Unsupported ticker {ticker!r}. Expected one of {', '.join(TICKERS)}")

        params = {"ticker": ticker}
        async with httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout) as http:
            logger.info(f"🔄 Requesting sentiment for {ticker} from {self.config.endpoint}")
            response = await self._get(http, params, leg="initial")

            if response.status_code == 402:
                return await self._pay_and_retry(http, params, response)

            if not response.is_success:
                logger.error(f"❌ SignalGate API error: {response.status_code} {response.reason_phrase}")
                raise UpstreamError(response.status_code, response.reason_phrase)

            return self._parse_result(response)

    # --- INTERNAL MECHANICS ---

    async def _get(self, http, params, headers=None, leg="initial"):
        """One bounded GET. The wall-clock limit covers connect, send and body read."""
        try:
            return await asyncio.wait_for(
                http.get(self.config.endpoint, params=params, headers=headers),
                timeout=self.config.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.error(f"⏱️  {leg} request timed out after {self.config.timeout}s")
            raise RequestTimeoutError(self.config.timeout, leg) from None
        except httpx.HTTPError as e:
            logger.error(f"❌ {leg} request failed: {e}")
            raise RequestError(f"{leg} request failed: {e}") from e

    async def _pay_and_retry(self, http, params, response):
        body = self._parse_json(response)

        if not self.config.auto_pay:
            logger.warning("💰 Payment Required (402) and auto-pay is off")
            raise PaymentRequiredError(body)

        details = PaymentDetails.from_body(body)
        token = PaymentToken.from_details(
            details,
            default_amount=self.config.default_amount,
            default_currency=self.config.default_currency,
            default_network=self.config.default_network,
        )
        header = token.encode()
        logger.info(
            f"💰 Payment Required (402): {token.amount} {token.currency} on {token.network} "
            f"to {str(token.payTo)[:10]}..."
        )

        headers = {PAYMENT_HEADER: header, "Content-Type": "application/json"}
        logger.info(f"🔁 Retrying with {PAYMENT_HEADER}: {header[:12]}...")
        paid = await self._get(http, params, headers=headers, leg="payment retry")

        if not paid.is_success:
            logger.warning(f"🛑 Payment failed or rejected: {paid.status_code}")
            raise PaymentRejectedError(paid.status_code, paid.text)

        return self._parse_result(paid)

    @staticmethod
    def _parse_json(response):
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Malformed JSON body (status {response.status_code}): {e}") from e

    def _parse_result(self, response):
        data = self._parse_json(response)
        try:
            result = SentimentResult.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Unexpected sentiment payload: {e}") from e
        logger.info(f"✅ {result.ticker}: {result.signal} ({result.confidence:.2f})")
        return result
