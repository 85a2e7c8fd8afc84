"""
Mock SignalGate Gateway
=======================
Local stand-in for the x402-protected sentiment endpoint, for development
and tests. It does not settle anything on-chain: a payment is "valid" when
the X-Payment header echoes an unused nonce and the advertised price terms.

Usage:
    python -m signalgate.mock_gateway            # serves on :8402
    SIGNALGATE_URL=http://localhost:8402/api/sentiment-x402 signalgate BTC
"""

import os
import logging
import secrets
from datetime import datetime, timezone

from fastapi import FastAPI, Header, Query
from fastapi.responses import JSONResponse

from .errors import ParseError
from .models import TICKERS
from .payment import PaymentToken

logger = logging.getLogger("MockGateway")

DEFAULT_PAY_TO = "0x000000000000000000000000000000000000dEaD"

# Canned verdicts; the mock has no model behind it.
CANNED_SENTIMENT = {
    "BTC": ("bullish", 0.82, "Strong bullish momentum and positive funding rates."),
    "ETH": ("neutral", 0.55, "Range-bound price action with balanced flows."),
    "SOL": ("bearish", 0.67, "Declining DEX volume and rising exchange inflows."),
}


def create_app(
    pay_to=DEFAULT_PAY_TO,
    amount="0.05",
    currency="USDC",
    network="base",
    include_terms=True,
):
    """
    include_terms=False makes the 402 body carry only payTo and nonce,
    like deployments that expect the client to know the price.
    """
    app = FastAPI(title="SignalGate Mock Gateway (x402)")
    app.state.issued_nonces = set()
    app.state.spent_nonces = set()
    terms = {"payTo": pay_to, "amount": amount, "currency": currency, "network": network}

    def payment_required():
        nonce = secrets.token_hex(16)
        app.state.issued_nonces.add(nonce)
        body = dict(terms, nonce=nonce) if include_terms else {"payTo": pay_to, "nonce": nonce}
        logger.info(f"💰 402 issued, nonce {nonce[:8]}...")
        return JSONResponse(status_code=402, content=body)

    def verify(header_value):
        try:
            token = PaymentToken.decode(header_value)
        except ParseError as e:
            return str(e)

        if not isinstance(token.nonce, str) or token.nonce not in app.state.issued_nonces:
            return "Unknown nonce"
        if token.nonce in app.state.spent_nonces:
            return "Nonce already spent"
        for key, expected in terms.items():
            if str(getattr(token, key)) != str(expected):
                return f"{key} mismatch: expected {expected}, got {getattr(token, key)}"

        app.state.spent_nonces.add(token.nonce)
        return None

    @app.get("/api/sentiment-x402")
    async def sentiment(
        ticker: str = Query(...),
        x_payment: str = Header(None, alias="X-Payment"),
    ):
        ticker = ticker.upper()
        if ticker not in TICKERS:
            return JSONResponse(status_code=400, content={"error": f"Unsupported ticker: {ticker}"})

        if not x_payment:
            return payment_required()

        error = verify(x_payment)
        if error:
            logger.warning(f"🛑 Payment rejected: {error}")
            return JSONResponse(status_code=403, content={"error": error})

        signal, confidence, reasoning = CANNED_SENTIMENT[ticker]
        return {
            "ticker": ticker,
            "signal": signal,
            "confidence": confidence,
            "reasoning": reasoning,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/v1/x402/info")
    async def x402_info():
        """Returns gateway x402 configuration for agent/client discovery."""
        return {
            "x402_enabled": True,
            "supported_networks": [network],
            "price": f"{amount} {currency}",
            "pay_to": pay_to,
        }

    return app


app = create_app(
    pay_to=os.getenv("X402_PAY_TO_ADDRESS", DEFAULT_PAY_TO),
    amount=os.getenv("SIGNALGATE_PAYMENT_AMOUNT", "0.05"),
    currency=os.getenv("SIGNALGATE_PAYMENT_CURRENCY", "USDC"),
    network=os.getenv("SIGNALGATE_PAYMENT_NETWORK", "base"),
)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)-12s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    port = int(os.getenv("PORT", "8402"))
    print(f"SignalGate mock gateway starting on {port}...")
    uvicorn.run(app, host="0.0.0.0", port=port)
