"""
Pytest configuration and shared fixtures.
"""
import httpx
import pytest

from signalgate import ClientConfig, SignalGateClient

ENDPOINT = "http://signalgate.test/api/sentiment-x402"

ENV_VARS = [
    "SIGNALGATE_URL",
    "SIGNALGATE_PAYMENT_AMOUNT",
    "SIGNALGATE_PAYMENT_CURRENCY",
    "SIGNALGATE_PAYMENT_NETWORK",
    "SIGNALGATE_TIMEOUT",
    "SIGNALGATE_AUTO_PAY",
]


def sentiment_body(ticker="BTC", signal="bullish", confidence=0.82, **extra):
    body = {
        "ticker": ticker,
        "signal": signal,
        "confidence": confidence,
        "reasoning": f"{ticker} test reasoning",
    }
    body.update(extra)
    return body


class Recorder:
    """
    Scripted upstream. Each entry is an httpx.Response or a callable taking
    the request (sync or async). Every request is kept for assertions.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request #{len(self.requests)}: {request.url}")
        nxt = self.responses.pop(0)
        return nxt(request) if callable(nxt) else nxt

    @property
    def transport(self):
        return httpx.MockTransport(self)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown removes anything load_dotenv adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def config():
    return ClientConfig(endpoint=ENDPOINT)


@pytest.fixture
def make_client(config):
    def _make(*responses, cfg=None):
        recorder = Recorder(*responses)
        return SignalGateClient(cfg or config, transport=recorder.transport), recorder
    return _make
