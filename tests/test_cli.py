import json

import httpx

from conftest import ENDPOINT, Recorder, sentiment_body
from signalgate.cli import main


def test_prints_sentiment(capsys):
    recorder = Recorder(
        httpx.Response(402, json={"payTo": "0xabc", "nonce": "n"}),
        httpx.Response(200, json=sentiment_body("ETH", "bearish", 0.3, timestamp="2026-01-01T00:00:00Z")),
    )

    code = main(["eth", "--endpoint", ENDPOINT], transport=recorder.transport)

    out = capsys.readouterr().out
    assert code == 0
    assert "ETH: BEARISH (confidence 0.30)" in out
    assert "as of 2026-01-01T00:00:00Z" in out


def test_json_output(capsys):
    recorder = Recorder(httpx.Response(200, json=sentiment_body("BTC")))

    code = main(["BTC", "--endpoint", ENDPOINT, "--json"], transport=recorder.transport)

    assert code == 0
    assert json.loads(capsys.readouterr().out) == sentiment_body("BTC")


def test_request_error_exits_1(capsys):
    recorder = Recorder(httpx.Response(500))

    code = main(["SOL", "--endpoint", ENDPOINT], transport=recorder.transport)

    assert code == 1
    assert "UpstreamError" in capsys.readouterr().err


def test_no_pay_surfaces_402(capsys):
    recorder = Recorder(httpx.Response(402, json={"payTo": "0xabc", "nonce": "n"}))

    code = main(["BTC", "--endpoint", ENDPOINT, "--no-pay"], transport=recorder.transport)

    assert code == 1
    assert "PaymentRequiredError" in capsys.readouterr().err
    assert len(recorder.requests) == 1


def test_bad_timeout_is_config_error(capsys):
    code = main(["BTC", "--timeout", "0"])

    assert code == 2
    assert "Config error" in capsys.readouterr().err


def test_tools_prints_schema(capsys):
    code = main(["--tools"])

    schema = json.loads(capsys.readouterr().out)
    assert code == 0
    assert schema["function"]["name"] == "signalgate-sentiment"
