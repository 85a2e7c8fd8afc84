"""
Client configuration. Every value can come from the constructor, the
process environment, or a .env file loaded through python-dotenv.
"""

import os
import logging
import warnings
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("SignalGate")

SIGNALGATE_URL = "https://signalgate-web.vercel.app/api/sentiment-x402"
PAYMENT_AMOUNT = "0.05"
PAYMENT_CURRENCY = "USDC"
PAYMENT_NETWORK = "base"
REQUEST_TIMEOUT = 10.0


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str = SIGNALGATE_URL
    default_amount: str = PAYMENT_AMOUNT
    default_currency: str = PAYMENT_CURRENCY
    default_network: str = PAYMENT_NETWORK
    timeout: float = REQUEST_TIMEOUT
    auto_pay: bool = True

    def __post_init__(self):
        if not self.endpoint:
            raise ValueError("SIGNALGATE_URL is required. Set env var or pass endpoint.")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        # frozen dataclass: go through object.__setattr__
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

        if not self.auto_pay:
            warnings.warn(
                "auto_pay=False surfaces 402 as PaymentRequiredError and is deprecated; "
                "the client pays and retries by default.",
                DeprecationWarning,
                stacklevel=3,
            )

    @classmethod
    def from_env(cls, env_file=None, **overrides):
        """
        Build a config from SIGNALGATE_* environment variables.

        env_file: optional path to a .env file, loaded without overriding
            variables already set in the process.
        overrides: explicit values that win over the environment.
        """
        if env_file:
            env_path = Path(env_file).resolve()
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, override=False)
                logger.debug(f"Loaded config from {env_path}")
            else:
                logger.warning(f"⚠️  Config file not found: {env_path}")

        timeout_raw = os.getenv("SIGNALGATE_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else REQUEST_TIMEOUT
        except ValueError:
            raise ValueError(f"SIGNALGATE_TIMEOUT must be a number, got {timeout_raw!r}")

        values = {
            "endpoint": os.getenv("SIGNALGATE_URL") or SIGNALGATE_URL,
            "default_amount": os.getenv("SIGNALGATE_PAYMENT_AMOUNT") or PAYMENT_AMOUNT,
            "default_currency": os.getenv("SIGNALGATE_PAYMENT_CURRENCY") or PAYMENT_CURRENCY,
            "default_network": os.getenv("SIGNALGATE_PAYMENT_NETWORK") or PAYMENT_NETWORK,
            "timeout": timeout,
            "auto_pay": _env_flag("SIGNALGATE_AUTO_PAY", True),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
