"""Sentry error monitoring for the command-line tool.

Reads ``SENTRY_DSN``, ``ENVIRONMENT`` and ``SENTRY_TRACES_SAMPLE_RATE`` from
the environment (or a ``.env`` file). Without a DSN every call is a no-op
on Sentry's side.
"""

import os
from typing import Mapping

import sentry_sdk
from dotenv import load_dotenv


def init_sentry() -> bool:
    """Initialize Sentry error monitoring.

    Returns:
        True if Sentry was initialized, False if SENTRY_DSN is not configured.
    """
    load_dotenv()

    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=os.getenv("ENVIRONMENT", "development"),
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0")),
        attach_stacktrace=True,
    )
    sentry_sdk.set_tag("component", "limited-combo-cli")
    return True


def set_enumeration_context(mode: str, size: int, counts: Mapping[str, int]) -> None:
    """Attach the enumeration being run to every later Sentry event."""
    sentry_sdk.set_tag("enumeration.mode", mode)
    sentry_sdk.set_tag("enumeration.size", size)
    sentry_sdk.set_context("enumeration", {
        "mode": mode,
        "size": size,
        "atom_types": len(counts),
        "total_atoms": sum(counts.values()),
    })


def capture_exception(exception: Exception = None):
    """Report an exception (the one being handled if None)."""
    sentry_sdk.capture_exception(exception)
