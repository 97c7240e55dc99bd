from __future__ import annotations

import logging
import sys

import httpx

import aretry

logger: logging.Logger = logging.getLogger(__name__)

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


def check_strategies() -> None:
    logger.info("Checking strategies...")
    assert aretry.max_retries(2, aretry.constant(50)).take(5) == [50, 50]
    assert list(aretry.max_delay(100, aretry.multiplicative(10, 2))) == [10, 20, 40, 80]
    assert list(aretry.max_duration(250, aretry.constant(100))) == [100, 100, 100]


def check_run() -> None:
    logger.info("Checking run...")
    strategy = aretry.max_retries(3, aretry.randomize(0.2, aretry.multiplicative(200, 2)))

    def fetch() -> httpx.Response:
        response = httpx.get(f"{HTTPBIN_URL}/get", timeout=10.0)
        response.raise_for_status()
        return response

    try:
        response = aretry.run(strategy, fetch)
    except httpx.TransportError as exc:
        logger.warning(
            f"⚠️ Skipping run check: {HTTPBIN_URL} is unreachable "
            f"({exc.__class__.__name__}: {exc}). Check the network connection."
        )
        return
    assert response.status_code == 200


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_strategies()
        check_run()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
