"""
PayGate — Sample Run
====================
Sends one payment through each processor kind and logs the results to the
payment log (LOG_FILE_PATH) and stdout:

  1. Wallet transfer   100.00 USD
  2. Card network      200.00 EUR
  3. Bank transfer     300.00 RUB

Run with:
    python -m paygate.sample_run

Declined payments do not change the exit status; only a log file that
cannot be opened does.
"""

import asyncio
import logging
import sys
from contextlib import ExitStack

from paygate.config import Settings, settings
from paygate.engine.dispatcher import PaymentDispatcher
from paygate.models.payment import ProcessorKind
from paygate.processors.registry import ProcessorRegistry
from paygate.services.log_sink import open_log_sink

logger = logging.getLogger(__name__)

SAMPLE_PAYMENTS = [
    (ProcessorKind.WALLET_TRANSFER, 100.0, "USD", {"email": "test.99@mail.ru"}),
    (ProcessorKind.CARD_NETWORK, 200.0, "EUR", {"cardNumber": "1232131231231643"}),
    (
        ProcessorKind.BANK_TRANSFER,
        300.0,
        "RUB",
        {"accountNumber": "923542523", "routingNumber": "1672734534"},
    ),
]


async def run_samples(registry: ProcessorRegistry, dispatcher: PaymentDispatcher) -> None:
    for kind, amount, currency, details in SAMPLE_PAYMENTS:
        await dispatcher.make_payment(registry.get(kind), amount, currency, details)


def main(config: Settings = settings) -> int:
    with ExitStack() as stack:
        try:
            sink = stack.enter_context(
                open_log_sink(config.LOG_FILE_PATH, level=config.LOG_LEVEL)
            )
        except OSError as exc:
            logger.critical(f"Cannot open payment log {config.LOG_FILE_PATH!r}: {exc}")
            return 1

        registry = ProcessorRegistry(sink, config)
        asyncio.run(run_samples(registry, PaymentDispatcher(sink)))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
