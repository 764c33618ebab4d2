import logging
from types import MappingProxyType
from typing import Mapping

from paygate.models.outcome import Outcome
from paygate.models.payment import PaymentRequest
from paygate.processors.base import AbstractProcessor

logger = logging.getLogger(__name__)


class PaymentDispatcher:
    """
    Single entry point for payments.

    Outcome handling:
      details missing or empty -> log, return DETAILS_ABSENT, processor never called
      processor SUCCEEDED      -> log confirmation
      processor FAILED         -> log the failure message

    dispatch() logs and returns the Outcome; make_payment() is the
    fire-and-forget variant and writes exactly the same log lines.
    Payment failures are never raised.
    """

    def __init__(self, sink: logging.Logger):
        self._sink = sink

    async def dispatch(
        self,
        processor: AbstractProcessor,
        amount: float,
        currency: str,
        details: Mapping[str, str] | None,
    ) -> Outcome:
        if not details:
            self._sink.error("Error: Payment details are missing")
            return Outcome.details_absent()

        logger.debug(f"Dispatching {amount} {currency} to {processor.display_name}")
        # Processors get a read-only snapshot of the caller's mapping
        outcome = await processor.process_payment(
            amount, currency, MappingProxyType(dict(details))
        )

        if outcome.succeeded:
            self._sink.info("Payment processed successfully")
        else:
            self._sink.error(f"Error processing payment: {outcome.message}")
        return outcome

    async def make_payment(
        self,
        processor: AbstractProcessor,
        amount: float,
        currency: str,
        details: Mapping[str, str] | None,
    ) -> None:
        await self.dispatch(processor, amount, currency, details)

    async def submit(self, processor: AbstractProcessor, request: PaymentRequest) -> Outcome:
        return await self.dispatch(processor, request.amount, request.currency, request.details)
