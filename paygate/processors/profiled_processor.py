"""
ProfiledProcessor — the single process_payment() implementation shared by
every processor kind.

Wallet, card and bank processors differ only in their ProcessorProfile
(required fields, success probability, log wording); the algorithm lives
here exactly once:

    attempt log -> simulated latency -> field validation -> outcome draw
"""

import asyncio
import logging
import random
from typing import Mapping

from paygate.models.outcome import Outcome
from paygate.models.payment import ProcessorProfile
from paygate.processors.base import AbstractProcessor

# Simulated latency is 1, 2 or 3 units, chosen uniformly
LATENCY_STEPS = (1, 2, 3)


class _BlankMissing(dict):
    """format_map() namespace that renders absent detail fields as ''."""

    def __missing__(self, key: str) -> str:
        return ""


class ProfiledProcessor(AbstractProcessor):
    """
    Parameterised payment processor.

    Args:
        profile:       Static configuration for this processor kind.
        logger:        Shared payment log sink. Referenced, never owned.
        rng:           Random source for latency and outcome draws. Each
                       processor should get its own instance; pass a seeded
                       random.Random for reproducible runs.
        latency_unit:  Seconds per latency step (0 disables the delay).
    """

    def __init__(
        self,
        profile: ProcessorProfile,
        logger: logging.Logger,
        rng: random.Random | None = None,
        latency_unit: float = 1.0,
    ) -> None:
        self.profile = profile
        self.kind = profile.kind
        self.name = profile.display_name
        self._logger = logger
        self._rng = rng or random.Random()
        self._latency_unit = latency_unit

    def _describe(self, amount: float, currency: str, details: Mapping[str, str]) -> str:
        values = _BlankMissing(details)
        values.update(amount=amount, currency=currency)
        return self.profile.description_template.format_map(values)

    def _first_missing_field(self, details: Mapping[str, str]) -> str | None:
        for field_name in self.profile.required_fields:
            if not details.get(field_name):
                return field_name
        return None

    async def process_payment(
        self, amount: float, currency: str, details: Mapping[str, str]
    ) -> Outcome:
        self._logger.info(self._describe(amount, currency, details))

        # Latency is simulated before validation, so invalid requests pay it too
        await asyncio.sleep(self._rng.choice(LATENCY_STEPS) * self._latency_unit)

        missing = self._first_missing_field(details)
        if missing is not None:
            message = f"Missing {self.profile.label_for(missing)} for {self.name} payment"
            self._logger.error(f"Error: {message}")
            return Outcome.missing_field(missing, message)

        if self._rng.random() < self.profile.success_probability:
            message = (
                f"{self.name} payment successful: {amount:.2f} {currency} "
                f"to {details[self.profile.primary_field]}"
            )
            self._logger.info(message)
            return Outcome.success(message)

        message = f"{self.name} payment failed due to insufficient funds or other reasons"
        self._logger.error(f"Error: {message}")
        return Outcome.declined(message)
