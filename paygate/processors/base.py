from abc import ABC, abstractmethod
from typing import Mapping

from paygate.models.outcome import Outcome
from paygate.models.payment import ProcessorKind


class AbstractProcessor(ABC):
    kind: ProcessorKind
    name: str

    @abstractmethod
    async def process_payment(
        self, amount: float, currency: str, details: Mapping[str, str]
    ) -> Outcome:
        """
        Attempt the payment described by amount, currency and details.
        Never raises for payment failures: they are encoded in the Outcome.
        details is read-only for the duration of the call.
        """

    @property
    def display_name(self) -> str:
        return self.name
