"""Unit tests for PaymentDispatcher.

Processors are replaced by lightweight doubles that return a fixed Outcome
and count their calls, so no latency or randomness is involved.
"""

import logging
import random
from typing import Mapping

import pytest

from paygate.engine.dispatcher import PaymentDispatcher
from paygate.models.outcome import FailureReason, Outcome, OutcomeStatus
from paygate.models.payment import PaymentRequest, ProcessorKind
from paygate.processors.base import AbstractProcessor
from paygate.processors.profiled_processor import ProfiledProcessor
from paygate.processors.profiles import WALLET_TRANSFER

SINK = logging.getLogger("tests.dispatch")


class RecordingProcessor(AbstractProcessor):
    """Test double that returns a predetermined outcome and counts calls."""

    def __init__(self, outcome: Outcome) -> None:
        self.kind = ProcessorKind.WALLET_TRANSFER
        self.name = "Recording"
        self._outcome = outcome
        self.call_count = 0
        self.seen_details: Mapping[str, str] | None = None

    async def process_payment(
        self, amount: float, currency: str, details: Mapping[str, str]
    ) -> Outcome:
        self.call_count += 1
        self.seen_details = details
        return self._outcome


@pytest.fixture
def dispatcher(caplog) -> PaymentDispatcher:
    caplog.set_level(logging.INFO, logger=SINK.name)
    return PaymentDispatcher(SINK)


@pytest.mark.parametrize("details", [None, {}])
async def test_absent_details_never_reach_processor(dispatcher, caplog, details):
    processor = RecordingProcessor(Outcome.success())

    outcome = await dispatcher.dispatch(processor, 100.0, "USD", details)

    assert processor.call_count == 0
    assert outcome.status == OutcomeStatus.FAILED
    assert outcome.reason == FailureReason.DETAILS_ABSENT
    assert caplog.messages == ["Error: Payment details are missing"]


async def test_success_is_logged(dispatcher, caplog):
    processor = RecordingProcessor(Outcome.success("ok"))

    outcome = await dispatcher.dispatch(processor, 100.0, "USD", {"email": "a@b.com"})

    assert outcome.succeeded
    assert processor.call_count == 1
    assert caplog.messages == ["Payment processed successfully"]


async def test_failure_reason_is_logged(dispatcher, caplog):
    processor = RecordingProcessor(
        Outcome.missing_field("email", "Missing email for Wallet Transfer payment")
    )

    outcome = await dispatcher.dispatch(processor, 100.0, "USD", {"note": "x"})

    assert outcome.reason == FailureReason.MISSING_FIELD
    assert caplog.messages == [
        "Error processing payment: Missing email for Wallet Transfer payment"
    ]


async def test_processor_receives_read_only_details(dispatcher):
    processor = RecordingProcessor(Outcome.success())
    details = {"email": "a@b.com"}

    await dispatcher.dispatch(processor, 1.0, "USD", details)

    assert processor.seen_details == details
    with pytest.raises(TypeError):
        processor.seen_details["email"] = "other"  # type: ignore[index]


async def test_make_payment_logs_the_same_lines(caplog):
    """The fire-and-forget variant returns nothing and writes identical log lines."""
    caplog.set_level(logging.INFO, logger=SINK.name)
    dispatcher = PaymentDispatcher(SINK)
    declined = Outcome.declined("Card Network payment failed due to insufficient funds or other reasons")

    returned = await dispatcher.dispatch(RecordingProcessor(declined), 1.0, "EUR", {"cardNumber": "1"})
    logged_by_dispatch = list(caplog.messages)
    caplog.clear()

    result = await dispatcher.make_payment(RecordingProcessor(declined), 1.0, "EUR", {"cardNumber": "1"})

    assert result is None
    assert returned == declined
    assert caplog.messages == logged_by_dispatch


async def test_submit_unpacks_request(dispatcher):
    processor = RecordingProcessor(Outcome.success())
    request = PaymentRequest(amount=42.0, currency="USD", details={"email": "a@b.com"})

    outcome = await dispatcher.submit(processor, request)

    assert outcome.succeeded
    assert processor.call_count == 1


async def test_end_to_end_with_profiled_processor(dispatcher, caplog):
    processor = ProfiledProcessor(WALLET_TRANSFER, SINK, rng=random.Random(1), latency_unit=0.0)

    outcome = await dispatcher.dispatch(processor, 100.0, "USD", {"email": "a@b.com"})

    assert caplog.messages[0] == (
        "Processing payment via Wallet Transfer... Amount: 100.00 USD, Email: a@b.com"
    )
    if outcome.succeeded:
        assert caplog.messages[-1] == "Payment processed successfully"
    else:
        assert caplog.messages[-1].startswith("Error processing payment: ")
