from fastapi import APIRouter, Request

from paygate.models.payment import PaymentResponse, PaymentSubmission

router = APIRouter()


@router.post("/payments", response_model=PaymentResponse)
async def create_payment(body: PaymentSubmission, request: Request) -> PaymentResponse:
    """
    Dispatch a payment to the requested processor and report the outcome.

    - Missing or empty details are rejected before any processor runs.
    - A missing required field or a decline is still a 200: the failure is
      described by status, reason and message.
    """
    processor = request.app.state.registry.get(body.processor)
    outcome = await request.app.state.dispatcher.submit(processor, body)
    return PaymentResponse(
        processor=body.processor,
        status=outcome.status.value,
        reason=outcome.reason.value if outcome.reason else None,
        field_name=outcome.field_name,
        message=outcome.message,
    )
