from fastapi import APIRouter, Request

from paygate.models.payment import ProcessorKind, ProcessorProfile

router = APIRouter()


@router.get("/processors", response_model=list[ProcessorProfile])
async def list_processors(request: Request) -> list[ProcessorProfile]:
    """Configured processors with their required fields and success probability."""
    return request.app.state.registry.profiles()


@router.get("/processors/{kind}", response_model=ProcessorProfile)
async def get_processor(kind: ProcessorKind, request: Request) -> ProcessorProfile:
    return request.app.state.registry.get(kind).profile
