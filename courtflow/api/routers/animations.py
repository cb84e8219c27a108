"""REST API router for play diagrams and animation sequences."""

from typing import NoReturn, Optional

from fastapi import APIRouter, HTTPException, status

from courtflow.api.deps import get_animation_service
from courtflow.api.schemas import (
    AnimationSequenceResponse,
    AnimationSummaryResponse,
    CreateAnimationRequest,
    PlayDiagramSchema,
    UpdateAnimationRequest,
)
from courtflow.core.models import AnimationSequence, PlayDiagram
from courtflow.errors import AnimationError

router = APIRouter(tags=["animations"])


def raise_http(error: AnimationError) -> NoReturn:
    """Re-raise a domain error as the matching HTTP error."""
    raise HTTPException(status_code=error.status_code, detail=error.message) from error


def _sequence_to_response(sequence: AnimationSequence) -> AnimationSequenceResponse:
    return AnimationSequenceResponse.model_validate(sequence.to_dict(include_paths=True))


def _sequence_to_summary(sequence: AnimationSequence) -> AnimationSummaryResponse:
    return AnimationSummaryResponse(
        id=sequence.id,
        play_id=sequence.play_id,
        name=sequence.name,
        description=sequence.description,
        duration=sequence.duration,
        frame_count=len(sequence.frames),
        keyframe_count=len(sequence.keyframes),
        is_default=sequence.is_default,
        created_at=sequence.created_at.isoformat(),
    )


@router.put("/plays/{play_id}/diagram", response_model=PlayDiagramSchema)
async def save_diagram(play_id: str, request: PlayDiagramSchema) -> PlayDiagramSchema:
    """Store the diagram that sequences for this play are generated from."""
    service = get_animation_service()
    try:
        diagram = PlayDiagram.from_dict(request.model_dump(by_alias=True, exclude_none=True))
        await service.plays.save_diagram(play_id, diagram)
    except AnimationError as e:
        raise_http(e)
    return PlayDiagramSchema.model_validate(diagram.to_dict())


@router.post(
    "/plays/{play_id}/animations",
    response_model=AnimationSequenceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_animation(play_id: str, request: CreateAnimationRequest) -> AnimationSequenceResponse:
    """Generate a sequence from the play's diagram. It becomes the play's default."""
    service = get_animation_service()
    settings = request.settings.model_dump(by_alias=True, exclude_none=True) if request.settings else None
    try:
        sequence = await service.create(
            play_id,
            request.name,
            request.duration,
            description=request.description,
            settings=settings,
        )
    except AnimationError as e:
        raise_http(e)
    return _sequence_to_response(sequence)


@router.get("/plays/{play_id}/animations", response_model=list[AnimationSummaryResponse])
async def list_animations(play_id: str) -> list[AnimationSummaryResponse]:
    """List a play's sequences, default first."""
    service = get_animation_service()
    try:
        sequences = await service.list(play_id)
    except AnimationError as e:
        raise_http(e)
    return [_sequence_to_summary(s) for s in sequences]


@router.get("/plays/{play_id}/animation", response_model=AnimationSequenceResponse)
async def get_animation(play_id: str, animation_id: Optional[str] = None) -> AnimationSequenceResponse:
    """Get the play's default sequence, or a specific one by id."""
    service = get_animation_service()
    try:
        sequence = await service.get(play_id, animation_id)
    except AnimationError as e:
        raise_http(e)
    if sequence is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Animation not found",
        )
    return _sequence_to_response(sequence)


@router.patch("/animations/{animation_id}", response_model=AnimationSequenceResponse)
async def update_animation(animation_id: str, request: UpdateAnimationRequest) -> AnimationSequenceResponse:
    """Apply a partial update. A new duration does not resample the frames."""
    service = get_animation_service()
    patch = {}
    for name in request.model_fields_set:
        value = getattr(request, name)
        if name in ("frames", "keyframes") and value is not None:
            value = [item.model_dump(by_alias=True, exclude_none=True) for item in value]
        elif name == "settings" and value is not None:
            value = value.model_dump(by_alias=True, exclude_none=True)
        patch[name] = value
    try:
        sequence = await service.update(animation_id, patch)
    except AnimationError as e:
        raise_http(e)
    return _sequence_to_response(sequence)


@router.post("/animations/{animation_id}/regenerate", response_model=AnimationSequenceResponse)
async def regenerate_animation(animation_id: str) -> AnimationSequenceResponse:
    """Resample frames, keyframes and paths from the play's current diagram."""
    service = get_animation_service()
    try:
        sequence = await service.regenerate(animation_id)
    except AnimationError as e:
        raise_http(e)
    return _sequence_to_response(sequence)


@router.delete("/animations/{animation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animation(animation_id: str) -> None:
    """Delete a sequence."""
    service = get_animation_service()
    try:
        await service.delete(animation_id)
    except AnimationError as e:
        raise_http(e)
