"""REST API router for playback sessions."""

from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from courtflow.api.deps import get_animation_service
from courtflow.api.routers.animations import raise_http
from courtflow.api.schemas import (
    CreatePlaybackSessionRequest,
    PlaybackCommandRequest,
    PlaybackSessionResponse,
)
from courtflow.errors import AnimationError
from courtflow.playback import AnimationPlayback, PlaybackSession, get_session_manager

router = APIRouter(prefix="/playback", tags=["playback"])

PlaybackCommand = Literal[
    "play", "pause", "restart", "seek", "speed", "loop", "previous-keyframe", "next-keyframe",
]


def _session_to_response(session: PlaybackSession) -> PlaybackSessionResponse:
    frame = session.transport.current_frame()
    return PlaybackSessionResponse.model_validate({
        "sessionId": str(session.session_id),
        "animationId": session.transport.sequence.id,
        "isRunning": session.is_running,
        "playback": session.transport.snapshot(),
        "frame": frame.to_dict() if frame else None,
    })


def _parse_session_id(session_id: str) -> UUID:
    try:
        return UUID(session_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid session ID format",
        )


async def _require_session(uuid: UUID) -> PlaybackSession:
    session = await get_session_manager().get_session(uuid)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )
    return session


@router.post("/sessions", response_model=PlaybackSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(request: CreatePlaybackSessionRequest) -> PlaybackSessionResponse:
    """Open a playback session over a stored sequence."""
    service = get_animation_service()
    try:
        sequence = await service.get(request.play_id, request.animation_id)
    except AnimationError as e:
        raise_http(e)
    if sequence is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Animation not found",
        )

    playback = AnimationPlayback(
        loop=sequence.settings.loop if request.loop is None else request.loop,
        playback_speed=request.playback_speed or 1.0,
    )
    manager = get_session_manager()
    session = await manager.create_session(
        sequence,
        playback=playback,
        tick_hz=service.config.tick_hz,
        keyframe_snap_ms=service.config.keyframe_snap_ms,
    )
    if request.auto_play:
        await manager.start(session.session_id)
    return _session_to_response(session)


@router.get("/sessions", response_model=list[str])
async def list_sessions() -> list[str]:
    """List all active playback session IDs."""
    sessions = await get_session_manager().list_sessions()
    return [str(s) for s in sessions]


@router.get("/sessions/{session_id}", response_model=PlaybackSessionResponse)
async def get_session(session_id: str) -> PlaybackSessionResponse:
    """Current playback state and resolved frame."""
    session = await _require_session(_parse_session_id(session_id))
    return _session_to_response(session)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str) -> None:
    """Stop and delete a playback session."""
    deleted = await get_session_manager().delete_session(_parse_session_id(session_id))
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )


@router.post("/sessions/{session_id}/{command}", response_model=PlaybackSessionResponse)
async def run_command(
    session_id: str,
    command: PlaybackCommand,
    request: Optional[PlaybackCommandRequest] = None,
) -> PlaybackSessionResponse:
    """Apply a transport command and return the resulting state."""
    uuid = _parse_session_id(session_id)
    session = await _require_session(uuid)
    manager = get_session_manager()
    args = request or PlaybackCommandRequest()

    if command == "play":
        await manager.start(uuid)
    elif command == "pause":
        await manager.pause(uuid)
    elif command == "restart":
        await manager.restart(uuid)
    elif command == "seek":
        if args.timestamp is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="seek requires timestamp")
        await manager.seek(uuid, args.timestamp)
    elif command == "speed":
        if args.speed is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="speed requires speed")
        await manager.set_speed(uuid, args.speed)
    elif command == "loop":
        if args.loop is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="loop requires loop")
        await manager.set_loop(uuid, args.loop)
    elif command == "previous-keyframe":
        await manager.previous_keyframe(uuid)
    elif command == "next-keyframe":
        await manager.next_keyframe(uuid)

    return _session_to_response(session)
