"""WebSocket router streaming live playback frames."""

import json
from uuid import UUID

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from courtflow.playback import FrameUpdate, PlaybackSession, get_session_manager

router = APIRouter(tags=["playback-websocket"])


def _state_payload(session: PlaybackSession) -> dict:
    frame = session.transport.current_frame()
    return {
        "sessionId": str(session.session_id),
        "animationId": session.transport.sequence.id,
        "isRunning": session.is_running,
        "playback": session.transport.snapshot(),
        "frame": frame.to_dict() if frame else None,
        "trails": session.trails.to_dict(),
    }


async def _send_error(websocket: WebSocket, message: str, code: str) -> None:
    await websocket.send_json({"type": "error", "message": message, "code": code})


@router.websocket("/ws/playback/{session_id}")
async def playback_websocket(websocket: WebSocket, session_id: str) -> None:
    """
    WebSocket endpoint for a playback session.

    Client messages:
    - play: Start the tick loop (replays from the start when at the end)
    - pause: Pause playback
    - seek: Jump to "timestamp" (ms, clamped)
    - set_speed: Set the "speed" multiplier
    - set_loop: Set "loop" on or off
    - restart: Back to 0, paused
    - previous_keyframe / next_keyframe: Jump between keyframes
    - request_sync: Request full state sync

    Server messages:
    - state_sync: Full state on connect, after commands, or on request
    - frame_update: Sent each tick with playback state, frame and trails
    - playback_complete: Sent when a non-looping timeline reaches its end
    - error: Error message
    """
    await websocket.accept()

    manager = get_session_manager()

    try:
        uuid = UUID(session_id)
    except ValueError:
        await _send_error(websocket, "Invalid session ID format", "INVALID_SESSION_ID")
        await websocket.close()
        return

    session = await manager.get_session(uuid)
    if session is None:
        await _send_error(websocket, "Session not found", "SESSION_NOT_FOUND")
        await websocket.close()
        return

    await websocket.send_json({"type": "state_sync", "payload": _state_payload(session)})

    async def send_frame(update: FrameUpdate) -> None:
        await websocket.send_json({"type": "frame_update", "payload": update.to_dict()})

    async def send_complete(playback: dict) -> None:
        await websocket.send_json({"type": "playback_complete", "payload": playback})

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await _send_error(websocket, "Invalid JSON", "INVALID_JSON")
                continue

            if not isinstance(message, dict):
                await _send_error(websocket, "Messages must be JSON objects", "INVALID_MESSAGE")
                continue

            msg_type = message.get("type")

            if msg_type == "play":
                await manager.start(uuid, on_tick=send_frame, on_complete=send_complete)
                continue

            if msg_type == "pause":
                await manager.pause(uuid)
            elif msg_type == "seek":
                timestamp = message.get("timestamp")
                if not isinstance(timestamp, (int, float)):
                    await _send_error(websocket, "seek requires a numeric timestamp", "INVALID_ARGUMENT")
                    continue
                await manager.seek(uuid, float(timestamp))
            elif msg_type == "set_speed":
                speed = message.get("speed")
                if not isinstance(speed, (int, float)):
                    await _send_error(websocket, "set_speed requires a numeric speed", "INVALID_ARGUMENT")
                    continue
                await manager.set_speed(uuid, float(speed))
            elif msg_type == "set_loop":
                await manager.set_loop(uuid, bool(message.get("loop")))
            elif msg_type == "restart":
                await manager.restart(uuid)
            elif msg_type == "previous_keyframe":
                await manager.previous_keyframe(uuid)
            elif msg_type == "next_keyframe":
                await manager.next_keyframe(uuid)
            elif msg_type != "request_sync":
                await _send_error(websocket, f"Unknown message type: {msg_type}", "UNKNOWN_MESSAGE")
                continue

            await websocket.send_json({"type": "state_sync", "payload": _state_payload(session)})

    except WebSocketDisconnect:
        # Stop ticking; the session itself stays until deleted
        await manager.stop(uuid)
