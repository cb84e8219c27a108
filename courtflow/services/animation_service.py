"""Animation sequence lifecycle.

Creates sequences from a play's diagram, stores them through the injected
repositories and applies partial updates. Generation itself lives in
courtflow.animation; this layer adds validation, default tracking and
logging.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Optional, Union
from uuid import uuid4

from courtflow.animation import generate_default_animation
from courtflow.config import AnimationConfig, get_config
from courtflow.core.constants import MAX_KEYFRAMES
from courtflow.core.models import (
    AnimationFrame,
    AnimationSequence,
    AnimationSettings,
    Keyframe,
    PlayDiagram,
)
from courtflow.errors import NotFoundError, ValidationError
from courtflow.storage import AnimationRepository, PlayRepository

logger = logging.getLogger(__name__)

DEFAULT_ANIMATION_NAME = "Default Animation"

SettingsInput = Union[AnimationSettings, dict, None]

_PATCH_FIELDS = {"name", "description", "duration", "frames", "keyframes", "settings"}


class AnimationService:
    """
    Create, read, update and delete animation sequences for plays.

    Usage:
        service = AnimationService(animations, plays)
        sequence = await service.create("play-1", "Horns", 10000)
        await service.update(sequence.id, {"name": "Horns Flare"})
    """

    def __init__(
        self,
        animations: AnimationRepository,
        plays: PlayRepository,
        config: Optional[AnimationConfig] = None,
    ) -> None:
        self.animations = animations
        self.plays = plays
        self.config = config or get_config()
        # One lock per play (default flag) and per sequence (updates)
        self._locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    # =========================================================================
    # Creation
    # =========================================================================

    async def create(
        self,
        play_id: str,
        name: str,
        duration: float,
        description: Optional[str] = None,
        settings: SettingsInput = None,
    ) -> AnimationSequence:
        """
        Generate and store a new sequence, making it the play's default.

        Raises:
            ValidationError: duration outside the allowed bounds
            NotFoundError: the play has no stored diagram
        """
        self._validate_duration(duration)
        resolved = self._resolve_settings(settings)
        diagram = await self._load_diagram(play_id)

        generated = generate_default_animation(diagram, duration, fps=resolved.fps)
        sequence = AnimationSequence(
            id=str(uuid4()),
            play_id=play_id,
            name=name,
            description=description,
            duration=float(duration),
            frames=generated.frames,
            keyframes=generated.keyframes,
            settings=resolved,
            movement_paths=generated.movement_paths,
        )

        async with self._locks[f"play:{play_id}"]:
            await self.animations.set_default(sequence)

        logger.info(
            "Created animation %s for play %s (%d frames, %d keyframes)",
            sequence.id, play_id, len(sequence.frames), len(sequence.keyframes),
        )
        return sequence

    async def get_or_create_default(self, play_id: str) -> AnimationSequence:
        """Return the play's default sequence, creating one if it has none."""
        sequence = await self.get(play_id)
        if sequence is not None:
            return sequence
        logger.info("No default animation for play %s, creating one", play_id)
        return await self.create(
            play_id,
            DEFAULT_ANIMATION_NAME,
            self.config.default_duration_ms,
            settings=AnimationSettings(fps=self.config.default_fps),
        )

    # =========================================================================
    # Reads
    # =========================================================================

    async def get(self, play_id: str, animation_id: Optional[str] = None) -> Optional[AnimationSequence]:
        """The play's default sequence, or a specific one. None when absent."""
        if animation_id is None:
            return await self.animations.find_default(play_id)
        sequence = await self.animations.get(animation_id)
        if sequence is None or sequence.play_id != play_id:
            return None
        return sequence

    async def list(self, play_id: str) -> list[AnimationSequence]:
        """All of a play's sequences, default first, then creation order."""
        sequences = await self.animations.list_for_play(play_id)
        return sorted(sequences, key=lambda s: not s.is_default)

    # =========================================================================
    # Updates
    # =========================================================================

    async def update(self, animation_id: str, patch: dict[str, Any]) -> AnimationSequence:
        """
        Apply a partial update.

        Recognized keys: name, description, duration, frames, keyframes,
        settings. Settings are merged; frames and keyframes are replaced
        wholesale. A new duration does not resample the frames; call
        regenerate for that.
        """
        unknown = set(patch) - _PATCH_FIELDS
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}", field=sorted(unknown)[0])

        async with self._locks[animation_id]:
            sequence = await self._require(animation_id)

            if patch.get("name") is not None:
                sequence.name = patch["name"]
            if "description" in patch:
                sequence.description = patch["description"]
            if patch.get("duration") is not None:
                duration = float(patch["duration"])
                self._validate_duration(duration)
                if duration != sequence.duration:
                    logger.warning(
                        "Duration of animation %s changed %.0f -> %.0f ms without regenerating frames",
                        animation_id, sequence.duration, duration,
                    )
                sequence.duration = duration
            if patch.get("frames") is not None:
                sequence.frames = [_as_model(AnimationFrame, f) for f in patch["frames"]]
            if patch.get("keyframes") is not None:
                keyframes = [_as_model(Keyframe, k) for k in patch["keyframes"]]
                if len(keyframes) > MAX_KEYFRAMES:
                    raise ValidationError(
                        f"At most {MAX_KEYFRAMES} keyframes allowed, got {len(keyframes)}",
                        field="keyframes",
                    )
                outside = [k.id for k in keyframes if not 0 <= k.timestamp <= sequence.duration]
                if outside:
                    raise ValidationError(
                        f"Keyframe timestamps must be within 0-{sequence.duration:.0f} ms: {', '.join(outside)}",
                        field="keyframes",
                    )
                sequence.keyframes = sorted(keyframes, key=lambda k: k.timestamp)
            if patch.get("settings") is not None:
                settings = patch["settings"]
                if isinstance(settings, AnimationSettings):
                    settings = settings.to_dict()
                sequence.settings = sequence.settings.merged(settings)

            await self.animations.save(sequence)

        logger.info("Updated animation %s (%s)", animation_id, ", ".join(sorted(patch)) or "no changes")
        return sequence

    async def regenerate(self, animation_id: str) -> AnimationSequence:
        """Re-run generation for the stored duration and fps against the current diagram."""
        async with self._locks[animation_id]:
            sequence = await self._require(animation_id)
            diagram = await self._load_diagram(sequence.play_id)
            generated = generate_default_animation(diagram, sequence.duration, fps=sequence.settings.fps)
            sequence.frames = generated.frames
            sequence.keyframes = generated.keyframes
            sequence.movement_paths = generated.movement_paths
            await self.animations.save(sequence)

        logger.info("Regenerated animation %s (%d frames)", animation_id, len(sequence.frames))
        return sequence

    async def delete(self, animation_id: str) -> None:
        """Hard delete. Raises NotFoundError if the sequence does not exist."""
        async with self._locks[animation_id]:
            if not await self.animations.delete(animation_id):
                raise NotFoundError("Animation", animation_id)
        self._locks.pop(animation_id, None)
        logger.info("Deleted animation %s", animation_id)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _validate_duration(self, duration: float) -> None:
        low, high = self.config.min_duration_ms, self.config.max_duration_ms
        if duration is None or not low <= duration <= high:
            raise ValidationError(
                f"Duration must be between {low} and {high} ms, got {duration}",
                field="duration",
            )

    def _resolve_settings(self, settings: SettingsInput) -> AnimationSettings:
        if isinstance(settings, AnimationSettings):
            resolved = settings
        else:
            resolved = AnimationSettings(fps=self.config.default_fps).merged(settings)
        if resolved.fps <= 0:
            raise ValidationError(f"fps must be positive, got {resolved.fps}", field="fps")
        return resolved

    async def _load_diagram(self, play_id: str) -> PlayDiagram:
        diagram = await self.plays.get_diagram(play_id)
        if diagram is None:
            raise NotFoundError("Play", play_id)
        return diagram

    async def _require(self, animation_id: str) -> AnimationSequence:
        sequence = await self.animations.get(animation_id)
        if sequence is None:
            raise NotFoundError("Animation", animation_id)
        return sequence


def _as_model(model: type, value: Any) -> Any:
    return value if isinstance(value, model) else model.from_dict(value)
