"""Storage ports and their in-memory and JSON-file adapters."""

from typing import Optional

from courtflow.config import AnimationConfig, get_config
from courtflow.storage.base import AnimationRepository, PlayRepository
from courtflow.storage.json_file import JsonFileAnimationRepository, JsonFilePlayRepository
from courtflow.storage.memory import InMemoryAnimationRepository, InMemoryPlayRepository


def create_repositories(
    config: Optional[AnimationConfig] = None,
) -> tuple[AnimationRepository, PlayRepository]:
    """Build the repositories the config asks for (JSON files when data_dir is set)."""
    config = config or get_config()
    if config.data_dir:
        return JsonFileAnimationRepository(config.data_dir), JsonFilePlayRepository(config.data_dir)
    return InMemoryAnimationRepository(), InMemoryPlayRepository()


__all__ = [
    "AnimationRepository",
    "InMemoryAnimationRepository",
    "InMemoryPlayRepository",
    "JsonFileAnimationRepository",
    "JsonFilePlayRepository",
    "PlayRepository",
    "create_repositories",
]
