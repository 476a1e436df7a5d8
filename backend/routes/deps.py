from fastapi import Depends

from config import Settings, get_settings
from services.orchestrator import ChunkOrchestrator


def get_orchestrator(settings: Settings = Depends(get_settings)) -> ChunkOrchestrator:
    """One orchestrator per request, talking to Gemini with the configured settings."""
    return ChunkOrchestrator(settings.generation)
