"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import CreationEffectsRepositoryPort, TemplateConfigRepositoryPort
from .services import (
    FileSystemPort,
    LoggerPort,
    SolutionCommandError,
    SolutionCommandPort,
)

__all__ = [
    "CreationEffectsRepositoryPort",
    "FileSystemPort",
    "LoggerPort",
    "SolutionCommandError",
    "SolutionCommandPort",
    "TemplateConfigRepositoryPort",
]
