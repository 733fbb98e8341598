"""Repositories loading template manifests and creation-effects reports."""

from .creation_effects_repository import CreationEffectsRepository
from .template_config_repository import TemplateConfigRepository

__all__ = [
    "CreationEffectsRepository",
    "TemplateConfigRepository",
]
