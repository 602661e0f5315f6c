"""
Timeline Settings

Classes:
    BaseSettings: Base dataclass for settings schemas
    BaseSettingsManager: Base for settings managers
    TimelineSettings: Engine constants schema
    TimelineSettingsManager: Validated, persisted access to TimelineSettings
    InMemoryPreferencesRepository / JsonPreferencesRepository: Preference stores
"""

from .base_settings import (
    BaseSettings,
    BaseSettingsManager,
    FieldValidator,
    ValidationResult,
    validated_field,
)
from .storage import TimelineSettings, TimelineSettingsManager
from .preferences import InMemoryPreferencesRepository, JsonPreferencesRepository

__all__ = [
    'BaseSettings',
    'BaseSettingsManager',
    'FieldValidator',
    'ValidationResult',
    'validated_field',
    'TimelineSettings',
    'TimelineSettingsManager',
    'InMemoryPreferencesRepository',
    'JsonPreferencesRepository',
]
