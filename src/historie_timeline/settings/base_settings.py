"""
Base Settings

Foundation for the engine's settings schema and its manager.

Features:
- Dataclass-based schema with type safety
- Field validation through validated_field() metadata
- Backwards-compatible loading (unknown keys ignored, missing keys defaulted)
- Optional persistence through a PreferencesRepository
- Qt signal emission when a setting changes
"""
from dataclasses import dataclass, asdict, fields, field
from typing import Optional, Dict, Any, Type, List, Callable, Union, TYPE_CHECKING
from PyQt6.QtCore import QObject, pyqtSignal

from ..utils.message import Log

if TYPE_CHECKING:
    from ..interfaces import PreferencesRepository


# =============================================================================
# Validation Framework
# =============================================================================

@dataclass
class ValidationResult:
    """
    Result of validating settings.

    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
        warnings: List of warning messages (non-blocking issues)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str):
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult'):
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class FieldValidator:
    """
    Validation rules for a settings field.

    Example:
        min_scale: float = field(default=0.1, metadata={
            'validator': FieldValidator(min_value=0.01, max_value=1.0)
        })
    """
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    # Strict lower bound (value must be greater, not equal)
    greater_than: Optional[Union[int, float]] = None
    choices: Optional[List[Any]] = None
    # Signature: (value, field_name) -> Optional[str] (error message or None)
    custom: Optional[Callable[[Any, str], Optional[str]]] = None
    allow_none: bool = False

    def validate(self, value: Any, field_name: str) -> ValidationResult:
        result = ValidationResult()

        if value is None:
            if not self.allow_none:
                result.add_error(f"{field_name}: Cannot be None")
            return result

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if self.min_value is not None and value < self.min_value:
                result.add_error(f"{field_name}: Value {value} is below minimum {self.min_value}")
            if self.max_value is not None and value > self.max_value:
                result.add_error(f"{field_name}: Value {value} is above maximum {self.max_value}")
            if self.greater_than is not None and value <= self.greater_than:
                result.add_error(f"{field_name}: Value {value} must be greater than {self.greater_than}")

        if self.choices is not None and value not in self.choices:
            result.add_error(f"{field_name}: Value '{value}' not in allowed choices: {self.choices}")

        if self.custom is not None:
            error = self.custom(value, field_name)
            if error:
                result.add_error(error)

        return result


def validated_field(
    default: Any = None,
    *,
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
    greater_than: Optional[Union[int, float]] = None,
    choices: Optional[List[Any]] = None,
    custom: Optional[Callable[[Any, str], Optional[str]]] = None,
    allow_none: bool = False,
    **kwargs
):
    """
    Create a dataclass field with validation metadata.

    Example:
        @dataclass
        class MySettings(BaseSettings):
            zoom_factor: float = validated_field(1.2, greater_than=1.0)
    """
    validator = FieldValidator(
        min_value=min_value,
        max_value=max_value,
        greater_than=greater_than,
        choices=choices,
        custom=custom,
        allow_none=allow_none,
    )

    metadata = kwargs.pop('metadata', {})
    metadata['validator'] = validator

    return field(default=default, metadata=metadata, **kwargs)


@dataclass
class BaseSettings:
    """
    Base class for settings dataclasses.

    Subclasses define every field with a default so stored settings from
    older versions still load.
    """

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseSettings':
        """
        Create settings from dictionary.

        Unknown keys are dropped; missing keys take their defaults.
        """
        valid_keys = {f.name for f in fields(cls)}
        merged = asdict(cls())
        merged.update({k: v for k, v in data.items() if k in valid_keys})
        return cls(**merged)

    def validate(self) -> ValidationResult:
        """
        Validate every field that carries a validator.

        Cross-field rules go in _validate_relations().
        """
        result = ValidationResult()
        for f in fields(self):
            validator = f.metadata.get('validator') if f.metadata else None
            if isinstance(validator, FieldValidator):
                result.merge(validator.validate(getattr(self, f.name), f.name))
        result.merge(self._validate_relations())
        return result

    def _validate_relations(self) -> ValidationResult:
        return ValidationResult()

    def validate_field(self, field_name: str) -> ValidationResult:
        """
        Validate a single field by name.

        Raises:
            AttributeError: If field doesn't exist
        """
        for f in fields(self):
            if f.name == field_name:
                validator = f.metadata.get('validator') if f.metadata else None
                if isinstance(validator, FieldValidator):
                    return validator.validate(getattr(self, field_name), field_name)
                return ValidationResult()

        raise AttributeError(f"Field '{field_name}' not found in {self.__class__.__name__}")

    def is_valid(self) -> bool:
        return self.validate().valid


class BaseSettingsManager(QObject):
    """
    Base class for settings managers.

    Provides:
    - Persistence to an optional PreferencesRepository (in-memory otherwise)
    - Signal emission when settings change
    - Validated writes (invalid values are rejected and reported)

    Subclasses must define NAMESPACE and SETTINGS_CLASS.

    Saves happen immediately: the engine runs without a Qt event loop,
    so there is no debounce timer.
    """

    settings_changed = pyqtSignal(str)  # Setting name that changed
    settings_loaded = pyqtSignal()
    validation_failed = pyqtSignal(object)  # ValidationResult
    settings_save_failed = pyqtSignal(str)  # Error message

    NAMESPACE: str = ""
    SETTINGS_CLASS: Type[BaseSettings] = BaseSettings

    def __init__(self, preferences_repo: Optional['PreferencesRepository'] = None, parent=None):
        super().__init__(parent)

        if not self.NAMESPACE:
            raise ValueError(f"{self.__class__.__name__} must define NAMESPACE")

        self._preferences_repo = preferences_repo
        self._settings: BaseSettings = self.SETTINGS_CLASS()
        self._loaded = False

        self._load_from_storage()

    @property
    def _storage_key(self) -> str:
        return f"{self.NAMESPACE}.settings"

    @property
    def settings(self) -> BaseSettings:
        """The live settings object."""
        return self._settings

    # =========================================================================
    # Generic Access
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self._settings, key, default)

    def set(self, key: str, value: Any) -> ValidationResult:
        """
        Set a setting value with validation.

        The value is stored only if it passes the field's validator and
        the cross-field rules; otherwise the old value is kept and
        validation_failed is emitted.

        Returns:
            ValidationResult - check result.valid to see if it was saved
        """
        if not hasattr(self._settings, key):
            result = ValidationResult()
            result.add_error(f"Unknown setting: {key}")
            return result

        old_value = getattr(self._settings, key)
        setattr(self._settings, key, value)

        result = self._settings.validate_field(key)
        result.merge(self._settings._validate_relations())

        if not result.valid:
            setattr(self._settings, key, old_value)
            Log.warning(f"{self.__class__.__name__}: rejected {key}={value!r}: {'; '.join(result.errors)}")
            self.validation_failed.emit(result)
        elif old_value != value:
            self._save_setting(key)

        return result

    def get_all(self) -> Dict[str, Any]:
        return self._settings.to_dict()

    def reset_to_defaults(self):
        self._settings = self.SETTINGS_CLASS()
        self._do_save()
        self.settings_loaded.emit()

    # =========================================================================
    # Persistence
    # =========================================================================

    def _load_from_storage(self):
        if not self._preferences_repo:
            self._loaded = True
            return

        stored_data = self._preferences_repo.get(self._storage_key, {})
        if stored_data and isinstance(stored_data, dict):
            loaded = self.SETTINGS_CLASS.from_dict(stored_data)
            validation = loaded.validate()
            if validation.valid:
                self._settings = loaded
            else:
                Log.warning(
                    f"{self.__class__.__name__}: stored settings invalid, using defaults: "
                    f"{'; '.join(validation.errors)}"
                )

        self._loaded = True
        self.settings_loaded.emit()

    def _save_setting(self, key: str):
        self._do_save()
        self.settings_changed.emit(key)

    def _do_save(self):
        if not self._preferences_repo:
            return

        try:
            self._preferences_repo.set(self._storage_key, self._settings.to_dict())
        except OSError as e:
            Log.error(f"{self.__class__.__name__}: Failed to save settings: {e}")
            self.settings_save_failed.emit(str(e))

    def is_loaded(self) -> bool:
        return self._loaded

    def validate(self) -> ValidationResult:
        return self._settings.validate()
