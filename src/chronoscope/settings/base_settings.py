"""
Base Settings

Dataclass schema support for Chronoscope settings sections.

A settings section is a dataclass deriving from BaseSettings. Fields that
need checking are declared with validated_field(); the rules travel in the
field metadata and are applied by validate(). Loading never fails on bad
values, it is validate() that reports them, so a caller can decide between
refusing the data and falling back to defaults.

Example:
    @dataclass
    class ViewSettings(BaseSettings):
        min_span: float = validated_field(50.0, min_value=1.0)
        base_path: str = validated_field("/Archive", required=True, pattern=r"^/")

        def validate(self) -> ValidationResult:
            result = super().validate()
            ...  # cross-field rules
            return result
"""
from dataclasses import dataclass, asdict, fields, field
from typing import Optional, Dict, Any, List, Callable, Union
from enum import Enum
import re

Number = Union[int, float]
CustomRule = Callable[[Any, str], Optional[str]]

VALIDATOR_KEY = 'validator'


@dataclass
class ValidationResult:
    """
    Outcome of validating a settings section.

    Errors make the section invalid; warnings are informational.
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
        """Fold another result into this one."""
        self.valid = self.valid and other.valid
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def __bool__(self) -> bool:
        return self.valid


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful quantity here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class FieldValidator:
    """
    Rules for one settings field, stored under field metadata['validator'].

    Attributes:
        min_value / max_value: Inclusive numeric bounds
        choices: Allowed values (Enum members compare by value)
        pattern / pattern_message: Regex the string must match from its start
        required: None and blank strings are errors
        allow_none: When False, None is an error even if not required
        custom: (value, field_name) -> error message or None
    """
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None
    choices: Optional[List[Any]] = None
    pattern: Optional[str] = None
    pattern_message: Optional[str] = None
    required: bool = False
    custom: Optional[CustomRule] = None
    allow_none: bool = True

    def validate(self, value: Any, field_name: str) -> ValidationResult:
        result = ValidationResult()

        if value is None:
            if not self.allow_none:
                result.add_error(f"{field_name}: Cannot be None")
            elif self.required:
                result.add_error(f"{field_name}: Required field cannot be empty")
            return result

        if self.required and isinstance(value, str) and not value.strip():
            result.add_error(f"{field_name}: Required field cannot be empty")
            return result

        if _is_number(value):
            self._check_range(value, field_name, result)
        if self.choices is not None:
            self._check_choices(value, field_name, result)
        if self.pattern is not None and isinstance(value, str) and not re.match(self.pattern, value):
            result.add_error(f"{field_name}: {self.pattern_message or 'Value does not match required pattern'}")
        if self.custom is not None:
            message = self.custom(value, field_name)
            if message:
                result.add_error(message)

        return result

    def _check_range(self, value: Number, field_name: str, result: ValidationResult) -> None:
        if self.min_value is not None and value < self.min_value:
            result.add_error(f"{field_name}: Value {value} is below minimum {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            result.add_error(f"{field_name}: Value {value} is above maximum {self.max_value}")

    def _check_choices(self, value: Any, field_name: str, result: ValidationResult) -> None:
        if _plain(value) not in [_plain(choice) for choice in self.choices]:
            result.add_error(f"{field_name}: Value '{value}' not in allowed choices: {self.choices}")


def validated_field(
    default: Any = None,
    *,
    min_value: Optional[Number] = None,
    max_value: Optional[Number] = None,
    choices: Optional[List[Any]] = None,
    pattern: Optional[str] = None,
    pattern_message: Optional[str] = None,
    required: bool = False,
    allow_none: bool = True,
    custom: Optional[CustomRule] = None,
    **kwargs
):
    """dataclasses.field() with a FieldValidator attached to its metadata."""
    metadata = dict(kwargs.pop('metadata', {}))
    metadata[VALIDATOR_KEY] = FieldValidator(
        min_value=min_value,
        max_value=max_value,
        choices=choices,
        pattern=pattern,
        pattern_message=pattern_message,
        required=required,
        custom=custom,
        allow_none=allow_none,
    )
    return field(default=default, metadata=metadata, **kwargs)


def _validator_of(f) -> Optional[FieldValidator]:
    validator = f.metadata.get(VALIDATOR_KEY) if f.metadata else None
    return validator if isinstance(validator, FieldValidator) else None


@dataclass
class BaseSettings:
    """
    Base for settings sections.

    Every field must have a default so that older settings files, which
    lack newer keys, still load.
    """

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseSettings':
        """
        Build from a stored mapping.

        Keys missing from data keep their defaults; keys the schema does not
        know (written by another version) are ignored. Values are taken as
        they are; call validate() to check them.
        """
        known = {f.name for f in fields(cls)}
        values = asdict(cls())
        values.update((key, value) for key, value in data.items() if key in known)
        return cls(**values)

    def validate(self) -> ValidationResult:
        """Apply every field validator. Subclasses add cross-field rules."""
        result = ValidationResult()
        for f in fields(self):
            validator = _validator_of(f)
            if validator is not None:
                result.merge(validator.validate(getattr(self, f.name), f.name))
        return result

    def validate_field(self, field_name: str) -> ValidationResult:
        """
        Validate a single field.

        Raises:
            AttributeError: If the schema has no such field
        """
        for f in fields(self):
            if f.name == field_name:
                validator = _validator_of(f)
                if validator is None:
                    return ValidationResult()
                return validator.validate(getattr(self, field_name), field_name)
        raise AttributeError(f"Field '{field_name}' not found in {self.__class__.__name__}")

    def is_valid(self) -> bool:
        return self.validate().valid
