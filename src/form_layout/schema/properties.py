"""Component kinds and their type-specific property payloads.

Every field kind maps to exactly one frozen properties class. The layout
engine never looks inside these payloads; they are validated here, when a
field is created or loaded, so renderers can trust them.
"""

from __future__ import annotations

__all__ = [
    "BUTTON_TYPES",
    "ButtonProperties",
    "ChoiceProperties",
    "ComponentType",
    "DateProperties",
    "FieldProperties",
    "FileUploadProperties",
    "HeadingProperties",
    "NumberProperties",
    "SectionProperties",
    "SignatureProperties",
    "TextProperties",
    "properties_class_for",
]

from dataclasses import dataclass, field
from enum import Enum


class ComponentType(str, Enum):
    """Field kinds that can be placed on a canvas."""

    TEXT_INPUT = "text_input"
    EMAIL_INPUT = "email_input"
    PASSWORD_INPUT = "password_input"
    NUMBER_INPUT = "number_input"
    TEXTAREA = "textarea"
    RICH_TEXT = "rich_text"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    CHECKBOX = "checkbox"
    RADIO_GROUP = "radio_group"
    DATE_PICKER = "date_picker"
    FILE_UPLOAD = "file_upload"
    SIGNATURE = "signature"
    SECTION_DIVIDER = "section_divider"
    HEADING = "heading"
    BUTTON = "button"


BUTTON_TYPES = ("primary", "secondary", "success", "danger")


def _check_str(owner: object, *names: str) -> None:
    for name in names:
        value = getattr(owner, name)
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string, got {value!r}")


def _check_bool(owner: object, *names: str) -> None:
    for name in names:
        value = getattr(owner, name)
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be true or false, got {value!r}")


def _check_number(owner: object, *names: str, integer: bool = False) -> None:
    """Optional numbers: None or an int/float, never a bool."""
    kinds = int if integer else (int, float)
    for name in names:
        value = getattr(owner, name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, kinds):
            expected = "an integer" if integer else "a number"
            raise ValueError(f"{name} must be {expected}, got {value!r}")


@dataclass(frozen=True)
class TextProperties:
    """Free-text inputs (single line, multi line, rich text)."""

    placeholder: str = ""
    required: bool = False
    help_text: str = ""
    min_length: int | None = None
    max_length: int | None = None
    pattern: str = ""

    def __post_init__(self) -> None:
        _check_str(self, "placeholder", "help_text", "pattern")
        _check_bool(self, "required")
        _check_number(self, "min_length", "max_length", integer=True)
        if self.min_length is not None and self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.max_length < self.min_length
        ):
            raise ValueError(
                f"max_length ({self.max_length}) is smaller than "
                f"min_length ({self.min_length})"
            )


@dataclass(frozen=True)
class NumberProperties:
    placeholder: str = ""
    required: bool = False
    help_text: str = ""
    minimum: float | None = None
    maximum: float | None = None
    step: float = 1

    def __post_init__(self) -> None:
        _check_str(self, "placeholder", "help_text")
        _check_bool(self, "required")
        _check_number(self, "minimum", "maximum", "step")
        if self.step is None or self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.maximum < self.minimum
        ):
            raise ValueError(
                f"maximum ({self.maximum}) is smaller than minimum ({self.minimum})"
            )


@dataclass(frozen=True)
class ChoiceProperties:
    """Selects, multi-selects, checkbox groups and radio groups."""

    required: bool = False
    help_text: str = ""
    options: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_str(self, "help_text")
        _check_bool(self, "required")
        # Lists come straight from JSON; stored as a tuple
        if not isinstance(self.options, (list, tuple)):
            raise ValueError(f"options must be a list of strings, got {self.options!r}")
        options = tuple(self.options)
        bad = [o for o in options if not isinstance(o, str)]
        if bad:
            raise ValueError(f"options must be strings, got {bad!r}")
        if len(set(options)) != len(options):
            raise ValueError(f"Duplicate options in {list(options)}")
        object.__setattr__(self, "options", options)


@dataclass(frozen=True)
class DateProperties:
    required: bool = False
    help_text: str = ""

    def __post_init__(self) -> None:
        _check_str(self, "help_text")
        _check_bool(self, "required")


@dataclass(frozen=True)
class FileUploadProperties:
    required: bool = False
    help_text: str = ""
    accepted_file_types: str = ""
    multiple: bool = False

    def __post_init__(self) -> None:
        _check_str(self, "help_text", "accepted_file_types")
        _check_bool(self, "required", "multiple")


@dataclass(frozen=True)
class SignatureProperties:
    required: bool = False
    help_text: str = ""

    def __post_init__(self) -> None:
        _check_str(self, "help_text")
        _check_bool(self, "required")


@dataclass(frozen=True)
class SectionProperties:
    description: str = ""

    def __post_init__(self) -> None:
        _check_str(self, "description")


@dataclass(frozen=True)
class HeadingProperties:
    level: int = 2

    def __post_init__(self) -> None:
        _check_number(self, "level", integer=True)
        if self.level is None or not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass(frozen=True)
class ButtonProperties:
    button_type: str = "primary"
    text: str = "Submit"

    def __post_init__(self) -> None:
        _check_str(self, "text")
        if self.button_type not in BUTTON_TYPES:
            raise ValueError(
                f"Unknown button type '{self.button_type}' "
                f"(expected one of {', '.join(BUTTON_TYPES)})"
            )


FieldProperties = (
    TextProperties
    | NumberProperties
    | ChoiceProperties
    | DateProperties
    | FileUploadProperties
    | SignatureProperties
    | SectionProperties
    | HeadingProperties
    | ButtonProperties
)

_PROPERTIES_BY_TYPE: dict[ComponentType, type] = {
    ComponentType.TEXT_INPUT: TextProperties,
    ComponentType.EMAIL_INPUT: TextProperties,
    ComponentType.PASSWORD_INPUT: TextProperties,
    ComponentType.TEXTAREA: TextProperties,
    ComponentType.RICH_TEXT: TextProperties,
    ComponentType.NUMBER_INPUT: NumberProperties,
    ComponentType.SELECT: ChoiceProperties,
    ComponentType.MULTI_SELECT: ChoiceProperties,
    ComponentType.CHECKBOX: ChoiceProperties,
    ComponentType.RADIO_GROUP: ChoiceProperties,
    ComponentType.DATE_PICKER: DateProperties,
    ComponentType.FILE_UPLOAD: FileUploadProperties,
    ComponentType.SIGNATURE: SignatureProperties,
    ComponentType.SECTION_DIVIDER: SectionProperties,
    ComponentType.HEADING: HeadingProperties,
    ComponentType.BUTTON: ButtonProperties,
}


def properties_class_for(component_type: ComponentType | str) -> type:
    """Return the properties class used by a component kind."""
    return _PROPERTIES_BY_TYPE[ComponentType(component_type)]
