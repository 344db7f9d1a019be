"""Component types and their one-letter codes."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import Analyzer, Downloader, Module, Pipeline


class ModuleType(str, Enum):
    """The kinds of crawler component."""

    DOWNLOADER = "downloader"
    ANALYZER = "analyzer"
    PIPELINE = "pipeline"


_TYPE_LETTERS = {
    ModuleType.DOWNLOADER: "D",
    ModuleType.ANALYZER: "A",
    ModuleType.PIPELINE: "P",
}

_LETTER_TYPES = {letter: module_type for module_type, letter in _TYPE_LETTERS.items()}

_TYPE_CLASSES = {
    ModuleType.DOWNLOADER: Downloader,
    ModuleType.ANALYZER: Analyzer,
    ModuleType.PIPELINE: Pipeline,
}


def _coerce(module_type: object) -> Optional[ModuleType]:
    try:
        return ModuleType(module_type)
    except ValueError:
        return None


def check_type(module_type: ModuleType | str, module: Optional[Module]) -> bool:
    """Whether a component instance is of the given type."""
    mtype = _coerce(module_type)
    if mtype is None or module is None:
        return False
    return isinstance(module, _TYPE_CLASSES[mtype])


def legal_type(module_type: ModuleType | str) -> bool:
    """Whether the given component type is one of the known types."""
    return _coerce(module_type) is not None


def get_type(mid: str) -> Optional[ModuleType]:
    """Return the type encoded in a component ID, or None if the ID is illegal."""
    from .mid import legal_mid

    if not legal_mid(mid):
        return None
    return _LETTER_TYPES.get(mid[0])


def get_letter(module_type: ModuleType | str) -> Optional[str]:
    """Return the letter code of a type by searching the letter table."""
    mtype = _coerce(module_type)
    return next(
        (letter for letter, known in _LETTER_TYPES.items() if known is mtype),
        None,
    )


def type_to_letter(module_type: ModuleType | str) -> Optional[str]:
    """Return the letter code of a type, or None if the type is illegal."""
    match _coerce(module_type):
        case ModuleType.DOWNLOADER:
            return "D"
        case ModuleType.ANALYZER:
            return "A"
        case ModuleType.PIPELINE:
            return "P"
        case _:
            return None


def letter_to_type(letter: str) -> Optional[ModuleType]:
    """Return the type for a letter code, or None if the letter is illegal."""
    match letter:
        case "D":
            return ModuleType.DOWNLOADER
        case "A":
            return ModuleType.ANALYZER
        case "P":
            return ModuleType.PIPELINE
        case _:
            return None