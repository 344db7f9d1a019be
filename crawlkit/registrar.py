"""A thread-safe registry of crawler component instances."""

from __future__ import annotations

import threading
from typing import Optional

from .base import Module
from .errors import IllegalParameterError, NotFoundModuleInstanceError
from .mid import split_mid
from .mtype import ModuleType, check_type, legal_type, letter_to_type
from .score import set_score


class Registrar:
    """Keeps component instances grouped by type and picks the least loaded one."""

    def __init__(self) -> None:
        self._modules: dict[ModuleType, dict[str, Module]] = {}
        self._lock = threading.Lock()

    def register(self, module: Optional[Module]) -> bool:
        """Register a component; return False if its ID is already registered.

        Raises IllegalParameterError when the component is missing, its ID is
        malformed, or its ID does not match its type.
        """
        if module is None:
            raise IllegalParameterError("nil module instance")
        mid = module.id
        letter, _, _ = split_mid(mid)
        module_type = letter_to_type(letter)
        if module_type is None or not check_type(module_type, module):
            shown = module_type.value if module_type is not None else ""
            raise IllegalParameterError(f"incorrect module type: {shown}")
        with self._lock:
            modules = self._modules.setdefault(module_type, {})
            if mid in modules:
                return False
            modules[mid] = module
            return True

    def unregister(self, mid: str) -> bool:
        """Remove a component by ID; return whether it was registered.

        Raises IllegalParameterError when the ID is malformed.
        """
        letter, _, _ = split_mid(mid)
        module_type = letter_to_type(letter)
        with self._lock:
            modules = self._modules.get(module_type)
            if modules is None or mid not in modules:
                return False
            del modules[mid]
            return True

    def get(self, module_type: ModuleType | str) -> Module:
        """Return the component of a type with the lowest load score."""
        modules = self.get_all_by_type(module_type)
        min_score = 0
        selected: Optional[Module] = None
        for module in modules.values():
            set_score(module)
            score = module.score
            if min_score == 0 or score < min_score:
                selected = module
                min_score = score
        assert selected is not None
        return selected

    def get_all_by_type(self, module_type: ModuleType | str) -> dict[str, Module]:
        """Return a copy of the components of one type, keyed by ID.

        Raises IllegalParameterError for an unknown type and
        NotFoundModuleInstanceError when none is registered.
        """
        if not legal_type(module_type):
            raise IllegalParameterError(f"illegal module type: {module_type}")
        mtype = ModuleType(module_type)
        with self._lock:
            modules = self._modules.get(mtype)
            if not modules:
                raise NotFoundModuleInstanceError()
            return dict(modules)

    def get_all(self) -> dict[str, Module]:
        """Return a copy of every registered component, keyed by ID."""
        with self._lock:
            return {
                mid: module
                for modules in self._modules.values()
                for mid, module in modules.items()
            }

    def clear(self) -> None:
        """Forget every registered component."""
        with self._lock:
            self._modules = {}