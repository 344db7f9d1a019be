"""Component IDs: a type letter, a serial number and an optional address."""

from __future__ import annotations

import re
from typing import Optional

from .errors import IllegalParameterError
from .maddr import ModuleAddr, legal_ip
from .mtype import ModuleType, letter_to_type, type_to_letter
from .sn import SNGenerator

DEFAULT_SN_GEN = SNGenerator(1, 0)

_MAX_UINT64 = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")


def _legal_uint(text: str) -> bool:
    return bool(_DIGITS.fullmatch(text)) and int(text) <= _MAX_UINT64


def gen_mid(
    module_type: ModuleType | str, sn: int, maddr: Optional[ModuleAddr]
) -> str:
    """Build a component ID such as ``D1`` or ``D1|127.0.0.1:8080``."""
    letter = type_to_letter(module_type)
    if letter is None:
        shown = module_type.value if isinstance(module_type, ModuleType) else module_type
        raise IllegalParameterError(f"illegal module type: {shown}")
    if maddr is None:
        return f"{letter}{sn}"
    return f"{letter}{sn}|{maddr}"


def split_mid(mid: str) -> tuple[str, str, str]:
    """Split a component ID into its letter, serial number and address.

    The address is an empty string when the ID has none. Raises
    IllegalParameterError when the ID is malformed.
    """
    if len(mid) <= 1:
        raise IllegalParameterError("insufficient MID")
    letter = mid[0]
    if letter_to_type(letter) is None:
        raise IllegalParameterError(f"illegal module type letter: {letter}")
    sn_and_addr = mid[1:]
    sn, sep, addr = sn_and_addr.rpartition("|")
    if not sep:
        sn, addr = sn_and_addr, ""
    if not _legal_uint(sn):
        raise IllegalParameterError(f"illegal module SN: {sn}")
    if sep:
        index = addr.rfind(":")
        if index <= 0:
            raise IllegalParameterError(f"illegal module address: {addr}")
        ip, port = addr[:index], addr[index + 1:]
        if not legal_ip(ip):
            raise IllegalParameterError(f"illegal module IP: {ip}")
        if not _legal_uint(port):
            raise IllegalParameterError(f"illegal module port: {port}")
    return letter, sn, addr


def legal_mid(mid: str) -> bool:
    """Whether a component ID is well formed."""
    try:
        split_mid(mid)
    except IllegalParameterError:
        return False
    return True