"""
Unit file applicability.

Reference extraction only runs on unit files; this module decides which
files qualify, by filename suffix.
"""

from pathlib import PurePath
from typing import Union

UNIT_FILE_EXTENSIONS: tuple[str, ...] = (
    "unit",
    "service",
    "socket",
    "device",
    "mount",
    "automount",
    "swap",
    "target",
    "path",
    "timer",
    "snapshot",
    "scope",
    "slice",
    "time",
)

_EXTENSION_SET = frozenset(UNIT_FILE_EXTENSIONS)


def is_unit_file(path: Union[str, PurePath]) -> bool:
    """Check whether a filename ends in a unit file suffix.

    Only the final suffix counts and matching is case-sensitive.

    Example:
        >>> is_unit_file("/etc/systemd/system/sshd.service")
        True
        >>> is_unit_file("sshd.service.bak")
        False
        >>> is_unit_file("README.SERVICE")
        False
    """
    suffix = PurePath(path).suffix
    return bool(suffix) and suffix[1:] in _EXTENSION_SET
