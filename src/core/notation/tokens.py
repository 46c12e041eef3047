"""
Whorl token flags

A whorl token may carry flag letters anywhere in it:

    s: sterile whorl
    c: connate whorl
    v: connation varies

strip_whorl_flags() removes them and reports which were present, so the
number parser never sees a flag letter.
"""

from dataclasses import dataclass
from typing import Final

STERILE_FLAG: Final[str] = "s"
CONNATE_FLAG: Final[str] = "c"
VARIATION_FLAG: Final[str] = "v"

_FLAG_LETTERS: Final[frozenset[str]] = frozenset(
    (STERILE_FLAG, CONNATE_FLAG, VARIATION_FLAG)
)


@dataclass(frozen=True)
class WhorlFlags:
    """Flags found in a whorl token"""

    sterile: bool = False
    connation: bool = False
    connation_variation: bool = False


def strip_whorl_flags(token: str) -> tuple[str, WhorlFlags]:
    """
    Split a whorl token into its numeric text and its flags.

    Examples:
        >>> strip_whorl_flags("5s")
        ('5', WhorlFlags(sterile=True, connation=False, connation_variation=False))
        >>> strip_whorl_flags("2-4cv")[0]
        '2-4'
    """
    cleaned = "".join(char for char in token if char not in _FLAG_LETTERS)
    flags = WhorlFlags(
        sterile=STERILE_FLAG in token,
        connation=CONNATE_FLAG in token,
        connation_variation=VARIATION_FLAG in token,
    )
    return cleaned, flags
