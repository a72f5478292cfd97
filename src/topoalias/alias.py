# alias.py

import re
from typing import Any, Iterable, Sequence

from loguru import logger

from .errors import InvalidTabletAliasError, InvalidTabletUidError

TABLET_ALIAS_FORMAT = "^(?P<cell>[-_.a-zA-Z0-9]+)-(?P<uid>[0-9]+)$"
_TABLET_ALIAS_RE = re.compile(TABLET_ALIAS_FORMAT)

MAX_UID = 2 ** 32 - 1


class TabletAlias:
    """
    Addresses a single tablet in the topology.

    A tablet is named by the cell it lives in and a numeric uid that is
    unique within that cell. Aliases are immutable values: two aliases with
    the same cell and uid are equal and hash the same, so they can be used
    as dict keys and set members.

    Attributes:
        cell (str): Name of the cell (availability zone) hosting the tablet.
        uid (int): Unsigned 32-bit id of the tablet within its cell.

    ``TabletAlias()`` is the zero alias, used as the "unassigned" sentinel.
    """
    __slots__ = ('_cell', '_uid')

    def __init__(self, cell: str = "", uid: int = 0) -> None:
        if isinstance(uid, bool) or not isinstance(uid, int):
            raise InvalidTabletUidError(
                f"tablet uid must be an int, got {type(uid).__name__}")
        if not 0 <= uid <= MAX_UID:
            raise InvalidTabletUidError(
                f"tablet uid {uid} out of range [0, {MAX_UID}]")
        self._cell = cell
        self._uid = uid


    @property
    def cell(self) -> str:
        return self._cell


    @property
    def uid(self) -> int:
        return self._uid


    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TabletAlias):
            return NotImplemented
        return self._cell == other._cell and self._uid == other._uid


    def __hash__(self) -> int:
        return hash((self._cell, self._uid))


    def __str__(self) -> str:
        return tablet_alias_string(self)


    def __repr__(self) -> str:
        return f"TabletAlias(cell={self._cell!r}, uid={self._uid})"


def parse_uid(value: str) -> int:
    """Parses a tablet uid.

    Only plain ASCII decimal digits are accepted: no sign, no whitespace and
    no digit separators.

    Args:
        value: the uid as a string.

    Returns:
        int: the uid.

    Raises:
        InvalidTabletUidError: if value is not a decimal number or does not
            fit in 32 unsigned bits.
    """
    try:
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"invalid literal for uid: {value!r}")
        uid = int(value, 10)
        if uid > MAX_UID:
            raise ValueError(f"value out of range: {value!r}")
    except ValueError as e:
        raise InvalidTabletUidError(f"bad tablet uid: {e}") from e
    return uid


def parse_tablet_alias(alias_str: str) -> TabletAlias:
    """Parses a tablet alias of the form ``<cell>-<uid>``.

    Args:
        alias_str: e.g. ``"zone1-0000000100"``.

    Returns:
        TabletAlias: the parsed alias.

    Raises:
        InvalidTabletAliasError: if alias_str does not match the format.
        InvalidTabletUidError: if the uid part does not fit in 32 bits.
    """
    match = _TABLET_ALIAS_RE.fullmatch(alias_str)
    if match is None:
        logger.debug(f"rejecting malformed tablet alias {alias_str!r}")
        raise InvalidTabletAliasError(
            f"invalid tablet alias: '{alias_str}', "
            f"expecting format: '{TABLET_ALIAS_FORMAT}'")
    try:
        uid = parse_uid(match.group("uid"))
    except InvalidTabletUidError as e:
        logger.debug(f"rejecting tablet alias {alias_str!r}: {e}")
        raise InvalidTabletUidError(
            f"invalid tablet uid in alias '{alias_str}': {e}") from e
    return TabletAlias(match.group("cell"), uid)


def tablet_alias_string(alias: TabletAlias | None) -> str:
    """Formats an alias as ``<cell>-<uid>``, uid zero-padded to 10 digits.

    None is formatted as ``"<nil>"``.
    """
    if alias is None:
        return "<nil>"
    return f"{alias.cell}-{alias.uid:010d}"


def tablet_alias_uid_str(alias: TabletAlias) -> str:
    """Returns the uid of alias, zero-padded to 10 digits."""
    return f"{alias.uid:010d}"


def tablet_alias_equal(left: TabletAlias | None,
                       right: TabletAlias | None) -> bool:
    """True if both aliases are None, or have the same cell and uid.

    Any object with cell and uid attributes is compared by value, so aliases
    built by other code match a TabletAlias.
    """
    if left is None or right is None:
        return left is None and right is None
    return left.cell == right.cell and left.uid == right.uid


def tablet_alias_is_zero(alias: TabletAlias | None) -> bool:
    """True if alias is missing or has neither a cell nor a uid."""
    return alias is None or (alias.cell == "" and alias.uid == 0)


def is_alias_in_list(alias: TabletAlias | None,
                     aliases: Iterable[TabletAlias | None]) -> bool:
    return any(tablet_alias_equal(alias, other) for other in aliases)


def parse_tablet_set(tablet_list_str: str) -> set[str]:
    """Parses a comma separated list of tablets into a set.

    An empty string gives an empty set, not a set holding "".
    """
    if tablet_list_str == "":
        return set()
    return set(tablet_list_str.split(","))


def tablet_alias_sort_key(alias: TabletAlias) -> tuple[str, int]:
    """Sort key ordering aliases by cell, then by uid.

    Use it with the builtin sorts: ``sorted(aliases,
    key=tablet_alias_sort_key)``.
    """
    return (alias.cell, alias.uid)


def sort_tablet_aliases(aliases: list[TabletAlias]) -> None:
    """Sorts aliases in place (stable), by cell then uid."""
    aliases.sort(key=tablet_alias_sort_key)


def tablet_alias_strings(
        aliases: Sequence[TabletAlias | None]) -> list[str]:
    """Maps tablet_alias_string over aliases, keeping order and length."""
    return [tablet_alias_string(alias) for alias in aliases]
