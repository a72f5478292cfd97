"""tablet_type.py: tablet types and the helpers that classify them."""
from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from loguru import logger

from .errors import UnknownTabletTypeError


class TabletType(IntEnum):
    """The role a tablet plays in its shard.

    Values match the topology schema. BATCH shares its value with RDONLY,
    which makes it an alias member: ``TabletType.BATCH is TabletType.RDONLY``
    and its name is "RDONLY".
    """
    UNKNOWN = 0
    PRIMARY = 1
    REPLICA = 2
    RDONLY = 3
    BATCH = 3
    SPARE = 4
    EXPERIMENTAL = 5
    BACKUP = 6
    RESTORE = 7
    DRAINED = 8


# Order matters to callers that display it.
ALL_TABLET_TYPES: tuple[TabletType, ...] = (
    TabletType.PRIMARY,
    TabletType.REPLICA,
    TabletType.RDONLY,
    TabletType.BATCH,
    TabletType.SPARE,
    TabletType.EXPERIMENTAL,
    TabletType.BACKUP,
    TabletType.RESTORE,
    TabletType.DRAINED,
)

SERVING_TABLET_TYPES: frozenset[TabletType] = frozenset({
    TabletType.PRIMARY,
    TabletType.REPLICA,
    TabletType.BATCH,
    TabletType.EXPERIMENTAL,
})

# Built once at import time, read-only afterwards.
TABLET_TYPE_LOWER_NAME: Mapping[int, str] = MappingProxyType(
    {int(t): t.name.lower() for t in TabletType})


def parse_tablet_type(param: str) -> TabletType:
    """Parses a tablet type name, case-insensitively.

    Alias names such as "batch" are accepted.

    Raises:
        UnknownTabletTypeError: if param is not a tablet type name. Its
            ``tablet_type`` attribute is TabletType.UNKNOWN.
    """
    try:
        return TabletType[param.upper()]
    except KeyError:
        logger.debug(f"unknown tablet type {param!r}")
        raise UnknownTabletTypeError(
            f"unknown TabletType {param}", TabletType.UNKNOWN) from None


def parse_tablet_types(param: str) -> list[TabletType]:
    """Parses a comma separated list of tablet types.

    Entries are not trimmed, so "replica, rdonly" fails on " rdonly". The
    first bad entry's error is raised as is.
    """
    return [parse_tablet_type(type_str) for type_str in param.split(",")]


def tablet_type_lstring(tablet_type: int) -> str:
    """Lower case name of tablet_type, or "unknown" if it is not known."""
    return TABLET_TYPE_LOWER_NAME.get(int(tablet_type), "unknown")


def is_type_in_list(tablet_type: TabletType,
                    types: Iterable[TabletType]) -> bool:
    """True if tablet_type is in types, e.g. ALL_TABLET_TYPES."""
    return any(tablet_type == t for t in types)


def make_string_type_list(types: Iterable[TabletType]) -> list[str]:
    """Sorted lower case names of types, duplicates kept."""
    return sorted(t.name.lower() for t in types)


def make_unique_string_type_list(types: Iterable[TabletType]) -> list[str]:
    """Sorted lower case names of types, with duplicates removed.

    Some types are aliases for others (BATCH and RDONLY), so e.g. "rdonly"
    would show up twice for ALL_TABLET_TYPES without this.
    """
    strs: list[str] = []
    seen: set[str] = set()
    for t in types:
        if t.name in seen:
            continue
        strs.append(t.name.lower())
        seen.add(t.name)
    return sorted(strs)


def is_serving_type(tablet_type: TabletType) -> bool:
    """True if a healthy tablet of this type is expected to serve traffic."""
    return tablet_type in SERVING_TABLET_TYPES
