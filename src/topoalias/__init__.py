"""Addressing and classification of tablets in a sharded topology.

.. include:: ../../README.md
"""
from loguru import logger

from .alias import (
    TABLET_ALIAS_FORMAT,
    TabletAlias,
    is_alias_in_list,
    parse_tablet_alias,
    parse_tablet_set,
    parse_uid,
    sort_tablet_aliases,
    tablet_alias_equal,
    tablet_alias_is_zero,
    tablet_alias_sort_key,
    tablet_alias_string,
    tablet_alias_strings,
    tablet_alias_uid_str,
)
from .errors import (
    InvalidTabletAliasError,
    InvalidTabletUidError,
    ResolutionError,
    TopoAliasError,
    UnknownTabletTypeError,
)
from .tablet import (
    VT_DB_PREFIX,
    Tablet,
    is_tablet_in_list,
    mysql_addr,
    mysql_ip,
    tablet_db_name,
    tablet_is_assigned,
)
from .tablet_type import (
    ALL_TABLET_TYPES,
    SERVING_TABLET_TYPES,
    TABLET_TYPE_LOWER_NAME,
    TabletType,
    is_serving_type,
    is_type_in_list,
    make_string_type_list,
    make_unique_string_type_list,
    parse_tablet_type,
    parse_tablet_types,
    tablet_type_lstring,
)

logger.disable("topoalias")

__all__ = [
    'ALL_TABLET_TYPES',
    'InvalidTabletAliasError',
    'InvalidTabletUidError',
    'ResolutionError',
    'SERVING_TABLET_TYPES',
    'TABLET_ALIAS_FORMAT',
    'TABLET_TYPE_LOWER_NAME',
    'Tablet',
    'TabletAlias',
    'TabletType',
    'TopoAliasError',
    'UnknownTabletTypeError',
    'VT_DB_PREFIX',
    'is_alias_in_list',
    'is_serving_type',
    'is_tablet_in_list',
    'is_type_in_list',
    'make_string_type_list',
    'make_unique_string_type_list',
    'mysql_addr',
    'mysql_ip',
    'parse_tablet_alias',
    'parse_tablet_set',
    'parse_tablet_type',
    'parse_tablet_types',
    'parse_uid',
    'sort_tablet_aliases',
    'tablet_alias_equal',
    'tablet_alias_is_zero',
    'tablet_alias_sort_key',
    'tablet_alias_string',
    'tablet_alias_strings',
    'tablet_alias_uid_str',
    'tablet_db_name',
    'tablet_is_assigned',
    'tablet_type_lstring',
]
