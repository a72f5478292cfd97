"""tablet.py: the tablet descriptor and attributes derived from it."""
from typing import Any, Iterable

from loguru import logger

from . import _net
from .alias import TabletAlias, tablet_alias_equal, tablet_alias_string
from .errors import ResolutionError
from .tablet_type import TabletType

# VT_DB_PREFIX + keyspace is the default name for databases.
VT_DB_PREFIX = "vt_"


class Tablet:
    """
    Describes one tablet as recorded in the topology.

    Only the fields the helpers in this module read are modelled. The
    helpers never mutate a tablet, and accept any object exposing the same
    attribute names.

    Attributes:
        alias (TabletAlias | None): Address of the tablet.
        hostname (str): Host running the tablet server.
        keyspace (str): Keyspace the tablet belongs to, "" if unassigned.
        shard (str): Shard the tablet belongs to, "" if unassigned.
        type (TabletType): Current role of the tablet.
        db_name_override (str): Database name to use instead of the default.
        mysql_hostname (str): Host of the tablet's MySQL server.
        mysql_port (int): Port of the tablet's MySQL server.
    """
    __slots__ = ('alias', 'hostname', 'keyspace', 'shard', 'type',
                 'db_name_override', 'mysql_hostname', 'mysql_port')

    def __init__(self,
                 alias: TabletAlias | None = None,
                 hostname: str = "",
                 keyspace: str = "",
                 shard: str = "",
                 type: TabletType = TabletType.UNKNOWN,
                 db_name_override: str = "",
                 mysql_hostname: str = "",
                 mysql_port: int = 0,
    ) -> None:
        self.alias = alias
        self.hostname = hostname
        self.keyspace = keyspace
        self.shard = shard
        self.type = type
        self.db_name_override = db_name_override
        self.mysql_hostname = mysql_hostname
        self.mysql_port = mysql_port


    def __repr__(self) -> str:
        return f"Tablet(alias={tablet_alias_string(self.alias)})"


def mysql_addr(tablet: Any) -> str:
    """Returns the host:port of the tablet's MySQL server."""
    return _net.join_host_port(tablet.mysql_hostname, tablet.mysql_port)


def mysql_ip(tablet: Any) -> str:
    """Returns the IP of the tablet's MySQL server by resolving its hostname.

    The first address the resolver returns is used; which one that is may
    change between calls. This blocks on the resolver.

    Raises:
        ResolutionError: if the hostname cannot be resolved.
    """
    try:
        addrs = _net.lookup_host(tablet.mysql_hostname)
    except (OSError, UnicodeError) as e:
        logger.debug(f"failed to resolve {tablet.mysql_hostname}: {e}")
        raise ResolutionError(
            f"cannot resolve mysql hostname '{tablet.mysql_hostname}': {e}"
        ) from e
    if not addrs:
        raise ResolutionError(
            f"no addresses found for mysql hostname '{tablet.mysql_hostname}'")
    return addrs[0]


def tablet_db_name(tablet: Any) -> str:
    """Returns the tablet's database name.

    This is usually implied by the keyspace. Having the shard in the
    database name would complicate MySQL replication, so it is left out.
    """
    if tablet.db_name_override != "":
        return tablet.db_name_override
    if tablet.keyspace == "":
        return ""
    return VT_DB_PREFIX + tablet.keyspace


def tablet_is_assigned(tablet: Any) -> bool:
    """True if the tablet is assigned to a keyspace and shard.

    A tablet that is being removed still shows up as assigned even though
    its data cannot be used for serving.
    """
    return tablet is not None and tablet.keyspace != "" and tablet.shard != ""


def is_tablet_in_list(tablet: Any, all_tablets: Iterable[Any]) -> bool:
    """True if a tablet with the same alias is in all_tablets."""
    return any(tablet_alias_equal(tablet.alias, other.alias)
               for other in all_tablets)
