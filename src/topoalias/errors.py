"""errors.py: exceptions raised by topoalias."""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tablet_type import TabletType


class TopoAliasError(Exception):
    """Base class for every error raised by this package."""


class InvalidTabletAliasError(TopoAliasError, ValueError):
    """A tablet alias string does not match ``<cell>-<uid>``."""


class InvalidTabletUidError(TopoAliasError, ValueError):
    """A tablet uid is not a decimal unsigned 32-bit integer."""


class UnknownTabletTypeError(TopoAliasError, ValueError):
    """A tablet type name is not part of the TabletType enum.

    Attributes:
        tablet_type: the value to fall back on, always TabletType.UNKNOWN.
    """
    tablet_type: "TabletType"

    def __init__(self, message: str, tablet_type: "TabletType") -> None:
        super().__init__(message)
        self.tablet_type = tablet_type


class ResolutionError(TopoAliasError, OSError):
    """Looking up a MySQL hostname failed."""
