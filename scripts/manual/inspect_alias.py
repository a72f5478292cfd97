"""inspect_alias.py: parses tablet aliases and opens a repl on the result."""
import sys

import bpython
from loguru import logger

from topoalias import (
    parse_tablet_alias,
    sort_tablet_aliases,
    tablet_alias_strings,
)

logger.enable("topoalias")


def main() -> None:
    """Parses every alias given on the command line, sorted."""
    if len(sys.argv) < 2:
        print("usage: [uv run] python inspect_alias.py alias [alias ...]")
        exit(1)

    aliases = [parse_tablet_alias(arg) for arg in sys.argv[1:]]
    sort_tablet_aliases(aliases)
    for line in tablet_alias_strings(aliases):
        print(line)
    repl_locals = {
        'aliases': aliases,
    }
    print("starting repl. access `aliases`")
    bpython.embed(locals_=repl_locals)


if __name__ == '__main__':
    main()
