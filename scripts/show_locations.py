"""Print the locations and ports resolved for this node."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Mapping, Optional, Sequence

import yaml

from locations import (
    adjust_port,
    node_num,
    org_id,
    resolve_locations,
    snapshot_env,
)
from utils.fs import ensure_exists

logger = logging.getLogger("elife")


def build_report(
    ports: Sequence[int] = (),
    env: Optional[Mapping[str, str]] = None,
    ensure: bool = False,
) -> Dict[str, object]:
    """Return the resolved node settings as a plain dict.

    The environment is read once, so the report is consistent and each
    malformed variable is reported a single time.
    """

    snapshot = snapshot_env(env)
    locs = resolve_locations(snapshot)
    if ensure:
        for path in locs.all():
            ensure_exists(path)
        logger.info("Created node directories under %s", locs.home)
    return {
        "node": node_num(snapshot),
        "org": org_id(snapshot),
        "locations": locs.as_dict(),
        "ports": {port: adjust_port(port, snapshot) for port in ports},
    }


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show the home, data, skills, logs and storage locations of this node."
    )
    parser.add_argument(
        "--port",
        dest="ports",
        type=int,
        action="append",
        default=[],
        help="Base port to adjust for this node. May be repeated.",
    )
    parser.add_argument(
        "--ensure",
        action="store_true",
        help="Create the node directories if they are missing.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    report = build_report(args.ports, ensure=args.ensure)
    yaml.safe_dump(report, sys.stdout, sort_keys=False, allow_unicode=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
