"""Resolve per-node storage locations and ports from the environment.

Several nodes can run on the same machine, so each one gets its own home
directory and its own port range. The home directory is taken from
``ELIFE_HOME`` when set, otherwise it lives under the platform's
application data root::

    %APPDATA%\\Local\\everlifeai\\<org>\\<node>    (Windows)
    $HOME/everlifeai/<org>/<node>                (Mac/Linux)

The ``<org>`` segment is only present when ``ELIFE_NODE_ORG`` is set.
Nothing is cached: every call reads the environment again.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from utils.logging import show_err

HOME_VAR = "ELIFE_HOME"
NODE_NUM_VAR = "ELIFE_NODE_NUM"
NODE_ORG_VAR = "ELIFE_NODE_ORG"
ORG_PORT_OFFSET_VAR = "ELIFE_ORG_PORT_OFFSET"

APP_DIR = "everlifeai"
NODE_PORT_STEP = 100
ORG_PORT_STEP = 1000
_SEPARATORS = "/\\"

Env = Mapping[str, str]


def _environ(env: Optional[Env]) -> Env:
    return os.environ if env is None else env


def _int_var(env: Env, name: str) -> int:
    """Return the integer value of ``name``, or 0 when unset or malformed."""

    raw = env.get(name)
    if not raw:
        return 0
    try:
        return int(raw.strip())
    except ValueError:
        show_err(f"Environment variable {name} is not a valid number: {raw!r}")
        return 0


def node_num(env: Optional[Env] = None) -> int:
    """Return the node number from ``ELIFE_NODE_NUM`` (default 0)."""
    return _int_var(_environ(env), NODE_NUM_VAR)


def org_id(env: Optional[Env] = None) -> str:
    """Return the organization id from ``ELIFE_NODE_ORG`` (default empty)."""
    return _environ(env).get(NODE_ORG_VAR) or ""


def _org_segment(org: str) -> str:
    """Return ``org`` as a single path segment (empty when nothing is left)."""

    segment = org.strip(_SEPARATORS)
    for sep in _SEPARATORS:
        segment = segment.replace(sep, "_")
    return segment


def _platform_root(env: Env) -> Path:
    appdata = env.get("APPDATA")
    if appdata:
        return Path(appdata) / "Local"
    home = env.get("HOME")
    if home:
        return Path(home)
    return Path(os.path.expanduser("~"))


def home_loc(env: Optional[Env] = None) -> Path:
    """Return the home location of this node."""

    env = _environ(env)
    override = env.get(HOME_VAR)
    if override:
        return Path(override)

    segments = [APP_DIR]
    org = _org_segment(org_id(env))
    if org:
        segments.append(org)
    segments.append(str(node_num(env)))
    return _platform_root(env).joinpath(*segments)


def data_loc(env: Optional[Env] = None) -> Path:
    """Return the data location of this node."""
    return home_loc(env) / "data"


def skill_loc(env: Optional[Env] = None) -> Path:
    """Return the location of downloaded skills."""
    return home_loc(env) / "skills"


def logs_loc(env: Optional[Env] = None) -> Path:
    """Return the log location of this node."""
    return home_loc(env) / "logs"


def ssb_loc(env: Optional[Env] = None) -> Path:
    """Return the internal storage location, kept inside the data folder."""
    return data_loc(env) / "__ssb"


def adjust_port(port: int, env: Optional[Env] = None) -> str:
    """Offset ``port`` by node number and organization and return it as text.

    Each node moves the port by 100 and each organization offset by 1000,
    so nodes sharing a machine do not collide.
    """

    env = _environ(env)
    adjusted = port + node_num(env) * NODE_PORT_STEP
    adjusted += _int_var(env, ORG_PORT_OFFSET_VAR) * ORG_PORT_STEP
    return str(adjusted)


@dataclass(frozen=True)
class Locations:
    """All locations of one node, resolved together."""

    home: Path
    data: Path
    skills: Path
    logs: Path
    ssb: Path

    def as_dict(self) -> Dict[str, str]:
        """Return the locations as strings, keyed by name."""
        return {
            "home": str(self.home),
            "data": str(self.data),
            "skills": str(self.skills),
            "logs": str(self.logs),
            "ssb": str(self.ssb),
        }

    def all(self) -> tuple[Path, ...]:
        """Return every location, home first."""
        return (self.home, self.data, self.skills, self.logs, self.ssb)


def snapshot_env(env: Optional[Env] = None) -> Dict[str, str]:
    """Return a copy of the environment with its numeric variables validated.

    Malformed values are reported here, once, and replaced by 0 so later
    calls on the copy stay quiet.
    """

    snapshot = dict(_environ(env))
    for name in (NODE_NUM_VAR, ORG_PORT_OFFSET_VAR):
        if snapshot.get(name):
            snapshot[name] = str(_int_var(snapshot, name))
    return snapshot


def resolve_locations(env: Optional[Env] = None) -> Locations:
    """Resolve every location from a single snapshot of the environment."""

    snapshot = dict(_environ(env))
    home = home_loc(snapshot)
    data = home / "data"
    return Locations(
        home=home,
        data=data,
        skills=home / "skills",
        logs=home / "logs",
        ssb=data / "__ssb",
    )
