"""
Layered lookup of the ``STRIPE_*`` settings.

Values come from three places, weakest first: a base mapping (``os.environ``
by default), a ``.env`` file that only fills keys the base lacks, and
explicit overrides. :class:`stripe_resources.core.config.ClientConfig` reads
the merged result.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Tuple

__all__ = ["ClientEnvironment", "build_environment", "load_env_file"]

_QUOTES = ("'", '"')


def _parse_line(raw_line: str) -> Optional[Tuple[str, str]]:
    """Split ``KEY=VALUE`` (optionally prefixed with ``export``); ``None`` for anything else."""
    line = raw_line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):].lstrip()
    name, sep, value = line.partition("=")
    name = name.strip()
    if not sep or not name:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return name, value


def _read_env_file(path: Path) -> Dict[str, str]:
    if not path.is_file():
        logging.debug("No env file at %s; skipping", path)
        return {}
    entries = (_parse_line(line) for line in path.read_text(encoding="utf-8").splitlines())
    return dict(entry for entry in entries if entry is not None)


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Copy the variables of ``path`` into ``environ`` without replacing existing keys.

    Returns a snapshot of the merged mapping.
    """
    target: MutableMapping[str, str] = os.environ if environ is None else environ
    for name, value in _read_env_file(Path(path)).items():
        target.setdefault(name, value)
    return dict(target)


@dataclass(frozen=True)
class ClientEnvironment:
    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ClientEnvironment:
    """Merge the layers; ``env_file=None`` skips the file."""
    file_values = _read_env_file(Path(env_file)) if env_file is not None else {}
    merged: Dict[str, str] = {**file_values, **(os.environ if base is None else base)}
    merged.update(overrides or {})
    return ClientEnvironment(variables=merged)
