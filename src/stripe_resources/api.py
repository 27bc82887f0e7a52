"""
Public, high-level helpers for building a configured client.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import requests

from .core.client import Client
from .core.config import ClientConfig, ClientParameters

__all__ = ["create_client"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    stripe_account: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> Client:
    """
    Construct a :class:`Client` sharing ``session`` if one is given.

    Either pass a ready-made ``config`` or describe one through the
    environment, in which case the sources are applied weakest first:
    ``base`` (``os.environ`` by default), ``env_file``, ``overrides``,
    ``parameters`` and finally the individual keyword arguments.
    """
    keywords = ClientParameters(
        api_key=api_key,
        api_base=api_base,
        api_version=api_version,
        stripe_account=stripe_account,
        timeout_seconds=timeout_seconds,
    ).as_overrides()

    if config is not None:
        if overrides or base is not None or parameters is not None or keywords:
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        return Client(config, session=session)

    layered: Dict[str, str] = dict(overrides or {})
    if parameters is not None:
        layered.update(parameters.as_overrides())
    layered.update(keywords)
    resolved = ClientConfig.from_env(env_file=env_file, base=base, overrides=layered)
    return Client(resolved, session=session)
