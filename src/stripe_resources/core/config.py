"""
Configuration objects and helpers for the API client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "DEFAULT_API_BASE",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_client_config",
]

DEFAULT_API_BASE = "https://api.stripe.com"
DEFAULT_TIMEOUT_SECONDS = 80.0

_PARAMETER_TO_ENV_KEY = {
    "api_key": "STRIPE_API_KEY",
    "api_base": "STRIPE_API_BASE",
    "api_version": "STRIPE_API_VERSION",
    "stripe_account": "STRIPE_ACCOUNT",
    "timeout_seconds": "STRIPE_TIMEOUT_SECONDS",
}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    api_key: Optional[str] = None
    api_base: Optional[str] = None
    api_version: Optional[str] = None
    stripe_account: Optional[str] = None
    timeout_seconds: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = _stringify(value)
    return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("STRIPE_API_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("STRIPE_API_KEY must not be empty")
    if not key.startswith(("sk_", "rk_")):
        raise ConfigError("STRIPE_API_KEY must be a secret (sk_) or restricted (rk_) key")
    return key


def _normalize_api_base(raw_base: str) -> str:
    base = raw_base.strip().rstrip("/")
    parsed = urlparse(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"STRIPE_API_BASE is not an http(s) URL: '{raw_base}'")
    return base


def _parse_timeout(raw_timeout: str) -> float:
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"STRIPE_TIMEOUT_SECONDS must be a number, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("STRIPE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _optional(values: Mapping[str, str], key: str) -> Optional[str]:
    value = values.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_base: str = DEFAULT_API_BASE
    api_version: Optional[str] = None
    stripe_account: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def url(self, path: str) -> str:
        """Absolute URL of an API path such as ``/refunds``."""
        return f"{self.api_base}/v1{path}"

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        if self.stripe_account:
            headers["Stripe-Account"] = self.stripe_account
        return headers

    def __repr__(self) -> str:
        masked = self.api_key[:8] + "..." if len(self.api_key) > 8 else "..."
        return (
            f"ClientConfig(api_key='{masked}', api_base='{self.api_base}', "
            f"api_version={self.api_version!r}, stripe_account={self.stripe_account!r}, "
            f"timeout_seconds={self.timeout_seconds})"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        return cls(
            api_key=_normalize_api_key(values.get("STRIPE_API_KEY")),
            api_base=_normalize_api_base(values.get("STRIPE_API_BASE", DEFAULT_API_BASE)),
            api_version=_optional(values, "STRIPE_API_VERSION"),
            stripe_account=_optional(values, "STRIPE_ACCOUNT"),
            timeout_seconds=_parse_timeout(
                values.get("STRIPE_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        api_version: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_base": api_base,
                "api_version": api_version,
                "stripe_account": stripe_account,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    stripe_account: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        api_base=api_base,
        api_version=api_version,
        stripe_account=stripe_account,
        timeout_seconds=timeout_seconds,
    )
