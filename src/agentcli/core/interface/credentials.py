"""Credential providers — where API keys come from.

The agent façade never reads ``os.environ`` directly; it asks a
:class:`CredentialProvider`. Production code uses
:class:`EnvironmentCredentials`, tests inject :class:`StaticCredentials`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialProvider(Protocol):
    """Look up a named credential, returning ``None`` when it is not set."""

    def get(self, key: str) -> str | None: ...


class EnvironmentCredentials:
    """Reads credentials from the process environment.

    Empty strings are treated as unset.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key) or None


class StaticCredentials:
    """An in-memory credential map."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key) or None
