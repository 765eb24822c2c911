"""Error types raised while constructing agents.

Everything here is a construction-time failure. Errors that happen during
``run()`` are reported through :class:`~agentcli.core.agents.models.RunResult`
instead of being raised.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class AgentError(Exception):
    """Base error for all agent construction failures."""


class ConfigurationError(AgentError):
    """The agent cannot be configured from the given options or environment."""


class MissingCredentialError(ConfigurationError):
    """A provider credential is not available."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{key} not set")


class UnsupportedProviderError(ConfigurationError):
    """The definition names a provider that has no registered client."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Unsupported model client: {provider_id}")


class DefinitionNotFoundError(ConfigurationError):
    """No agent definition matches the requested name or path."""

    def __init__(self, name: str, directories: Sequence[Path] = ()) -> None:
        self.name = name
        self.directories = list(directories)
        if self.directories:
            where = ", ".join(str(d) for d in self.directories)
            super().__init__(f"No agent definition found for '{name}' in {where}")
        else:
            super().__init__(f"No agent definition found: {name}")


class DefinitionError(ConfigurationError):
    """An agent definition file exists but cannot be parsed or validated."""

    def __init__(self, path: Path | str, detail: str = "") -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(
            f"Invalid agent definition {self.path}" + (f": {detail}" if detail else "")
        )


class SchemaCompilationError(AgentError):
    """The definition's ``output_schema`` could not be compiled."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(
            "Failed to convert output schema" + (f": {detail}" if detail else "")
        )
