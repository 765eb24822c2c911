"""Agent definition loader — discover and parse agent YAML/JSON files.

Typical usage::

    registry = AgentRegistry([Path("agents")])
    definition = registry.get("summarizer")

    definition = load_agent_from_file("agents/summarizer.yaml")
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agentcli.core.agents.errors import DefinitionError, DefinitionNotFoundError
from agentcli.core.agents.models import AgentDefinition

logger = logging.getLogger(__name__)

AGENTS_DIR_ENV = "AGENTCLI_AGENTS_DIR"
DEFINITION_SUFFIXES = (".yaml", ".yml", ".json")


def parse_definition(raw: str, *, format: str = "yaml") -> AgentDefinition:
    """Parse a raw string into a validated :class:`AgentDefinition`.

    Args:
        raw: The raw file contents.
        format: ``"yaml"`` (default) or ``"json"``.

    Raises:
        ValueError: If the document is not a mapping.
        pydantic.ValidationError: If required fields are missing or mistyped.
    """
    data: Any = json.loads(raw) if format == "json" else yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValueError("agent definition must be a mapping")
    return AgentDefinition.model_validate(data)


def load_agent_from_file(path: str | Path) -> AgentDefinition:
    """Load a single definition file.

    Raises:
        DefinitionNotFoundError: If *path* does not exist.
        DefinitionError: If the file cannot be read, parsed or validated.
    """
    p = Path(path)
    if not p.is_file():
        raise DefinitionNotFoundError(str(p))
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionError(p, str(exc)) from exc

    fmt = "json" if p.suffix == ".json" else "yaml"
    try:
        definition = parse_definition(raw, format=fmt)
    except (yaml.YAMLError, json.JSONDecodeError, ValidationError, ValueError) as exc:
        raise DefinitionError(p, str(exc)) from exc

    logger.debug("Loaded agent definition '%s' from %s", definition.name, p)
    return definition


def default_directories() -> list[Path]:
    """Directories searched when no explicit registry is given.

    ``$AGENTCLI_AGENTS_DIR`` (``os.pathsep``-separated) if set, else ``./agents``.
    """
    configured = os.environ.get(AGENTS_DIR_ENV, "")
    dirs = [Path(part) for part in configured.split(os.pathsep) if part]
    return dirs or [Path("agents")]


class AgentRegistry:
    """Keyed lookup of agent definitions across one or more directories.

    Each ``.yaml`` / ``.yml`` / ``.json`` file holds one definition and is
    keyed by its ``name`` field. Definitions added with :meth:`register`
    take precedence over files. When two files declare the same name the
    first directory wins.
    """

    def __init__(self, directories: Iterable[Path | str] | None = None) -> None:
        self.directories = (
            [Path(d) for d in directories] if directories is not None else default_directories()
        )
        self._registered: dict[str, AgentDefinition] = {}
        self._cache: dict[str, AgentDefinition] = {}
        self.errors: list[DefinitionError] = []

    def register(self, definition: AgentDefinition) -> None:
        """Add an in-memory definition."""
        self._registered[definition.name] = definition

    def get(self, name: str) -> AgentDefinition:
        """Return the definition named *name*.

        Raises:
            DefinitionNotFoundError: If no valid definition has that name.
            DefinitionError: If the file named after the agent is malformed.
        """
        if name in self._registered:
            return self._registered[name]
        if name in self._cache:
            return self._cache[name]

        # Fast path: a file named after the agent.
        for directory in self.directories:
            for suffix in DEFINITION_SUFFIXES:
                candidate = directory / f"{name}{suffix}"
                if candidate.is_file():
                    definition = load_agent_from_file(candidate)
                    if definition.name == name:
                        self._cache[name] = definition
                        return definition

        definitions = self.load_all()
        if name in definitions:
            return definitions[name]
        raise DefinitionNotFoundError(name, self.directories)

    def load_all(self, *, strict: bool = False) -> dict[str, AgentDefinition]:
        """Load every definition, keyed by agent name.

        Re-reads from disk every call. Files that fail to parse are logged,
        collected in :attr:`errors` and skipped, unless *strict* is set.

        Raises:
            DefinitionError: With *strict*, on the first malformed file.
        """
        definitions: dict[str, AgentDefinition] = {}
        self.errors = []
        for path in self._iter_files():
            try:
                definition = load_agent_from_file(path)
            except DefinitionError as exc:
                if strict:
                    raise
                logger.warning("Skipping %s", exc)
                self.errors.append(exc)
                continue
            definitions.setdefault(definition.name, definition)
        definitions.update(self._registered)
        self._cache = dict(definitions)
        return definitions

    def names(self) -> list[str]:
        return sorted(self.load_all())

    def _iter_files(self) -> Iterable[Path]:
        for directory in self.directories:
            if not directory.is_dir():
                continue
            for path in sorted(directory.iterdir()):
                if path.suffix in DEFINITION_SUFFIXES and path.is_file():
                    yield path
