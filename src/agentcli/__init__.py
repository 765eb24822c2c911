"""agentcli — uniform agents over hosted LLM providers, plus CLI feature commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from agentcli.core.agents.agent import Agent as Agent
    from agentcli.core.agents.models import RunResult as RunResult

_LAZY_EXPORTS = {
    "Agent": "agentcli.core.agents.agent",
    "RunResult": "agentcli.core.agents.models",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'agentcli' has no attribute {name!r}")
