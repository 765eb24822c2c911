"""Agent definition and run result models.

An agent definition is a YAML (or JSON) file::

    name: summarizer
    description: Summarises text into one paragraph.
    client: openai
    model: gpt-4o-mini
    system_prompt: |
      You are $name. Answer in $language.
    dynamic_variables:
      language: English
    output_schema:
      type: object
      properties:
        summary: { type: string }
      required: [summary]
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AgentDefinition(BaseModel):
    """Validated, immutable representation of an agent definition file."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    system_prompt: str = ""
    model: str
    client: str
    dynamic_variables: dict[str, Any] = Field(default_factory=lambda: dict[str, Any]())
    # Checked by the schema compiler when the agent is built.
    output_schema: Any = None

    @property
    def system_prompt_template(self) -> str:
        return self.system_prompt

    @property
    def provider_id(self) -> str:
        return self.client


class RunResult(BaseModel):
    """Outcome of a single :meth:`Agent.run` call.

    ``output`` is the validated structured value when the agent has an
    output schema, the raw response text otherwise, and ``None`` on failure.
    """

    success: bool
    output: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, output: Any) -> "RunResult":
        return cls(success=True, output=output)

    @classmethod
    def failed(cls, error: str) -> "RunResult":
        return cls(success=False, output=None, error=error)
