"""Tests for credential providers."""

from agentcli.core.interface.credentials import (
    CredentialProvider,
    EnvironmentCredentials,
    StaticCredentials,
)


class TestEnvironmentCredentials:
    def test_reads_mapping(self) -> None:
        creds = EnvironmentCredentials({"OPENAI_API_KEY": "sk-test"})
        assert creds.get("OPENAI_API_KEY") == "sk-test"

    def test_missing_is_none(self) -> None:
        assert EnvironmentCredentials({}).get("OPENAI_API_KEY") is None

    def test_empty_is_none(self) -> None:
        assert EnvironmentCredentials({"OPENAI_API_KEY": ""}).get("OPENAI_API_KEY") is None

    def test_defaults_to_process_environment(self, monkeypatch) -> None:  # type: ignore[no-untyped-def]
        monkeypatch.setenv("AGENTCLI_TEST_KEY", "value")
        assert EnvironmentCredentials().get("AGENTCLI_TEST_KEY") == "value"


class TestStaticCredentials:
    def test_get(self) -> None:
        creds = StaticCredentials({"ANTHROPIC_API_KEY": "a"})
        assert creds.get("ANTHROPIC_API_KEY") == "a"
        assert creds.get("OTHER") is None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(StaticCredentials(), CredentialProvider)
        assert isinstance(EnvironmentCredentials({}), CredentialProvider)
