"""Tests for ``agentcli chat`` CLI command — LiteLLM is mocked."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from agentcli.cli import main
from tests.fakes import make_mock_litellm_response, write_definition

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _openai_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


class TestChatOneShot:
    def test_message_by_name(self, tmp_path: Path) -> None:
        write_definition(tmp_path / "summarizer.yaml")

        with patch("agentcli.core.interface.client.litellm") as mock_litellm:
            mock_litellm.acompletion = AsyncMock(
                return_value=make_mock_litellm_response(content="Short summary.")
            )
            runner = CliRunner()
            result = runner.invoke(
                main,
                ["chat", "summarizer", "--dir", str(tmp_path), "-m", "Summarize: hello world"],
            )

        assert result.exit_code == 0
        assert "Short summary." in result.output

    def test_message_with_config_and_vars(self, tmp_path: Path) -> None:
        path = write_definition(tmp_path / "writer.yaml", name="writer")

        with patch("agentcli.core.interface.client.litellm") as mock_litellm:
            mock_litellm.acompletion = AsyncMock(return_value=make_mock_litellm_response())
            runner = CliRunner()
            result = runner.invoke(
                main,
                ["chat", "--config", str(path), "-m", "hi", "--var", "language=Italian"],
            )

        assert result.exit_code == 0
        system = mock_litellm.acompletion.call_args.kwargs["messages"][0]
        assert system["content"] == "You are writer. Answer in Italian."

    def test_json_output(self, tmp_path: Path) -> None:
        write_definition(tmp_path / "summarizer.yaml")

        with patch("agentcli.core.interface.client.litellm") as mock_litellm:
            mock_litellm.acompletion = AsyncMock(return_value=make_mock_litellm_response())
            runner = CliRunner()
            result = runner.invoke(
                main, ["chat", "summarizer", "--dir", str(tmp_path), "-m", "hi", "--json"]
            )

        assert result.exit_code == 0
        assert '"success": true' in result.output

    def test_failed_run_exits_nonzero(self, tmp_path: Path) -> None:
        write_definition(tmp_path / "summarizer.yaml")

        with patch("agentcli.core.interface.client.litellm") as mock_litellm:
            mock_litellm.acompletion = AsyncMock(side_effect=RuntimeError("upstream down"))
            runner = CliRunner()
            result = runner.invoke(
                main, ["chat", "summarizer", "--dir", str(tmp_path), "-m", "hi"]
            )

        assert result.exit_code == 1
        assert "upstream down" in result.output

    def test_bad_variable(self, tmp_path: Path) -> None:
        write_definition(tmp_path / "summarizer.yaml")

        runner = CliRunner()
        result = runner.invoke(
            main, ["chat", "summarizer", "--dir", str(tmp_path), "-m", "hi", "--var", "oops"]
        )

        assert result.exit_code != 0
        assert "KEY=VALUE" in result.output


class TestChatConfigurationErrors:
    def test_unknown_agent(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["chat", "ghost", "--dir", str(tmp_path), "-m", "hi"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_missing_credential(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY")
        write_definition(tmp_path / "summarizer.yaml")

        runner = CliRunner()
        result = runner.invoke(main, ["chat", "summarizer", "--dir", str(tmp_path), "-m", "hi"])

        assert result.exit_code == 1
        assert "OPENAI_API_KEY" in result.output

    def test_no_agent_given(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["chat", "-m", "hi"])

        assert result.exit_code == 1
        assert "exactly one" in result.output


class TestChatInteractive:
    def test_session_until_exit(self, tmp_path: Path) -> None:
        write_definition(tmp_path / "summarizer.yaml")

        with patch("agentcli.core.interface.client.litellm") as mock_litellm:
            mock_litellm.acompletion = AsyncMock(
                side_effect=[
                    make_mock_litellm_response(content="first answer"),
                    make_mock_litellm_response(content="second answer"),
                ]
            )
            runner = CliRunner()
            result = runner.invoke(
                main,
                ["chat", "summarizer", "--dir", str(tmp_path)],
                input="hello\nagain\nexit\n",
            )

        assert result.exit_code == 0
        assert "first answer" in result.output
        assert "second answer" in result.output
        assert mock_litellm.acompletion.await_count == 2
        history = mock_litellm.acompletion.call_args.kwargs["messages"]
        assert [m["role"] for m in history] == ["system", "user", "assistant", "user"]

    def test_session_ends_on_eof(self, tmp_path: Path) -> None:
        write_definition(tmp_path / "summarizer.yaml")

        runner = CliRunner()
        result = runner.invoke(main, ["chat", "summarizer", "--dir", str(tmp_path)], input="")

        assert result.exit_code == 0
