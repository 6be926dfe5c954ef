from pathlib import Path
from unittest.mock import MagicMock

import pytest

from studynotes.summarization.client_base import BaseCompletionClient
from studynotes.summarization.exceptions import SummarizationError
from studynotes.summarization.prompt_loader import load_prompt
from studynotes.summarization.summarizer import Summarizer


def _make_summarizer(**kwargs: object) -> tuple[Summarizer, MagicMock]:
    client = MagicMock(spec=BaseCompletionClient)
    client.complete.return_value = "  Cells divide by mitosis.  "
    summarizer = Summarizer(client=client, model="llama-3.3-70b-versatile", **kwargs)  # type: ignore[arg-type]
    return summarizer, client


class TestSummarize:
    def test_returns_stripped_completion(self) -> None:
        summarizer, _client = _make_summarizer()
        assert summarizer.summarize("Mitosis notes") == "Cells divide by mitosis."

    def test_sends_bundled_prompts(self) -> None:
        summarizer, client = _make_summarizer()

        summarizer.summarize("Mitosis notes")

        kwargs = client.complete.call_args.kwargs
        assert kwargs["model"] == "llama-3.3-70b-versatile"
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 500
        assert kwargs["system_prompt"].startswith("You are an expert summarizer.")
        assert kwargs["user_prompt"].startswith(
            "Summarize the following study material in 2-3 concise paragraphs:"
        )
        assert kwargs["user_prompt"].endswith("Mitosis notes\n")

    def test_truncates_input(self) -> None:
        summarizer, client = _make_summarizer(max_input_chars=8000)

        summarizer.summarize("x" * 9000 + "TAIL")

        user_prompt = client.complete.call_args.kwargs["user_prompt"]
        assert user_prompt.count("x") == 8000
        assert "TAIL" not in user_prompt

    def test_braces_in_content_are_passed_through(self) -> None:
        summarizer, client = _make_summarizer()

        summarizer.summarize("set {a, b} and {0}")

        assert "set {a, b} and {0}" in client.complete.call_args.kwargs["user_prompt"]

    def test_custom_prompt_files(self, tmp_path: Path) -> None:
        template = tmp_path / "p.txt"
        template.write_text("TL;DR: {content}", encoding="utf-8")
        system = tmp_path / "s.txt"
        system.write_text("Be brief.\n", encoding="utf-8")
        summarizer, client = _make_summarizer(
            prompt_template_path=template, system_prompt_path=system
        )

        summarizer.summarize("abc")

        assert client.complete.call_args.kwargs["user_prompt"] == "TL;DR: abc"
        assert client.complete.call_args.kwargs["system_prompt"] == "Be brief."


class TestPromptLoader:
    def test_loads_bundled_prompt(self) -> None:
        assert "{content}" in load_prompt("summary_prompt.txt")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SummarizationError, match="Failed to load prompt"):
            load_prompt("x.txt", tmp_path / "missing.txt")
