from __future__ import annotations

import io

import pytest

from constraintfix.adapters.prompt import PromptClosedError, StreamPrompt


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("y\n", True), ("YES\n", True), ("n\n", False), (" no \n", False)],
)
def test_ask_reads_one_answer(answer: str, expected: bool) -> None:  # noqa: FBT001
    output = io.StringIO()
    prompt = StreamPrompt(input=io.StringIO(answer), output=output)

    assert prompt.ask("Remove left-pad?") is expected
    assert output.getvalue() == "? Remove left-pad? (y/n) "


def test_ask_repeats_until_answer_is_recognised() -> None:
    output = io.StringIO()
    prompt = StreamPrompt(input=io.StringIO("\nmaybe\ny\n"), output=output)

    assert prompt.ask("Change it?") is True
    assert output.getvalue().count("? Change it? (y/n) ") == 3


def test_ask_raises_when_input_is_closed() -> None:
    prompt = StreamPrompt(input=io.StringIO(""), output=io.StringIO())

    with pytest.raises(PromptClosedError, match="Change it"):
        prompt.ask("Change it?")


def test_sequential_questions_consume_one_line_each() -> None:
    prompt = StreamPrompt(input=io.StringIO("y\nn\n"), output=io.StringIO())

    assert [prompt.ask("first?"), prompt.ask("second?")] == [True, False]
