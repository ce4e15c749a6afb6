"""
Pytest fixtures: a scripted stdin and a fake completion service
"""
import io
from typing import Dict, List, Optional

import pytest

from gemini_prompt.prompt_loop import LineReader


class FakeCompletionService:
    """Answers from a table; raises when the answer is an exception"""

    def __init__(self, answers: Optional[Dict[str, object]] = None, out: Optional[io.StringIO] = None):
        self.answers = answers or {}
        self.out = out
        self.calls: List[str] = []
        self.prompts_seen_at_call: List[int] = []

    async def complete(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self.out is not None:
            self.prompts_seen_at_call.append(self.out.getvalue().count("Enter your question"))
        answer = self.answers.get(prompt, f"echo: {prompt}")
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def err():
    return io.StringIO()


@pytest.fixture
def make_reader(out):
    """Build a LineReader over the given input lines, writing prompts to ``out``"""
    def _make(lines: List[str]) -> LineReader:
        text = "".join(line + "\n" for line in lines)
        return LineReader(stream=io.StringIO(text), out=out)
    return _make
