import io
from typing import AsyncIterator, Sequence
import pytest
from rich.console import Console

from src.career_agent.agents.schemas import TaskEvent, TaskEventType
from src.cli.theme import custom_theme


class ScriptedBackend:
    """In-memory model backend replaying one scripted answer per task."""

    def __init__(self, answers: Sequence[Sequence[str | TaskEvent]] = (), error: Exception | None = None):
        self.answers = [list(answer) for answer in answers]
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def run_task(self, instruction: str, model_name: str) -> AsyncIterator[TaskEvent]:
        self.calls.append((instruction, model_name))
        answer = self.answers[len(self.calls) - 1] if len(self.calls) <= len(self.answers) else []
        for item in answer:
            if isinstance(item, TaskEvent):
                yield item
            else:
                yield TaskEvent(type=TaskEventType.TEXT, content=item)
        if self.error is not None:
            raise self.error
        yield TaskEvent(type=TaskEventType.COMPLETED)


@pytest.fixture
def scripted_backend():
    return ScriptedBackend


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def test_console(output: io.StringIO) -> Console:
    return Console(theme=custom_theme, file=output, width=200, color_system=None)
