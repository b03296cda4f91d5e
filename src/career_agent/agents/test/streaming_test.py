import asyncio
import pytest

from src.career_agent.agents.schemas import TaskEvent, TaskEventType
from src.career_agent.agents.streaming import stream_task_text
from src.career_agent.exceptions import BackendError, TaskTimeoutError


def collect(backend, write, timeout: float = 5.0) -> str:
    return asyncio.run(
        stream_task_text(backend, "instruction", "test-model", write, timeout)
    )


def test_returns_trimmed_concatenation(scripted_backend):
    backend = scripted_backend([["\n  - Path A", ": justification\n", "- Path B  \n"]])
    written: list[str] = []

    text = collect(backend, written.append)

    assert text == "- Path A: justification\n- Path B"
    assert written == ["\n  - Path A", ": justification\n", "- Path B  \n"]
    assert backend.calls == [("instruction", "test-model")]


def test_each_fragment_is_written_before_the_next_is_pulled():
    written: list[str] = []
    seen_before_pull: list[list[str]] = []

    class RecordingBackend:
        async def run_task(self, instruction, model_name):
            for fragment in ["a", "b", "c"]:
                seen_before_pull.append(list(written))
                yield TaskEvent(type=TaskEventType.TEXT, content=fragment)

    assert collect(RecordingBackend(), written.append) == "abc"
    assert seen_before_pull == [[], ["a"], ["a", "b"]]


def test_non_text_events_are_ignored(scripted_backend):
    backend = scripted_backend(
        [
            [
                TaskEvent(type=TaskEventType.THINKING, content="pondering"),
                "Hello",
                TaskEvent(type=TaskEventType.TOOL_CALL, content="search"),
                " world",
            ]
        ]
    )
    written: list[str] = []

    assert collect(backend, written.append) == "Hello world"
    assert written == ["Hello", " world"]


def test_empty_sequence_gives_empty_text(scripted_backend):
    written: list[str] = []

    assert collect(scripted_backend([[]]), written.append) == ""
    assert written == []


def test_backend_failure_propagates_and_keeps_streamed_text(scripted_backend):
    backend = scripted_backend([["partial "]], error=BackendError("model overloaded"))
    written: list[str] = []

    with pytest.raises(BackendError, match="model overloaded"):
        collect(backend, written.append)

    assert written == ["partial "]


def test_timeout_raises_task_timeout_error():
    written: list[str] = []

    class SlowBackend:
        async def run_task(self, instruction, model_name):
            yield TaskEvent(type=TaskEventType.TEXT, content="first")
            await asyncio.sleep(10)
            yield TaskEvent(type=TaskEventType.TEXT, content="never")

    with pytest.raises(TaskTimeoutError) as exc_info:
        collect(SlowBackend(), written.append, timeout=0.05)

    assert isinstance(exc_info.value, BackendError)
    assert exc_info.value.timeout == 0.05
    assert written == ["first"]
