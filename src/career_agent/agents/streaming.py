import asyncio
from typing import Callable

from src.career_agent.agents.agent import ModelBackend
from src.career_agent.agents.schemas import TaskEventType
from src.career_agent.exceptions import TaskTimeoutError
from src.career_agent.utils.logger import get_logger

logger = get_logger(__name__)


async def stream_task_text(
    backend: ModelBackend,
    instruction: str,
    model_name: str,
    write: Callable[[str], None],
    timeout: float,
) -> str:
    """
    Run one model task, echoing text fragments as they arrive.

    Every text fragment is handed to `write` before the next event is pulled
    from the backend, then appended to the accumulated answer. Non-text events
    are skipped.

    Args:
        backend: Backend serving the task
        instruction: Fully templated prompt
        model_name: Model identifier passed to the backend
        write: Output surface for the raw fragments
        timeout: Seconds allowed for the whole exchange

    Returns:
        The concatenated text with surrounding whitespace stripped.

    Raises:
        TaskTimeoutError: If the exchange exceeds `timeout`
        BackendError: If the backend fails; fragments already written stay written
    """
    chunks: list[str] = []
    events_received = 0

    try:
        async with asyncio.timeout(timeout):
            async for event in backend.run_task(instruction, model_name):
                events_received += 1
                if event.type != TaskEventType.TEXT:
                    logger.debug(f"Skipping {event.type} event")
                    continue
                write(event.content)
                chunks.append(event.content)
    except TimeoutError as e:
        logger.error(f"Model task on {model_name} timed out after {timeout}s")
        raise TaskTimeoutError(timeout) from e
    except Exception as e:
        logger.error(f"Model task on {model_name} failed with error: {e}")
        raise

    logger.debug(
        f"Model task on {model_name} done: {events_received} events, {len(chunks)} text fragments"
    )
    return "".join(chunks).strip()
