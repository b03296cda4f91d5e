from typing import AsyncIterator, Callable, Protocol
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError
from pydantic_ai.messages import (
    AgentStreamEvent,
    PartDeltaEvent,
    PartStartEvent,
    TextPart,
    TextPartDelta,
    ThinkingPart,
    ThinkingPartDelta,
    ToolCallPart,
)
from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.openrouter import OpenRouterProvider
from pydantic_ai.settings import ModelSettings
from pydantic_ai.usage import UsageLimits

from src.career_agent.agents.schemas import TaskEvent, TaskEventType
from src.career_agent.config import AppConfig
from src.career_agent.exceptions import BackendError
from src.career_agent.utils.logger import get_logger

logger = get_logger(__name__)

AGENT_NAME = "career_agent"


class ModelBackend(Protocol):
    def run_task(self, instruction: str, model_name: str) -> AsyncIterator[TaskEvent]:
        """Issue one task and return its lazy, finite sequence of events."""
        ...


def build_model(settings: AppConfig, model_name: str) -> Model:
    match settings.PROVIDER:
        case "anthropic":
            return AnthropicModel(
                model_name, provider=AnthropicProvider(api_key=settings.api_key)
            )
        case "openrouter":
            return OpenAIChatModel(
                model_name, provider=OpenRouterProvider(api_key=settings.api_key)
            )
        case _:
            raise ValueError(f"Unsupported provider: {settings.PROVIDER}")


def to_task_event(event: AgentStreamEvent) -> TaskEvent | None:
    """Map a pydantic-ai stream event onto a TaskEvent, or None if irrelevant."""
    if isinstance(event, PartStartEvent):
        part = event.part
        if isinstance(part, TextPart):
            return TaskEvent(type=TaskEventType.TEXT, content=part.content)
        if isinstance(part, ThinkingPart):
            return TaskEvent(type=TaskEventType.THINKING, content=part.content)
        if isinstance(part, ToolCallPart):
            return TaskEvent(type=TaskEventType.TOOL_CALL, content=part.tool_name)
    elif isinstance(event, PartDeltaEvent):
        delta = event.delta
        if isinstance(delta, TextPartDelta):
            return TaskEvent(type=TaskEventType.TEXT, content=delta.content_delta)
        if isinstance(delta, ThinkingPartDelta):
            return TaskEvent(
                type=TaskEventType.THINKING, content=delta.content_delta or ""
            )
    return None


class PydanticAIBackend:
    """
    Model backend driven by a pydantic-ai Agent.

    Each task is a single agent run limited to `MAX_ITERATIONS` model requests.
    Text parts are streamed as they arrive from every model-request node.
    """

    def __init__(
        self,
        settings: AppConfig,
        model_factory: Callable[[str], Model] | None = None,
    ):
        self.settings = settings
        self._model_factory = model_factory or (
            lambda name: build_model(settings, name)
        )
        self._agents: dict[str, Agent[None, str]] = {}
        self.model_settings = ModelSettings(
            max_tokens=settings.MAX_TOKENS,
            timeout=settings.TASK_TIMEOUT_SECONDS,
        )
        self.usage_limits = UsageLimits(request_limit=settings.MAX_ITERATIONS)

    def _agent_for(self, model_name: str) -> Agent[None, str]:
        if model_name not in self._agents:
            logger.debug(f"Creating agent for model {model_name}")
            self._agents[model_name] = Agent(
                self._model_factory(model_name),
                name=AGENT_NAME,
                model_settings=self.model_settings,
            )
        return self._agents[model_name]

    async def run_task(
        self, instruction: str, model_name: str
    ) -> AsyncIterator[TaskEvent]:
        agent = self._agent_for(model_name)
        try:
            async with agent.iter(instruction, usage_limits=self.usage_limits) as run:
                async for node in run:
                    if Agent.is_model_request_node(node):
                        async with node.stream(run.ctx) as request_stream:
                            async for event in request_stream:
                                task_event = to_task_event(event)
                                if task_event is not None:
                                    yield task_event
                    elif Agent.is_end_node(node):
                        logger.debug(
                            f"Agent {agent.name} finished, usage: {run.usage}"
                        )
                        yield TaskEvent(type=TaskEventType.COMPLETED)
        except AgentRunError as e:
            logger.error(f"Agent {agent.name} failed with error: {e}")
            raise BackendError(str(e)) from e
