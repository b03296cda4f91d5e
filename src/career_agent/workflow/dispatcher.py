from typing import Awaitable, Callable
from rich.console import Console

from src.career_agent.agents.agent import ModelBackend
from src.career_agent.agents.prompts.career import build_career_prompt
from src.career_agent.agents.prompts.chat import build_chat_prompt
from src.career_agent.agents.prompts.roadmap import build_roadmap_prompt
from src.career_agent.agents.prompts.summary import build_summary_prompt
from src.career_agent.agents.streaming import stream_task_text
from src.career_agent.utils.logger import get_logger
from src.career_agent.workflow.commands import Command, parse_command
from src.career_agent.workflow.enums import CommandKind, Role
from src.career_agent.workflow.types import ChatTurn, SessionState

logger = get_logger(__name__)

FAREWELL_MESSAGE = "Goodbye!"
EMPTY_SUMMARY_MESSAGE = "Assistant> No conversation yet to summarize."
MISSING_PROFILE_MESSAGE = (
    "Assistant> Please provide a short profile, e.g. "
    "`/career CS master's, interested in AI security, some ZKP experience`"
)
NO_CAREER_CONTEXT_MESSAGE = (
    "Assistant> No career context yet. Use `/career <your profile>` first."
)


class CommandDispatcher:
    """
    Runs one parsed command against the session state.

    State changes happen only after the model answer has streamed completely;
    a failed task leaves the transcript and the career slot untouched.
    """

    def __init__(
        self,
        backend: ModelBackend,
        console: Console,
        model_name: str,
        timeout: float,
        state: SessionState | None = None,
    ):
        self.backend = backend
        self.console = console
        self.model_name = model_name
        self.timeout = timeout
        self.state = state or SessionState()

    async def dispatch(self, command: Command) -> bool:
        """Handle `command`. Returns False once the session should end."""
        logger.debug(f"Dispatching {command.kind} command")

        match command.kind:
            case CommandKind.EMPTY:
                pass
            case CommandKind.EXIT:
                self.console.print(FAREWELL_MESSAGE, style="success")
                return False
            case CommandKind.SUMMARY:
                await self._summarize()
            case CommandKind.CAREER:
                await self._recommend_careers(command)
            case CommandKind.ROADMAP:
                await self._plan_roadmap(command)
            case CommandKind.CHAT:
                await self._chat(command)
        return True

    async def _summarize(self) -> None:
        transcript = self.state.transcript
        if transcript.is_empty:
            self.console.print(EMPTY_SUMMARY_MESSAGE, style="warning")
            return

        summary = await self._stream(
            "Assistant (summary)> ", build_summary_prompt(transcript.render_as_text())
        )
        transcript.append(ChatTurn(role=Role.ASSISTANT, content=summary))

    async def _recommend_careers(self, command: Command) -> None:
        if not command.argument:
            self.console.print(MISSING_PROFILE_MESSAGE, style="warning")
            return

        answer = await self._stream(
            "Assistant (career recommendation)> ",
            build_career_prompt(command.argument),
        )
        self.state.last_career_result = answer
        self._record_exchange(command.raw, answer)

    async def _plan_roadmap(self, command: Command) -> None:
        if not self.state.last_career_result:
            self.console.print(NO_CAREER_CONTEXT_MESSAGE, style="warning")
            return

        roadmap = await self._stream(
            "Assistant (6-month roadmap)> ",
            build_roadmap_prompt(self.state.last_career_result),
        )
        # Chained /roadmap calls refine the previous roadmap
        self.state.last_career_result = roadmap
        self._record_exchange(command.raw, roadmap)

    async def _chat(self, command: Command) -> None:
        reply = await self._stream("Assistant> ", build_chat_prompt(command.argument))
        self._record_exchange(command.raw, reply)

    def _record_exchange(self, user_input: str, answer: str) -> None:
        self.state.transcript.append(ChatTurn(role=Role.USER, content=user_input))
        self.state.transcript.append(ChatTurn(role=Role.ASSISTANT, content=answer))

    async def _stream(self, label: str, instruction: str) -> str:
        self.console.print(label, style="assistant", markup=False)
        answer = await stream_task_text(
            self.backend,
            instruction,
            self.model_name,
            write=self._write_fragment,
            timeout=self.timeout,
        )
        self.console.out("")
        return answer

    def _write_fragment(self, fragment: str) -> None:
        # Raw write: rich rendering would expand tabs and drop carriage returns
        self.console.file.write(fragment)
        self.console.file.flush()


async def run_session(
    dispatcher: CommandDispatcher,
    read_line: Callable[[], Awaitable[str | None]],
) -> None:
    """Read and dispatch lines one at a time until `/exit` or end of input."""
    while True:
        line = await read_line()
        if line is None:
            logger.info("End of input, closing session")
            break

        if not await dispatcher.dispatch(parse_command(line)):
            break
