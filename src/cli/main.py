import asyncio
from typing import Optional
import typer
from rich.markup import escape
from rich.panel import Panel

from src.career_agent.agents.agent import PydanticAIBackend
from src.career_agent.config import load_settings
from src.career_agent.exceptions import BackendError, ConfigurationError
from src.career_agent.utils.logger import configure_logging, get_logger
from src.career_agent.workflow.dispatcher import CommandDispatcher, run_session
from src.cli.theme import console

logger = get_logger(__name__)

# --- Typer App ---
app = typer.Typer(help="Career agent: chat, career paths, roadmaps and summaries")

COMMANDS_HELP = (
    "[info]/career <your profile>[/info]  - get career recommendations\n"
    "[info]/roadmap[/info]                - 6-month roadmap based on last career result\n"
    "[info]/summary[/info]                - summarize conversation so far\n"
    "[info]/exit[/info]                   - quit"
)


async def read_line() -> Optional[str]:
    """Prompt for the next line; None once stdin is exhausted."""
    try:
        return await asyncio.to_thread(console.input, "\n[user]You>[/user] ")
    except EOFError:
        return None


@app.command()
def chat(
    model: Optional[str] = typer.Option(
        None, "--model", "-m", help="Model to use instead of MODEL_NAME"
    ),
) -> None:
    """Start an interactive career advice session."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        console.print(f"[error]Configuration error:[/error] {escape(str(e))}")
        raise typer.Exit(code=1)

    configure_logging(settings)
    model_name = model or settings.MODEL_NAME
    logger.info(f"Starting session with {settings.PROVIDER} model {model_name}")

    console.print(
        Panel(COMMANDS_HELP, title="Career Agent", border_style="primary")
    )

    dispatcher = CommandDispatcher(
        PydanticAIBackend(settings),
        console,
        model_name=model_name,
        timeout=settings.TASK_TIMEOUT_SECONDS,
    )
    try:
        asyncio.run(run_session(dispatcher, read_line))
    except BackendError as e:
        console.out("")
        console.print(f"[error]Fatal error:[/error] {escape(str(e))}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
