from pydantic import BaseModel

from src.career_agent.workflow.enums import CommandKind

EXIT_COMMAND = "/exit"
SUMMARY_COMMAND = "/summary"
CAREER_COMMAND = "/career"
ROADMAP_COMMAND = "/roadmap"


class Command(BaseModel):
    kind: CommandKind
    raw: str = ""
    argument: str = ""


def parse_command(line: str) -> Command:
    """
    Classify one input line.

    `/exit`, `/summary` and `/roadmap` must match exactly. `/career` is a prefix:
    whatever follows it, trimmed, is the profile (possibly empty).
    """
    trimmed = line.strip()
    if not trimmed:
        return Command(kind=CommandKind.EMPTY)
    if trimmed == EXIT_COMMAND:
        return Command(kind=CommandKind.EXIT, raw=trimmed)
    if trimmed == SUMMARY_COMMAND:
        return Command(kind=CommandKind.SUMMARY, raw=trimmed)
    if trimmed.startswith(CAREER_COMMAND):
        profile = trimmed[len(CAREER_COMMAND) :].strip()
        return Command(kind=CommandKind.CAREER, raw=trimmed, argument=profile)
    if trimmed == ROADMAP_COMMAND:
        return Command(kind=CommandKind.ROADMAP, raw=trimmed)
    return Command(kind=CommandKind.CHAT, raw=trimmed, argument=trimmed)
