from enum import StrEnum


class Role(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


class CommandKind(StrEnum):
    EXIT = "exit"
    SUMMARY = "summary"
    CAREER = "career"
    ROADMAP = "roadmap"
    CHAT = "chat"
    EMPTY = "empty"
