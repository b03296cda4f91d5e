from enum import StrEnum
from pydantic import BaseModel, ConfigDict, Field


class TaskEventType(StrEnum):
    TEXT = "text"
    THINKING = "thinking"
    TOOL_CALL = "tool_call"
    COMPLETED = "completed"


# ----------------model backend stream-------------------
class TaskEvent(BaseModel):
    """One tagged event from a streamed model task."""

    model_config = ConfigDict(frozen=True)

    type: TaskEventType = Field(..., description="What kind of event this is.")
    content: str = Field(
        default="",
        description="Incremental text for `text` and `thinking` events, the tool name for `tool_call`.",
    )
