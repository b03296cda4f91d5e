from pydantic import BaseModel, ConfigDict, Field

from src.career_agent.workflow.enums import Role


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Transcript(BaseModel):
    """Append-only log of the session's turns, in conversation order."""

    turns: list[ChatTurn] = Field(default_factory=list)

    def append(self, turn: ChatTurn) -> None:
        self.turns.append(turn)

    def render_as_text(self) -> str:
        return "\n".join(
            f"{turn.role.capitalize()}: {turn.content}" for turn in self.turns
        )

    @property
    def is_empty(self) -> bool:
        return not self.turns

    def __len__(self) -> int:
        return len(self.turns)


# -------------------------session state------------------
class SessionState(BaseModel):
    transcript: Transcript = Field(default_factory=Transcript)
    # Latest career or roadmap answer, the input of the next /roadmap
    last_career_result: str = ""
