from dataclasses import dataclass, field

from line_talk_viewer.services.parsing.types import Day, Message


@dataclass(frozen=True, slots=True)
class SearchHit:
    key: str
    day: Day
    message: Message

    @property
    def label(self) -> str:
        return f"[{self.day.date} {self.message.time}] {self.message.user}「{self.message.text}」"


@dataclass(frozen=True, slots=True)
class MessageView:
    key: str
    message: Message
    is_mine: bool
    highlighted: bool


@dataclass(frozen=True, slots=True)
class DayView:
    date: str
    messages: list[MessageView] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ChatView:
    days: list[DayView]
    search_hits: list[SearchHit]
    users: list[str]
    current_user: str
