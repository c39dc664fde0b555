from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Message:
    time: str
    user: str
    text: str


@dataclass(frozen=True, slots=True)
class Day:
    date: str
    messages: tuple[Message, ...] = ()


@dataclass(frozen=True, slots=True)
class ChatLog:
    days: tuple[Day, ...]
    participants: tuple[str, ...] = ()
    summary: dict[str, int | str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Day]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)
