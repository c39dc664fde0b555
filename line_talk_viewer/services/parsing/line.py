import re
from collections.abc import Callable
from pathlib import Path

from line_talk_viewer.services.parsing.types import ChatLog, Day, Message

LINE_BREAK_RE = re.compile(r"\r?\n")
# 2025.04.18 金曜日
DATE_DOTTED_RE = re.compile(r"^([0-9]{4})\.([0-9]{2})\.([0-9]{2})")
# 2021/11/26(金)
DATE_SLASHED_RE = re.compile(r"^([0-9]{4})/([0-9]{1,2})/([0-9]{1,2})")
# 07:10 sima ありがと
MESSAGE_LINE_RE = re.compile(r"^([0-9]{1,2}:[0-9]{2})\s+(\S+)\s+(.+)$")


class _DayAccumulator:
    """Finished days plus the one still receiving messages."""

    def __init__(self) -> None:
        self.days: list[Day] = []
        self.matched = 0
        self.discarded = 0
        self._date: str | None = None
        self._messages: list[Message] = []

    def open_day(self, date: str) -> None:
        self._close_day()
        self._date = date
        self.matched += 1

    def add_message(self, message: Message) -> None:
        if self._date is None:
            self.discarded += 1
            return
        self._messages.append(message)
        self.matched += 1

    def finish(self) -> list[Day]:
        self._close_day()
        return self.days

    def _close_day(self) -> None:
        if self._date is not None:
            self.days.append(Day(date=self._date, messages=tuple(self._messages)))
        self._date = None
        self._messages = []


def _on_dotted_date(acc: _DayAccumulator, match: re.Match[str]) -> None:
    year, month, day = match.groups()
    acc.open_day(f"{year}-{month}-{day}")


def _on_slashed_date(acc: _DayAccumulator, match: re.Match[str]) -> None:
    year, month, day = match.groups()
    acc.open_day(f"{year}-{month.zfill(2)}-{day.zfill(2)}")


def _on_message(acc: _DayAccumulator, match: re.Match[str]) -> None:
    time_part, user, text = match.groups()
    acc.add_message(Message(time=time_part, user=user, text=text))


# Order matters: first match wins.
LINE_RULES: list[tuple[re.Pattern[str], Callable[[_DayAccumulator, re.Match[str]], None]]] = [
    (DATE_DOTTED_RE, _on_dotted_date),
    (DATE_SLASHED_RE, _on_slashed_date),
    (MESSAGE_LINE_RE, _on_message),
]


def parse_line_chat(text: str) -> ChatLog:
    acc = _DayAccumulator()
    total_lines = 0

    for raw_line in LINE_BREAK_RE.split(text.removeprefix("\ufeff")):
        line = raw_line.strip()
        if not line:
            continue
        total_lines += 1
        for pattern, handler in LINE_RULES:
            match = pattern.match(line)
            if match:
                handler(acc, match)
                break
        else:
            acc.discarded += 1

    days = acc.finish()
    participants = tuple(dict.fromkeys(message.user for day in days for message in day.messages))
    return ChatLog(
        days=tuple(days),
        participants=participants,
        summary={
            "day_count": len(days),
            "message_count": sum(len(day.messages) for day in days),
            "participant_count": len(participants),
            "total_lines": total_lines,
            "matched_lines": acc.matched,
            "discarded_lines": acc.discarded,
            "parser": "line_txt",
        },
    )


def parse_chat_file(path: str | Path) -> ChatLog:
    text = Path(path).read_text(encoding="utf-8-sig", errors="replace")
    return parse_line_chat(text)
