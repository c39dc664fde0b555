"""Pure projections of a parsed chat log into what the conversation view shows.

Keys are positional: ``"{day}-{message}"`` counted inside the *visible* days,
so a key is only meaningful together with the date filter that produced it.
"""

import re
from collections.abc import Iterable, Sequence

from line_talk_viewer.services.parsing.types import ChatLog, Day, Message
from line_talk_viewer.services.view.types import ChatView, DayView, MessageView, SearchHit

MESSAGE_KEY_RE = re.compile(r"([0-9]+)-([0-9]+)")


def filter_days(days: Iterable[Day], date_filter: str) -> list[Day]:
    if not date_filter:
        return list(days)
    return [day for day in days if date_filter in day.date]


def is_highlighted(message: Message, keyword: str) -> bool:
    return bool(keyword) and keyword in message.text


def is_mine(message: Message, current_user: str) -> bool:
    return message.user == current_user


def message_key(day_index: int, message_index: int) -> str:
    return f"{day_index}-{message_index}"


def search_messages(visible_days: Sequence[Day], keyword: str) -> list[SearchHit]:
    if not keyword:
        return []
    return [
        SearchHit(key=message_key(i, j), day=day, message=message)
        for i, day in enumerate(visible_days)
        for j, message in enumerate(day.messages)
        if keyword in message.text
    ]


def extract_users(days: Iterable[Day]) -> list[str]:
    return list(dict.fromkeys(message.user for day in days for message in day.messages))


def default_user(days: Iterable[Day], fallback: str = "") -> str:
    users = extract_users(days)
    return users[0] if users else fallback


def find_message(visible_days: Sequence[Day], key: str) -> SearchHit | None:
    match = MESSAGE_KEY_RE.fullmatch(key)
    if not match:
        return None
    day_index, message_index = int(match.group(1)), int(match.group(2))
    if message_key(day_index, message_index) != key:
        return None
    if day_index >= len(visible_days):
        return None
    day = visible_days[day_index]
    if message_index >= len(day.messages):
        return None
    return SearchHit(key=key, day=day, message=day.messages[message_index])


def build_view(
    chat: ChatLog | Sequence[Day],
    date_filter: str = "",
    keyword: str = "",
    current_user: str = "",
    fallback_user: str = "",
) -> ChatView:
    days = list(chat)
    users = extract_users(days)
    current = current_user or default_user(days, fallback_user)
    visible = filter_days(days, date_filter)
    day_views = [
        DayView(
            date=day.date,
            messages=[
                MessageView(
                    key=message_key(i, j),
                    message=message,
                    is_mine=is_mine(message, current),
                    highlighted=is_highlighted(message, keyword),
                )
                for j, message in enumerate(day.messages)
            ],
        )
        for i, day in enumerate(visible)
    ]
    return ChatView(
        days=day_views,
        search_hits=search_messages(visible, keyword),
        users=users,
        current_user=current,
    )
