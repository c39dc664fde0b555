from line_talk_viewer.services.view.projection import (
    build_view,
    default_user,
    extract_users,
    filter_days,
    find_message,
    is_highlighted,
    is_mine,
    message_key,
    search_messages,
)
from line_talk_viewer.services.view.types import ChatView, DayView, MessageView, SearchHit

__all__ = [
    "ChatView",
    "DayView",
    "MessageView",
    "SearchHit",
    "build_view",
    "default_user",
    "extract_users",
    "filter_days",
    "find_message",
    "is_highlighted",
    "is_mine",
    "message_key",
    "search_messages",
]
