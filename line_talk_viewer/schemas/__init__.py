from line_talk_viewer.schemas.chat import (
    ChatLogRead,
    ChatViewRead,
    DayRead,
    DayViewRead,
    LocateRequest,
    MessageRead,
    MessageViewRead,
    SearchHitRead,
    ViewRequest,
)

__all__ = [
    "MessageRead",
    "DayRead",
    "ChatLogRead",
    "ViewRequest",
    "LocateRequest",
    "MessageViewRead",
    "DayViewRead",
    "SearchHitRead",
    "ChatViewRead",
]
