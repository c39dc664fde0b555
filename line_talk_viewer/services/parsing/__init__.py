from line_talk_viewer.services.parsing.line import parse_chat_file, parse_line_chat
from line_talk_viewer.services.parsing.types import ChatLog, Day, Message

__all__ = ["ChatLog", "Day", "Message", "parse_chat_file", "parse_line_chat"]
