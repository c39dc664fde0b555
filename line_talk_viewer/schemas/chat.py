from pydantic import BaseModel, Field


class MessageRead(BaseModel):
    time: str
    user: str
    text: str


class DayRead(BaseModel):
    date: str
    messages: list[MessageRead] = Field(default_factory=list)


class ChatLogRead(BaseModel):
    days: list[DayRead]
    users: list[str]
    default_user: str
    summary: dict


class ViewRequest(BaseModel):
    days: list[DayRead] = Field(default_factory=list)
    date_filter: str = ""
    keyword: str = ""
    current_user: str = ""


class LocateRequest(BaseModel):
    days: list[DayRead] = Field(default_factory=list)
    date_filter: str = ""
    key: str = Field(min_length=1)


class MessageViewRead(MessageRead):
    key: str
    is_mine: bool
    highlighted: bool


class DayViewRead(BaseModel):
    date: str
    messages: list[MessageViewRead]


class SearchHitRead(BaseModel):
    key: str
    date: str
    time: str
    user: str
    text: str
    label: str


class ChatViewRead(BaseModel):
    days: list[DayViewRead]
    search_hits: list[SearchHitRead]
    users: list[str]
    current_user: str
