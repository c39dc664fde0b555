import logging

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from line_talk_viewer.core.config import get_settings
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
from line_talk_viewer.services.parsing import Day, Message, parse_line_chat
from line_talk_viewer.services.storage import read_upload_text
from line_talk_viewer.services.view import SearchHit, build_view, default_user, filter_days, find_message

router = APIRouter(prefix="/chat", tags=["chat"])
logger = logging.getLogger(__name__)


@router.post("/parse", response_model=ChatLogRead)
async def parse_upload(file: UploadFile = File(...)) -> ChatLogRead:
    text = await read_upload_text(file)
    chat = parse_line_chat(text)
    logger.info(
        "chat_parse_completed",
        extra={"upload_filename": file.filename, **chat.summary},
    )
    return ChatLogRead(
        days=[_day_read(day) for day in chat.days],
        users=list(chat.participants),
        default_user=default_user(chat.days, get_settings().default_user),
        summary=chat.summary,
    )


@router.post("/view", response_model=ChatViewRead)
def view_chat(payload: ViewRequest) -> ChatViewRead:
    view = build_view(
        _to_days(payload.days),
        date_filter=payload.date_filter,
        keyword=payload.keyword,
        current_user=payload.current_user,
        fallback_user=get_settings().default_user,
    )
    return ChatViewRead(
        days=[
            DayViewRead(
                date=day.date,
                messages=[
                    MessageViewRead(
                        key=row.key,
                        time=row.message.time,
                        user=row.message.user,
                        text=row.message.text,
                        is_mine=row.is_mine,
                        highlighted=row.highlighted,
                    )
                    for row in day.messages
                ],
            )
            for day in view.days
        ],
        search_hits=[_hit_read(hit) for hit in view.search_hits],
        users=view.users,
        current_user=view.current_user,
    )


@router.post("/locate", response_model=SearchHitRead)
def locate_message(payload: LocateRequest) -> SearchHitRead:
    visible = filter_days(_to_days(payload.days), payload.date_filter)
    hit = find_message(visible, payload.key)
    if hit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return _hit_read(hit)


def _to_days(rows: list[DayRead]) -> list[Day]:
    return [
        Day(date=row.date, messages=tuple(Message(time=m.time, user=m.user, text=m.text) for m in row.messages))
        for row in rows
    ]


def _day_read(day: Day) -> DayRead:
    return DayRead(
        date=day.date,
        messages=[MessageRead(time=m.time, user=m.user, text=m.text) for m in day.messages],
    )


def _hit_read(hit: SearchHit) -> SearchHitRead:
    return SearchHitRead(
        key=hit.key,
        date=hit.day.date,
        time=hit.message.time,
        user=hit.message.user,
        text=hit.message.text,
        label=hit.label,
    )
