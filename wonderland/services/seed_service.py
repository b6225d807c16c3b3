# wonderland/services/seed_service.py
"""
샘플 데이터 시드 - 테이블이 비어 있을 때만 삽입
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import GalleryImage, Song, TimelineEvent
from wonderland.utils.logger import logger

_UNSPLASH = "https://images.unsplash.com/photo-{id}?auto=format&fit=crop&w={w}&q={q}"

TIMELINE_EVENTS = [
    {
        "title": "Early December · Set the mood",
        "event_date": "Early December",
        "meta": "Decorate the room · Light the tree · Pick a Christmas playlist",
        "description": "Start with a new wallpaper, some fairy lights and a small tree, and ease into Christmas mode.",
        "sort_order": 1,
    },
    {
        "title": "Mid December · Prepare gifts",
        "event_date": "Mid December",
        "meta": "Little surprises for yourself and the people who matter",
        "description": "It does not have to be expensive. A handwritten card, a photo or a keepsake often means more.",
        "sort_order": 2,
    },
    {
        "title": "December 24 · Christmas Eve",
        "event_date": "December 24",
        "meta": "Late snacks · Movies · Countdown",
        "description": "Plan a cosy movie night with hot cocoa and relax with friends, family or just yourself.",
        "sort_order": 3,
    },
    {
        "title": "December 25 · Christmas Day",
        "event_date": "December 25",
        "meta": "Open gifts · Take photos · Keep the last warmth of the year",
        "description": "Take a few \"this year's Christmas\" photos. Someday you will be glad you did.",
        "sort_order": 4,
    },
]

SONGS = [
    {"title": "Jingle Bells", "artist": "Various Artists", "tag": "Classic · Cheerful", "sort_order": 1},
    {"title": "Silent Night", "artist": "Various Artists", "tag": "Quiet · Gentle", "sort_order": 2},
    {"title": "We Wish You a Merry Christmas", "artist": "Various Artists", "tag": "Choir · Festive", "sort_order": 3},
    {"title": "Last Christmas", "artist": "Wham!", "tag": "Pop · Nostalgic", "sort_order": 4},
    {"title": "All I Want for Christmas Is You", "artist": "Mariah Carey", "tag": "Pop · Classic", "sort_order": 5},
]

GALLERY_IMAGES = [
    ("1543589077-47d81606c1bf", "Cosy living room · Hot Cocoa", "decoration"),
    ("1512389142860-9c449e58a543", "Christmas tree · Night Lights", "tree"),
    ("1512922124720-5166f2b3333f", "Gift exchange · Gift Time", "gifts"),
    ("1511117833895-4b473c0b1ca2", "Snowy street · Winter Street", "outdoor"),
    ("1544207240-42884e7fd55e", "Gingerbread house · Gingerbread", "food"),
    ("1543709530-dcac245be8c6", "Cute antlers · Reindeer", "decoration"),
]


async def _is_empty(session: AsyncSession, model) -> bool:
    count = (await session.execute(select(func.count()).select_from(model))).scalar_one()
    return count == 0


async def seed_sample_data(session: AsyncSession):
    if await _is_empty(session, TimelineEvent):
        session.add_all(TimelineEvent(**event) for event in TIMELINE_EVENTS)
        logger.info(f" 타임라인 샘플 {len(TIMELINE_EVENTS)}건 삽입")

    if await _is_empty(session, Song):
        session.add_all(Song(url="", **song) for song in SONGS)
        logger.info(f" 플레이리스트 샘플 {len(SONGS)}건 삽입")

    if await _is_empty(session, GalleryImage):
        session.add_all(
            GalleryImage(
                image_url=_UNSPLASH.format(id=photo_id, w=1200, q=80),
                thumbnail_url=_UNSPLASH.format(id=photo_id, w=600, q=60),
                label=label,
                category=category,
            )
            for photo_id, label, category in GALLERY_IMAGES
        )
        logger.info(f" 갤러리 샘플 {len(GALLERY_IMAGES)}건 삽입")

    await session.commit()
