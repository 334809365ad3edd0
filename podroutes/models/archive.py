from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class AudioTrackOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    url: str
    label: str


class EpisodeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    page_url: str
    link_text: str
    title: str
    tracks: List[AudioTrackOut] = []
    thumbnail_url: Optional[str] = None


class MonthOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    page_url: str
    episodes: List[EpisodeOut] = []


class YearOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    page_url: str
    months: List[MonthOut] = []


class ArchiveOut(BaseModel):
    build_date: str
    year_count: int
    episode_count: int
    years: List[YearOut] = []
