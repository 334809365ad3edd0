from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from podroutes.config import DEFAULT_ORIGIN


MONTH_TOKENS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
# Reverse calendar order used to sort months within a year
MONTH_ORDER = tuple(reversed(MONTH_TOKENS))
YEAR_CUTOFF = 2024

_NUMERIC_SUFFIX_RE = re.compile(r"/(\d+)$", re.ASCII)
_YEAR_TOKEN_RE = re.compile(r"\b\d{4}\b", re.ASCII)
_FIRST_YEAR_RE = re.compile(r"\d{4}", re.ASCII)


@dataclass(frozen=True)
class AudioTrack:
    url: str
    label: str


@dataclass(frozen=True)
class Episode:
    page_url: str
    link_text: str
    title: str
    tracks: Tuple[AudioTrack, ...] = ()
    thumbnail_url: Optional[str] = None

    @property
    def has_tracks(self) -> bool:
        return len(self.tracks) > 0

    @property
    def sort_key(self) -> int:
        return numeric_suffix(self.page_url)


@dataclass(frozen=True)
class Month:
    label: str
    page_url: str
    episodes: Tuple[Episode, ...] = ()

    @property
    def published_episodes(self) -> List[Episode]:
        return [ep for ep in self.episodes if ep.has_tracks]


@dataclass(frozen=True)
class Year:
    label: str
    page_url: str
    months: Tuple[Month, ...] = ()

    @property
    def year(self) -> int:
        return first_year(self.label)


CrawlResult = List[Year]


@dataclass(frozen=True)
class Link:
    """An anchor discovered on a listing page, href already absolute."""

    href: str
    text: str


def resolve_url(href: str, origin: str = DEFAULT_ORIGIN) -> str:
    """Make a site-relative href absolute under ``origin``.

    Anything already starting with ``http`` is returned as-is.
    """
    if not href or href.startswith("http"):
        return href
    sep = "" if href.startswith("/") else "/"
    return f"{origin}{sep}{href}"


def numeric_suffix(url: str) -> int:
    """Trailing ``/<digits>`` of a URL as an int, or 0."""
    m = _NUMERIC_SUFFIX_RE.search(url or "")
    return int(m.group(1)) if m else 0


def year_tokens(text: str) -> List[int]:
    return [int(t) for t in _YEAR_TOKEN_RE.findall(text or "")]


def first_year(text: str) -> int:
    """First 4-digit run in ``text``, or 0."""
    m = _FIRST_YEAR_RE.search(text or "")
    return int(m.group(0)) if m else 0


def is_archived_year(text: str, cutoff: int = YEAR_CUTOFF) -> bool:
    # Any pre-cutoff token excludes the whole link, e.g. "2019-2024 Retrospective"
    return any(y < cutoff for y in year_tokens(text))


def sort_years(years: List[Year]) -> CrawlResult:
    """Newest first by the first 4-digit run in each label; stable for ties."""
    return sorted(years, key=lambda y: y.year, reverse=True)


def month_rank(label: str) -> int:
    try:
        return MONTH_ORDER.index(label)
    except ValueError:
        return len(MONTH_ORDER)


def flatten_episodes(years: CrawlResult) -> List[Tuple[Year, Month, Episode]]:
    """Depth-first walk of the archive keeping only episodes with tracks."""
    out: List[Tuple[Year, Month, Episode]] = []
    for year in years:
        for month in year.months:
            for ep in month.published_episodes:
                out.append((year, month, ep))
    return out


class Spider:
    """Minimal spider contract.

    Subclasses implement crawl() to return the full archive for one site.
    """

    name: str = "base"

    async def crawl(self) -> CrawlResult:
        raise NotImplementedError
