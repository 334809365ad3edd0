"""HTML browse page for manually inspecting a crawl.

Renders the same archive the feed is built from: years, then months, then the
episodes that have qualifying tracks.
"""

from __future__ import annotations

import html as _html
from typing import List

from podroutes.services.crawl.base import CrawlResult, Episode, Month, Year


PAGE_TITLE = "amroutes rss generator"

_STYLE = """
body { font-family: system-ui, sans-serif; background: #f1f5f9; color: #0f172a; margin: 0; padding: 3rem 1rem; }
main { max-width: 72rem; margin: 0 auto; }
section.year { background: #fff; border-radius: .5rem; box-shadow: 0 4px 12px rgba(0,0,0,.08); padding: 1.5rem; margin-bottom: 1.5rem; }
div.month { border-left: 4px solid #cbd5e1; padding-left: 1rem; margin-bottom: 1rem; }
div.episode { background: #f8fafc; padding: .75rem; border-radius: .25rem; margin-bottom: .75rem; }
div.episode img { max-height: 4rem; float: right; }
a { color: #2563eb; }
ul.tracks a { color: #16a34a; }
p.empty { color: #64748b; font-size: .875rem; }
"""

_NAV_STYLE = """
header { background: #fff; border-bottom: 1px solid #e2e8f0; }
header nav { display: flex; gap: 2rem; max-width: 72rem; margin: 0 auto; padding: 1.25rem 1rem; }
header nav a { color: #334155; font-weight: 500; text-decoration: none; }
"""


def _esc(text: str) -> str:
    return _html.escape(text or "", quote=True)


def _link(href: str, label: str) -> str:
    return f'<a href="{_esc(href)}" target="_blank" rel="noopener noreferrer">{_esc(label)}</a>'


NAV_LINKS = (("/", "Home"), ("/podroutes", "Podroutes"), ("/api/feed", "RSS Feed"))


def _header() -> str:
    links = "".join(f'<a href="{_esc(href)}">{_esc(label)}</a>' for href, label in NAV_LINKS)
    return f'<header><nav>{links}</nav></header>'


def _render_episode(episode: Episode, index: int) -> str:
    label = episode.title or f"Episode {index + 1}"
    thumb = f'<img src="{_esc(episode.thumbnail_url)}" alt="">' if episode.thumbnail_url else ""
    tracks = "".join(f"<li>{_link(t.url, t.label)}</li>" for t in episode.tracks)
    return f'<div class="episode">{thumb}{_link(episode.page_url, label)}<ul class="tracks">{tracks}</ul></div>'


def _render_month(month: Month) -> str:
    episodes = month.published_episodes
    if not episodes:
        body = '<p class="empty">No episodes found</p>'
    else:
        body = "".join(_render_episode(ep, i) for i, ep in enumerate(episodes))
    return f'<div class="month"><h3>{_link(month.page_url, month.label)}</h3>{body}</div>'


def _render_year(year: Year) -> str:
    if not year.months:
        body = '<p class="empty">No months found</p>'
    else:
        body = "".join(_render_month(m) for m in year.months)
    return f'<section class="year"><h2>{_link(year.page_url, year.label)}</h2>{body}</section>'


def render_browse_page(years: CrawlResult) -> str:
    parts: List[str] = []
    if not years:
        parts.append('<p class="empty">No links found in archive-1</p>')
    else:
        parts.extend(_render_year(y) for y in years)
    content = "\n".join(parts)
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{PAGE_TITLE}</title>
  <style>{_STYLE}{_NAV_STYLE}</style>
</head>
<body>
{_header()}
<main>
  <h1>{PAGE_TITLE}</h1>
{content}
</main>
</body>
</html>
"""


def render_index_page() -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{PAGE_TITLE}</title>
</head>
<body style="margin:0;font-family:system-ui,sans-serif">
<style>{_NAV_STYLE}</style>
{_header()}
<main style="display:flex;flex-direction:column;min-height:80vh;align-items:center;justify-content:center;text-align:center">
  <h1>Hello sailor</h1>
  <h2>nothing happens here</h2>
</main>
</body>
</html>
"""
