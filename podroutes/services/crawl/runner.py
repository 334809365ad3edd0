from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from podroutes.config import get_settings
from podroutes.services.archive_service import archive_view, crawl_archive
from podroutes.services.feed_service import render_feed


def run_feed() -> str:
    settings = get_settings()
    build_date = datetime.now(timezone.utc)
    years = asyncio.run(crawl_archive(settings))
    return render_feed(years, build_date=build_date, self_url=settings.feed_url, site_url=settings.origin)


def run_archive() -> str:
    build_date = datetime.now(timezone.utc)
    years = asyncio.run(crawl_archive(get_settings()))
    archive = archive_view(years, build_date)
    return json.dumps(archive.model_dump(), ensure_ascii=False, indent=2)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Crawl the American Routes archive")
    sub = parser.add_subparsers(dest="cmd", required=True)

    feed = sub.add_parser("feed", help="Crawl and print the podcast RSS feed")
    feed.add_argument("--out", help="Write the feed to this path instead of stdout")

    sub.add_parser("archive", help="Crawl and print the archive as JSON")

    serve = sub.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cmd == "feed":
        xml_text = run_feed()
        if args.out:
            with open(args.out, "w", encoding="utf-8") as f:
                f.write(xml_text)
            print(args.out)
        else:
            print(xml_text)
        return 0

    if args.cmd == "archive":
        print(run_archive())
        return 0

    if args.cmd == "serve":
        import uvicorn

        uvicorn.run("podroutes.main:app", host=args.host, port=args.port)
        return 0

    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
