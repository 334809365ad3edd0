"""Archive crawling subsystem.

Structure:
- base.py: record types and URL/sort utilities
- fetcher.py: cache-disabled async HTTP fetcher with a concurrency cap
- markup.py: selector-based query adapter over selectolax
- spiders/: the archive spider (root -> years -> months -> episodes)
- runner.py: tiny CLI entrypoint for manual runs

Uses httpx for transport and selectolax for parsing. Every layer degrades to an
empty result on failure; nothing here raises on a bad page.
"""
