from __future__ import annotations

import os
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup, Tag  # type: ignore

from .errors import FetchError
from .excerpt import Excerpt
from .logging_utils import debug_log

DEFAULT_BASE_URL = "https://yourei.jp"
DEFAULT_TIMEOUT = 30.0

ITEM_SELECTOR = 'ul.sentence-list > [id^="sentence-"]'
SENTENCE_SELECTOR = ".the-sentence"
PREV_SELECTOR = ".prev-sentence"
NEXT_SELECTOR = ".next-sentence"
SOURCE_SELECTOR = ".sentence-source-title"


def default_base_url() -> str:
    return os.environ.get("YOUREI_BASE_URL") or DEFAULT_BASE_URL


def default_timeout() -> float:
    raw = os.environ.get("YOUREI_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        debug_log(f"Ignoring invalid YOUREI_TIMEOUT={raw!r}")
        return DEFAULT_TIMEOUT


def build_search_url(
    word: str,
    *,
    number: int = 1,
    offset: int = 0,
    base_url: str | None = None,
) -> str:
    base = (base_url or default_base_url()).rstrip("/")
    # The site numbers results from 1.
    return f"{base}/{quote(word)}?n={number}&start={offset + 1}"


def fetch_page(
    url: str,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> str:
    client = session or requests
    debug_log(f"GET {url}")
    try:
        response = client.get(url, timeout=timeout or default_timeout())
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        # requests assumes Latin-1 for text/html without a charset.
        response.encoding = "utf-8"
    return response.text


def _inner_html(node: Tag) -> str:
    return "".join(str(child) for child in node.contents)


def _select_inner_html(item: Tag, selector: str) -> str | None:
    node = item.select_one(selector)
    if node is None:
        return None
    return _inner_html(node)


def _select_first_text(item: Tag, selector: str) -> str | None:
    node = item.select_one(selector)
    if node is None:
        return None
    text = node.find(string=True)
    return str(text) if text is not None else None


def extract_excerpts(html: str) -> list[Excerpt]:
    """Collect excerpts in page order, skipping items without a sentence."""
    soup = BeautifulSoup(html, "html.parser")
    excerpts: list[Excerpt] = []
    for item in soup.select(ITEM_SELECTOR):
        sentence = _select_inner_html(item, SENTENCE_SELECTOR)
        if sentence is None:
            continue
        excerpts.append(
            Excerpt(
                prev=_select_inner_html(item, PREV_SELECTOR),
                sentence=sentence,
                next=_select_inner_html(item, NEXT_SELECTOR),
                source=_select_first_text(item, SOURCE_SELECTOR),
            )
        )
    debug_log(f"Extracted {len(excerpts)} excerpt(s)")
    return excerpts


def search_excerpts(
    word: str,
    *,
    number: int = 1,
    offset: int = 0,
    timeout: float | None = None,
    base_url: str | None = None,
    session: requests.Session | None = None,
) -> list[Excerpt]:
    url = build_search_url(word, number=number, offset=offset, base_url=base_url)
    return extract_excerpts(fetch_page(url, timeout=timeout, session=session))
