"""
roll20.py  ––  Roll20 5e compendium page -> MonsterRecord
---------------------------------------------------------
Resolves a monster name (or full URL) to a compendium page, fetches it and
walks the parsed page:

    .page-title        -> record.name
    #pagecontent       -> record.description   (render_html)
    .attrListItem      -> apply_attribute(.attrName, .attrValue)

Only hosts listed in ALLOWED_DOMAINS are fetched.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlsplit

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag

from monster import MonsterRecord, apply_attribute
from render_html import render_html

logger = logging.getLogger(__name__)

# ---------- constants --------------------------------------------------------
BASE_URL        = "https://roll20.net/compendium/dnd5e/"
ALLOWED_DOMAINS = ("roll20.net",)
USER_AGENT      = "statblock/1.0 (+https://roll20.net/compendium/dnd5e)"
DEFAULT_TIMEOUT = 15.0

TITLE_SELECTOR   = ".page-title"
CONTENT_SELECTOR = "#pagecontent"
ITEM_SELECTOR    = ".attrListItem"
NAME_SELECTOR    = ".attrName"
VALUE_SELECTOR   = ".attrValue"


# ---------- errors -----------------------------------------------------------
class StatblockError(Exception):
    """Base class for errors raised while obtaining a monster page."""


class ForbiddenDomainError(StatblockError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"refusing to fetch {url}: host not in {ALLOWED_DOMAINS}")


class FetchError(StatblockError):
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"failed fetching {url}: {cause}")


# ---------- url handling -----------------------------------------------------
def resolve_url(target: str) -> str:
    """Accept a monster's name instead of a full URL."""
    target = target.strip()
    if BASE_URL not in target:
        target = BASE_URL + target
    return target


def check_domain(url: str) -> str:
    host = (urlsplit(url).hostname or "").lower()
    if host not in ALLOWED_DOMAINS:
        raise ForbiddenDomainError(url)
    return url


# ---------- fetching ---------------------------------------------------------
def new_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_page(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """GET *url* and return the body text.  Redirects stay on allowed hosts."""
    check_domain(url)
    session = session or new_session()
    logger.info("fetching %s", url)
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FetchError(url, e) from e
    check_domain(response.url or url)
    return response.text


# ---------- page walk --------------------------------------------------------
def child_text(tag: Tag, selector: str) -> str:
    """Concatenated text of every descendant matching *selector*, trimmed."""
    return "".join(el.get_text() for el in tag.select(selector)).strip()


def parse_monster(html: str, record: Optional[MonsterRecord] = None) -> MonsterRecord:
    soup   = BeautifulSoup(html, "lxml")
    record = record if record is not None else MonsterRecord()

    for title in soup.select(TITLE_SELECTOR):
        record.name = title.get_text().strip()

    for content in soup.select(CONTENT_SELECTOR):
        record.description = render_html(content)

    for item in soup.select(ITEM_SELECTOR):
        apply_attribute(
            record,
            child_text(item, NAME_SELECTOR),
            child_text(item, VALUE_SELECTOR),
        )

    if not record.name:
        logger.debug("no %s element on page", TITLE_SELECTOR)
    return record


def load_monster(
    target: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> MonsterRecord:
    url = check_domain(resolve_url(target))
    return parse_monster(fetch_page(url, session=session, timeout=timeout))
