"""
Fetch a book description from OpenLibrary.

GET <works_url with identifier>, e.g. https://openlibrary.org/works/OL31390631M.json,
returns JSON of the form:

    {"description": {"type": "/type/text", "value": "..."}, ...}

Some works carry `description` as a bare string instead; both shapes are
accepted. Anything else (transport failure, non-200 status, non-JSON body,
missing description) is a FetchError.
"""

from __future__ import annotations

import requests

from hangman.config import GameConfig, DEFAULT_CONFIG
from hangman.errors import FetchError


def works_url(identifier: str, config: GameConfig = DEFAULT_CONFIG) -> str:
    return config.works_url.format(identifier=identifier)


def _extract_description(data) -> str:
    desc = data.get("description") if isinstance(data, dict) else None
    if isinstance(desc, dict):
        desc = desc.get("value")
    if not isinstance(desc, str):
        raise FetchError("response has no description text")
    return desc


def fetch_raw_text(identifier: str, config: GameConfig = DEFAULT_CONFIG) -> str:
    """
    Download the description text for book `identifier`.

    Raises:
      FetchError: on transport errors, a non-200 status or a malformed body.
        `status_code` is set whenever the server answered.
    """
    url = works_url(identifier, config)
    try:
        r = requests.get(url, headers={"Content-Type": "application/json"},
                         timeout=config.timeout)
    except requests.RequestException as e:
        raise FetchError(f"GET {url} failed: {e}") from e

    if r.status_code != 200:
        raise FetchError(f"The HTTP GET request failed: {url} -> {r.status_code}",
                         status_code=r.status_code)
    try:
        data = r.json()
    except ValueError as e:
        raise FetchError(f"GET {url} returned a non-JSON body",
                         status_code=r.status_code) from e

    try:
        return _extract_description(data)
    except FetchError as e:
        e.status_code = r.status_code
        raise
