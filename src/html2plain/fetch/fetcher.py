from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from email.message import Message

import httpx
from loguru import logger

from html2plain.config import DEFAULT_USER_AGENT


@dataclass
class FetchedDoc:
    url: str
    status_code: int
    content: bytes
    headers: dict[str, str]
    retrieved_at: datetime


def fetch_url(
    url: str,
    timeout_s: int = 30,
    user_agent: str = DEFAULT_USER_AGENT,
    client: httpx.Client | None = None,
) -> FetchedDoc:
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout_s, follow_redirects=True)
    try:
        response = client.get(url, headers={"User-Agent": user_agent})
        response.raise_for_status()
        logger.debug(f"Fetched {response.url} ({response.status_code}, {len(response.content)} bytes)")
        return FetchedDoc(
            url=str(response.url),
            status_code=response.status_code,
            content=response.content,
            headers={k.lower(): v for k, v in response.headers.items()},
            retrieved_at=datetime.utcnow(),
        )
    finally:
        if owns_client:
            client.close()


def content_charset(headers: dict[str, str]) -> str | None:
    content_type = headers.get("content-type")
    if not content_type:
        return None
    message = Message()
    message["content-type"] = content_type
    return message.get_content_charset()


def decode_content(doc: FetchedDoc) -> str:
    charset = content_charset(doc.headers) or "utf-8"
    try:
        return doc.content.decode(charset, errors="replace")
    except LookupError:
        logger.warning(f"Unknown charset {charset!r} for {doc.url}, decoding as utf-8")
        return doc.content.decode("utf-8", errors="replace")
