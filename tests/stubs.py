from __future__ import annotations

from tests import path_setup  # noqa: F401

from datetime import datetime
from pathlib import Path

from html2plain.fetch.fetcher import FetchedDoc

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def stub_fetch_url_factory(fixtures_dir: Path, url_map: dict[str, str]):
    def _stub(url: str, timeout_s: int = 30, user_agent: str = "", client=None) -> FetchedDoc:
        fixture_name = url_map[url]
        content = (fixtures_dir / fixture_name).read_bytes()
        return FetchedDoc(
            url=url,
            status_code=200,
            content=content,
            headers={"content-type": "text/html; charset=utf-8"},
            retrieved_at=datetime.utcnow(),
        )

    return _stub
