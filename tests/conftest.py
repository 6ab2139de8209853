"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from grobid_batch.config.models import GrobidConfig

TEI_BODY = b"<TEI/>"


@pytest.fixture(autouse=True)
def no_config_search(monkeypatch):
    """Keep tests from picking up a config file from the developer's machine."""
    monkeypatch.setattr("grobid_batch.config.loader.CONFIG_SEARCH_PATHS", [])


@pytest.fixture
def grobid_config() -> GrobidConfig:
    """Configuration pointing at a fake GROBID server."""
    return GrobidConfig(host="grobid.test", port="8070", timeout=5.0)


@pytest.fixture
def pdf_tree(tmp_path: Path) -> Path:
    """Input tree: a.pdf, b.PDF, c.txt and d/e.pdf."""
    root = tmp_path / "input"
    (root / "d").mkdir(parents=True)
    (root / "a.pdf").write_bytes(b"%PDF-1.4 a")
    (root / "b.PDF").write_bytes(b"%PDF-1.4 b")
    (root / "c.txt").write_text("not a pdf")
    (root / "d" / "e.pdf").write_bytes(b"%PDF-1.4 e")
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory path (not yet created)."""
    return tmp_path / "output"


class FakeGrobid:
    """Records requests and answers like a GROBID server.

    Args:
        alive_status: Status returned by /api/isalive.
        body: Body returned by processing endpoints.
        fail_files: Upload file names answered with a connection error.
    """

    def __init__(
        self,
        alive_status: int = 200,
        body: bytes = TEI_BODY,
        fail_files: tuple[str, ...] = (),
    ):
        self.alive_status = alive_status
        self.body = body
        self.fail_files = set(fail_files)
        self.alive_calls = 0
        self.uploads: list[tuple[str, str]] = []  # (path, file name)

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/isalive":
            self.alive_calls += 1
            return httpx.Response(self.alive_status, text="true")

        file_name = _upload_file_name(request)
        self.uploads.append((request.url.path, file_name))
        if file_name in self.fail_files:
            raise httpx.ConnectError("connection reset", request=request)
        return httpx.Response(200, content=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def uploaded_names(self) -> list[str]:
        return sorted(name for _, name in self.uploads)


def _upload_file_name(request: httpx.Request) -> str:
    """Pull the file name of the "input" part out of a multipart body."""
    content = request.content
    marker = b'name="input"; filename="'
    start = content.index(marker) + len(marker)
    end = content.index(b'"', start)
    return content[start:end].decode()


@pytest.fixture
def fake_grobid() -> Callable[..., FakeGrobid]:
    """Factory for fake GROBID servers."""
    return FakeGrobid
