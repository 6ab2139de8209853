"""Tests for PDF discovery."""

import os
from pathlib import Path

import pytest

from grobid_batch.exceptions import DiscoveryError
from grobid_batch.orchestration.discovery import discover_pdfs, is_pdf_name


class TestIsPdfName:
    """Tests for the suffix rule."""

    @pytest.mark.parametrize("name", ["a.pdf", "b.PDF", "x.tar.pdf", ".pdf"])
    def test_accepted(self, name):
        assert is_pdf_name(name)

    @pytest.mark.parametrize("name", ["c.txt", "d.Pdf", "e.pDf", "f.pdf.bak", "pdf"])
    def test_rejected(self, name):
        assert not is_pdf_name(name)


class TestDiscoverPdfs:
    """Tests for the directory walk."""

    def test_finds_nested_pdfs(self, pdf_tree):
        """Test the a.pdf / b.PDF / c.txt / d/e.pdf tree."""
        jobs = list(discover_pdfs(pdf_tree))

        assert [j.file_name for j in jobs] == ["a.pdf", "b.PDF", "e.pdf"]
        assert jobs[2].source_path == pdf_tree / "d" / "e.pdf"

    def test_directory_named_like_pdf(self, tmp_path):
        """Test that a directory called x.pdf is entered, not submitted."""
        (tmp_path / "x.pdf").mkdir()
        (tmp_path / "x.pdf" / "inner.pdf").write_bytes(b"%PDF")

        jobs = list(discover_pdfs(tmp_path))

        assert [j.source_path for j in jobs] == [tmp_path / "x.pdf" / "inner.pdf"]

    def test_empty_tree(self, tmp_path):
        assert list(discover_pdfs(tmp_path)) == []

    def test_deep_tree(self, tmp_path):
        """Test discovery at arbitrary depth."""
        deep = tmp_path.joinpath(*[f"level{i}" for i in range(12)])
        deep.mkdir(parents=True)
        (deep / "deep.PDF").write_bytes(b"%PDF")

        jobs = list(discover_pdfs(tmp_path))

        assert len(jobs) == 1
        assert jobs[0].file_name == "deep.PDF"

    def test_missing_directory(self, tmp_path):
        """Test that a missing input directory raises DiscoveryError."""
        with pytest.raises(DiscoveryError) as exc_info:
            list(discover_pdfs(tmp_path / "nope"))
        assert "nope" in exc_info.value.path

    def test_file_as_input(self, tmp_path):
        """Test that passing a file instead of a directory raises DiscoveryError."""
        pdf = tmp_path / "a.pdf"
        pdf.write_bytes(b"%PDF")

        with pytest.raises(DiscoveryError):
            list(discover_pdfs(pdf))

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permissions are not enforced",
    )
    def test_unreadable_subdirectory(self, pdf_tree):
        """Test that a traversal error aborts discovery."""
        locked = pdf_tree / "d"
        locked.chmod(0o000)
        try:
            with pytest.raises(DiscoveryError):
                list(discover_pdfs(pdf_tree))
        finally:
            locked.chmod(0o755)

    def test_jobs_are_immutable(self, pdf_tree):
        job = next(discover_pdfs(pdf_tree))
        with pytest.raises(Exception):
            job.file_name = "other.pdf"

    def test_output_path(self, pdf_tree, tmp_path):
        """Test that the output path joins the directory and the name."""
        job = next(discover_pdfs(pdf_tree))
        assert job.output_path(tmp_path / "out") == Path(tmp_path / "out" / "a.pdf.tei.xml")
