"""
Unit tests for document discovery.
"""

import os

import pytest

from xml_node_search.services.document_source import (
    iter_documents,
    is_document_name,
    get_name_pattern,
    DOCUMENT_NAME_PATTERN,
    STRICT_DOCUMENT_NAME_PATTERN
)


class TestIsDocumentName:
    """Test file name matching."""

    @pytest.mark.parametrize("name", [
        "topic.xml", "TOPIC.XML", "book.ditamap", "Book.DitaMap",
    ])
    def test_accepts_xml_family_extensions(self, name):
        """Should accept .xml and .ditamap in any case."""
        assert is_document_name(name) is True
        assert is_document_name(name, strict_extension=True) is True

    @pytest.mark.parametrize("name", ["notes.txt", "xml", "topic.dita", "ditamap"])
    def test_rejects_other_names(self, name):
        """Names without '.xml' or '.ditamap' are rejected."""
        assert is_document_name(name) is False

    def test_permissive_pattern_matches_inside_name(self):
        """Default matching finds the extension anywhere in the name."""
        assert is_document_name("topic.xml.bak") is True
        assert is_document_name("a.ditamap.old") is True

    def test_strict_pattern_requires_suffix(self):
        """strict_extension anchors the extension to the end."""
        assert is_document_name("topic.xml.bak", strict_extension=True) is False

    def test_get_name_pattern(self):
        """Mode selects the pattern object."""
        assert get_name_pattern() is DOCUMENT_NAME_PATTERN
        assert get_name_pattern(strict_extension=True) is STRICT_DOCUMENT_NAME_PATTERN


class TestIterDocuments:
    """Test recursive enumeration."""

    @pytest.fixture
    def tree(self, make_document):
        make_document("a.xml", "<a/>")
        make_document("B.DITAMAP", "<map/>")
        make_document("notes.txt", "workbench")
        make_document("old.xml.bak", "<a/>")
        make_document("sub/c.xml", "<c/>")
        make_document("sub/deeper/d.xml", "<d/>")
        (make_document.root / "dir.xml").mkdir()
        return make_document.root

    def test_finds_documents_recursively(self, tree):
        """Should yield every qualifying regular file below the root."""
        found = {p.relative_to(tree).as_posix() for p in iter_documents(tree)}

        assert found == {
            "a.xml", "B.DITAMAP", "old.xml.bak", "sub/c.xml", "sub/deeper/d.xml"
        }

    def test_strict_extension(self, tree):
        """Strict mode drops names that only contain the extension."""
        found = {p.relative_to(tree).as_posix() for p in iter_documents(tree, strict_extension=True)}

        assert "old.xml.bak" not in found
        assert "a.xml" in found

    def test_directories_are_not_documents(self, tree):
        """A directory named like a document is not yielded."""
        found = [p.name for p in iter_documents(tree)]

        assert "dir.xml" not in found

    def test_deterministic_order(self, tree):
        """Files are yielded in name order, directories visited in name order."""
        found = [p.relative_to(tree).as_posix() for p in iter_documents(tree)]

        assert found == [
            "B.DITAMAP", "a.xml", "old.xml.bak", "sub/c.xml", "sub/deeper/d.xml"
        ]

    def test_is_lazy(self, tree):
        """iter_documents returns a generator."""
        documents = iter_documents(tree)

        assert next(documents).name == "B.DITAMAP"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_broken_symlink_skipped(self, tree):
        """Dangling links are not regular files."""
        os.symlink(tree / "missing.xml", tree / "broken.xml")

        found = [p.name for p in iter_documents(tree)]

        assert "broken.xml" not in found

    def test_empty_directory(self, tmp_path):
        """No documents, no output."""
        assert list(iter_documents(tmp_path)) == []
