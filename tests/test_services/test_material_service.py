import pytest

from src.domain.errors import NoMaterialProvided
from src.services.material_service import (
    TRUNCATE_LIMIT,
    TRUNCATION_MARKER,
    aggregate_material,
)


class TestAggregateMaterial:
    """Tests for combining pasted text and file texts."""

    def test_pasted_text_precedes_files_in_upload_order(self):
        material = aggregate_material("pasted", ["first file", "second file"])
        assert material.text == "pasted\n\nfirst file\n\nsecond file"
        assert material.truncated is False

    def test_empty_pieces_are_skipped(self):
        material = aggregate_material("", ["", "only file", "   "])
        assert material.text == "only file"

    def test_files_only(self):
        assert aggregate_material(None, ["a", "b"]).text == "a\n\nb"

    @pytest.mark.parametrize("text_input,files", [
        ("", []),
        (None, []),
        ("", ["", ""]),
        ("  \n", ["\t"]),
    ])
    def test_no_material_raises(self, text_input, files):
        with pytest.raises(NoMaterialProvided):
            aggregate_material(text_input, files)

    def test_corpus_at_limit_is_unchanged(self):
        text = "x" * TRUNCATE_LIMIT
        material = aggregate_material(text, [])
        assert material.text == text
        assert material.truncated is False
        assert material.original_length == TRUNCATE_LIMIT

    def test_long_corpus_is_truncated_with_marker(self):
        text = "y" * (TRUNCATE_LIMIT + 500)
        material = aggregate_material(text, [])
        assert material.text == "y" * TRUNCATE_LIMIT + TRUNCATION_MARKER
        assert material.text.endswith("[truncated for token limit]")
        assert material.truncated is True
        assert material.original_length == TRUNCATE_LIMIT + 500

    def test_truncation_counts_separators(self):
        material = aggregate_material("a" * 10, ["b" * 10], limit=15)
        assert material.text == "a" * 10 + "\n\n" + "bbb" + TRUNCATION_MARKER
        assert material.original_length == 22
