"""Tests payload data chunk (écriture) — text / rich_text / image + metaData."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mnemo_blocks import ChunkPayloadError, map_chunk_payload


class TestTextPayload:
    def test_text_trimmed_and_meta_defaults(self):
        r = map_chunk_payload("  Hello World!  ", {"editor": "Alice"}, "text")
        assert r.data == "Hello World!"
        assert r.metaData.version == "1.0"
        assert r.metaData.editor == "Alice"
        assert r.metaData.datePublished is None
        assert r.metaData.website is None
        assert r.metaData.keywords == []

    def test_full_meta(self):
        r = map_chunk_payload("Hello", {
            "version": "1.2", "editor": "Alice", "datePublished": "2024-03-18",
            "website": "https://example.com", "keywords": ["data", "text"],
        }, "rich_text")
        assert r.model_dump() == {
            "data": "Hello",
            "metaData": {
                "version": "1.2", "editor": "Alice", "datePublished": "2024-03-18",
                "website": "https://example.com", "keywords": ["data", "text"],
            },
        }

    def test_rich_text_kept_verbatim(self):
        r = map_chunk_payload("<h1>Hello</h1><p>World</p>", {"editor": "Bob"}, "rich_text")
        assert r.data == "<h1>Hello</h1><p>World</p>"

    def test_keywords_lowercased_and_deduplicated(self):
        r = map_chunk_payload("x", {"editor": "John", "keywords": ["AI", "AI", "Machine Learning", "machine learning", 3]}, "text")
        assert r.metaData.keywords == ["ai", "machine learning"]

    @pytest.mark.parametrize("data", ["", "   ", None, 12])
    def test_empty_text_rejected(self, data):
        with pytest.raises(ChunkPayloadError, match="Invalid text data: must be a non-empty string."):
            map_chunk_payload(data, {"editor": "Alice"}, "text")


class TestImagePayload:
    def test_image(self):
        r = map_chunk_payload("https://cdn.example.com/uploads/test-image.jpg",
                              {"editor": "Charlie", "alt": "A beautiful landscape"}, "image")
        assert r.data.url == "https://cdn.example.com/uploads/test-image.jpg"
        assert r.data.alt == "A beautiful landscape"

    def test_image_default_alt(self):
        r = map_chunk_payload("https://cdn.example.com/a.jpg", {"editor": "Charlie"}, "image")
        assert r.data.alt == "Image without description"

    def test_invalid_url(self):
        with pytest.raises(ChunkPayloadError, match="Invalid image data: must be a valid URL."):
            map_chunk_payload("invalid-url", {"editor": "Charlie"}, "image")


class TestMetaErrors:
    def test_editor_required(self):
        with pytest.raises(ChunkPayloadError, match="Editor is required in metaData."):
            map_chunk_payload("Hello", {}, "rich_text")

    def test_blank_editor(self):
        with pytest.raises(ChunkPayloadError, match="Editor is required"):
            map_chunk_payload("Hello", {"editor": "  "}, "text")

    def test_meta_must_be_object(self):
        with pytest.raises(ChunkPayloadError, match="Invalid metaData: must be an object."):
            map_chunk_payload("Hello", None, "text")

    def test_unsupported_type(self):
        with pytest.raises(ChunkPayloadError, match="Unsupported chunk type"):
            map_chunk_payload("Hello", {"editor": "A"}, "embed")
