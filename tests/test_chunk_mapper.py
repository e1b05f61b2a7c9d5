"""Tests mapper DataChunk → DroppedItem (best-effort, ne lève jamais)."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json

import pytest

from mnemo_blocks import (
    DataChunkLike, DroppedItem,
    map_chunk_to_item, map_chunks_to_items, programme_lookup, resolve_chunk_data,
    validate, dump_tree,
)

PROGRAMMES = {"prog-1": "J-PAL", "prog-2": "MIT J-WAFS"}


# ── resolve_chunk_data ────────────────────────────────────────────────────────

class TestResolveChunkData:
    def test_dict_passthrough(self):
        assert resolve_chunk_data({"content": "a"}) == {"content": "a"}

    def test_json_string_parsed(self):
        assert resolve_chunk_data('{"content": "a"}') == {"content": "a"}

    def test_plain_text_fallback(self):
        assert resolve_chunk_data("not json") == {"content": "not json"}

    def test_json_scalar_kept_as_text(self):
        assert resolve_chunk_data("42") == {"content": "42"}

    def test_none(self):
        assert resolve_chunk_data(None) == {}


# ── map_chunk_to_item ─────────────────────────────────────────────────────────

class TestMapChunk:
    def test_not_json_becomes_content(self):
        item = map_chunk_to_item({"id": 1, "type": "p", "data": "not json"})
        assert isinstance(item, DroppedItem)
        assert item.content == "not json"
        assert item.id == "1"

    def test_json_string_payload(self):
        data = json.dumps({"content": "Bonjour", "format": {"bold": True}})
        item = map_chunk_to_item({"id": 2, "type": "p", "data": data})
        assert item.content == "Bonjour"
        assert item.format.bold is True

    def test_content_defaults_to_empty(self):
        item = map_chunk_to_item({"id": 3, "type": "embed", "data": {}})
        assert item.content == ""

    def test_non_string_content_serialized(self):
        item = map_chunk_to_item({"id": 4, "type": "embed", "data": {"content": {"html": "<b>x</b>"}}})
        assert json.loads(item.content) == {"html": "<b>x</b>"}

    def test_chunk_type_aliases(self):
        assert map_chunk_to_item({"id": 1, "type": "text", "data": "a"}).type == "p"
        assert map_chunk_to_item({"id": 1, "type": "rich_text", "data": "a"}).type == "rich-text"
        assert map_chunk_to_item({"id": 1, "type": "image", "data": {}}).type == "img"
        assert map_chunk_to_item({"id": 1, "type": "embed", "data": "a"}).type == "embed"

    def test_image_from_url(self):
        item = map_chunk_to_item({"id": 5, "type": "image", "data": {"url": "https://cdn.example.com/a.png", "alt": "A"}})
        assert item.image.src == "https://cdn.example.com/a.png"
        assert item.image.alt == "A"
        assert item.image.width == 800
        assert item.image.height == 600

    def test_image_from_nested_shape(self):
        data = {"image": {"src": "/a.png", "alt": "A", "width": 100, "height": 50}}
        item = map_chunk_to_item({"id": 5, "type": "img", "data": data})
        assert (item.image.src, item.image.width, item.image.height) == ("/a.png", 100, 50)

    def test_image_bad_dimensions_fall_back(self):
        item = map_chunk_to_item({"id": 5, "type": "img", "data": {"url": "/a.png", "width": "large"}})
        assert item.image.src == "/a.png"
        assert item.image.width == 800

    def test_no_image_without_shape(self):
        assert map_chunk_to_item({"id": 6, "type": "p", "data": {"content": "x"}}).image is None

    def test_button(self):
        item = map_chunk_to_item({"id": 7, "type": "button", "data": {"button": {"url": "/go"}}})
        assert item.button.url == "/go"
        assert item.button.is_external is False

    def test_no_button_without_shape(self):
        assert map_chunk_to_item({"id": 7, "type": "button", "data": {"button": "nope"}}).button is None

    def test_loose_flags_dropped(self):
        data = {"content": "x", "button": {"url": "/go", "isExternal": "yes"}, "format": {"bold": 1}}
        item = map_chunk_to_item({"id": 7, "type": "button", "data": data})
        assert item.button is None
        assert item.format is None

    def test_invalid_optional_fields_dropped(self):
        data = {"content": "x", "format": "bold", "listType": "dotted", "link": 5, "containerType": ["a"]}
        item = map_chunk_to_item({"id": 8, "type": "p", "data": data})
        assert item.content == "x"
        assert item.format is None
        assert item.list_type is None
        assert item.link is None
        assert item.container_type is None

    def test_valid_optional_fields_kept(self):
        data = {"content": "x", "listType": "numbered", "containerType": "grid",
                "link": {"url": "https://x.org", "isExternal": True},
                "children": [{"id": "c1", "type": "p", "content": "child"}]}
        item = map_chunk_to_item({"id": 9, "type": "ul", "data": data})
        assert item.list_type == "numbered"
        assert item.container_type == "grid"
        assert item.link.is_external is True
        assert item.children[0].content == "child"

    def test_malformed_children_dropped(self):
        item = map_chunk_to_item({"id": 9, "type": "ul", "data": {"children": [{"content": "no id"}]}})
        assert item.children is None

    def test_list_data_never_raises(self):
        item = map_chunk_to_item({"id": 10, "type": "p", "data": [1, 2]})
        assert item.content == "[1, 2]"

    def test_accepts_model_instance(self):
        chunk = DataChunkLike(id="11", type="p", data="hello", programme_id="prog-2")
        item = map_chunk_to_item(chunk, PROGRAMMES)
        assert item.content == "hello"
        assert item.programme == "MIT J-WAFS"


# ── Programmes ────────────────────────────────────────────────────────────────

class TestProgramme:
    def test_resolved_short_title(self):
        item = map_chunk_to_item({"id": 1, "type": "p", "data": "a", "programme_id": "prog-1"}, PROGRAMMES)
        assert item.programme == "J-PAL"

    def test_camel_case_reference(self):
        item = map_chunk_to_item({"id": 1, "type": "p", "data": "a", "programmeId": "prog-1"}, PROGRAMMES)
        assert item.programme == "J-PAL"

    def test_unknown_programme_fallback(self):
        item = map_chunk_to_item({"id": 1, "type": "p", "data": "a", "programme_id": "nope"}, PROGRAMMES)
        assert item.programme == "Unknown"

    def test_no_lookup_given(self):
        assert map_chunk_to_item({"id": 1, "type": "p", "data": "a"}).programme == "Unknown"

    def test_programme_lookup(self):
        rows = [
            {"id": "a", "shortTitle": "J-PAL"},
            {"id": 2, "title": "Ankur"},
            {"id": "c"},
        ]
        assert programme_lookup(rows) == {"a": "J-PAL", "2": "Ankur"}


# ── Batch + cohérence avec le validateur ──────────────────────────────────────

def test_map_chunks_preserves_order():
    chunks = [{"id": i, "type": "p", "data": f"t{i}"} for i in range(3)]
    assert [i.content for i in map_chunks_to_items(chunks)] == ["t0", "t1", "t2"]


@pytest.mark.parametrize("chunk", [
    {"id": 1, "type": "text", "data": "Hello", "programme_id": "prog-1"},
    {"id": 2, "type": "image", "data": {"url": "https://cdn.example.com/a.png", "alt": "A"}},
    {"id": 3, "type": "rich_text", "data": "<p>Rich</p>"},
])
def test_mapped_known_chunks_pass_validation(chunk):
    item = map_chunk_to_item(chunk, PROGRAMMES)
    dumped = item.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert dump_tree(validate([dumped])) == [dumped]
