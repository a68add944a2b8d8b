"""Unit tests for accumulator.py: merging inline runs into sections."""

import copy

from slackify.converter.accumulator import accumulate_inline, image_block, section_block


def _text(raw):
    return {"type": "text", "raw": raw}


def _image(url, title=None):
    attrs = {"url": url}
    if title is not None:
        attrs["title"] = title
    return {"type": "image", "attrs": attrs}


def _section_texts(blocks):
    return [b["text"]["text"] for b in blocks if b["type"] == "section"]


class TestBlockConstructors:

    def test_section_block_shape(self):
        assert section_block("hi") == {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "hi"},
        }

    def test_image_block_without_title_omits_title_key(self):
        block = image_block(_image("http://x/y.png"))
        assert block == {
            "type": "image",
            "image_url": "http://x/y.png",
            "alt_text": "http://x/y.png",
        }

    def test_image_block_with_title(self):
        block = image_block(_image("http://x/y.png", "A cat"))
        assert block["title"] == {"type": "plain_text", "text": "A cat"}
        assert block["alt_text"] == "A cat"


class TestAccumulateInline:

    def test_empty(self):
        assert accumulate_inline([]) == []

    def test_text_runs_merge_into_one_section(self):
        blocks = accumulate_inline([
            _text("Hello "),
            {"type": "strong", "children": [_text("world")]},
            _text("!"),
        ])
        assert blocks == [section_block("Hello *world*!")]

    def test_image_is_standalone(self):
        blocks = accumulate_inline([_image("http://x/y.png")])
        assert [b["type"] for b in blocks] == ["image"]

    def test_image_splits_text(self):
        blocks = accumulate_inline([
            _text("before"),
            _image("http://x/y.png"),
            _text("after"),
        ])
        assert [b["type"] for b in blocks] == ["section", "image", "section"]
        assert _section_texts(blocks) == ["before", "after"]

    def test_consecutive_images(self):
        blocks = accumulate_inline([_image("http://x/1.png"), _image("http://x/2.png")])
        assert [b["image_url"] for b in blocks] == ["http://x/1.png", "http://x/2.png"]

    def test_prefix_applied_once_per_section(self):
        blocks = accumulate_inline([_text("a"), _text("b")], prefix="> ")
        assert _section_texts(blocks) == ["> ab"]

    def test_prefix_applied_to_section_after_image(self):
        blocks = accumulate_inline(
            [_text("a"), _image("http://x/y.png"), _text("b")], prefix="> ",
        )
        assert _section_texts(blocks) == ["> a", "> b"]

    def test_input_not_mutated(self):
        tokens = [_text("a"), _image("http://x/y.png"), _text("b")]
        snapshot = copy.deepcopy(tokens)
        accumulate_inline(tokens)
        assert tokens == snapshot

    def test_accepts_iterators(self):
        blocks = accumulate_inline(iter([_text("a"), _text("b")]))
        assert _section_texts(blocks) == ["ab"]
