"""Tests for page-builder block parsing."""

from storefront.domain.entities.blocks import (
    DEFAULT_TEXT_CONTENT,
    PRODUCTS_MAX_LIMIT,
    GalleryBlock,
    HeroBlock,
    ProductsBlock,
    TextBlock,
    UnknownBlock,
    parse_block,
    parse_blocks,
)


def test_parse_hero_with_defaults() -> None:
    block = parse_block({"id": "h1", "type": "hero", "position": 0})
    assert isinstance(block, HeroBlock)
    assert block.config.title == "Welcome to our store"
    assert block.config.height == "500px"
    assert block.config.button_text is None


def test_parse_hero_camel_case_config() -> None:
    block = parse_block(
        {
            "id": "h1",
            "type": "hero",
            "config": {"title": "Sale", "buttonText": "Shop", "buttonLink": "/collections/sale"},
        }
    )
    assert block.config.title == "Sale"
    assert block.config.button_text == "Shop"
    assert block.config.button_link == "/collections/sale"


def test_unknown_type_is_preserved() -> None:
    block = parse_block({"id": "x", "type": "carousel", "position": 2, "config": {"a": 1}})
    assert isinstance(block, UnknownBlock)
    assert block.type_name == "carousel"
    assert block.config == {"a": 1}
    assert block.position == 2


def test_malformed_blocks_never_raise() -> None:
    assert isinstance(parse_block("nope", 3), UnknownBlock)
    assert parse_block("nope", 3).type_name == "str"
    missing_type = parse_block({"id": "m"})
    assert isinstance(missing_type, UnknownBlock)
    assert missing_type.type_name == ""
    text = parse_block({"id": "t", "type": "text", "config": "not-a-dict"})
    assert isinstance(text, TextBlock)
    assert text.config.content == DEFAULT_TEXT_CONTENT


def test_products_limit_is_clamped() -> None:
    assert parse_block({"type": "products", "config": {"limit": 500}}).config.limit == PRODUCTS_MAX_LIMIT
    assert parse_block({"type": "products", "config": {"limit": 0}}).config.limit == 1
    assert parse_block({"type": "products", "config": {"limit": "abc"}}).config.limit == 4
    assert parse_block({"type": "products", "config": {"limit": "6"}}).config.limit == 6


def test_text_align_falls_back_to_left() -> None:
    block = parse_block({"type": "text", "config": {"textAlign": "diagonal"}})
    assert block.config.text_align == "left"


def test_gallery_ignores_non_string_images() -> None:
    block = parse_block({"type": "gallery", "config": {"images": ["a.jpg", 5, "", "b.jpg"]}})
    assert isinstance(block, GalleryBlock)
    assert block.config.images == ("a.jpg", "b.jpg")
    assert len(parse_block({"type": "gallery", "config": {"images": []}}).config.images) == 3


def test_parse_blocks_orders_by_position_stably() -> None:
    blocks = parse_blocks(
        [
            {"id": "c", "type": "text", "position": 2},
            {"id": "a", "type": "hero", "position": 1},
            {"id": "b", "type": "products", "position": 1},
        ]
    )
    assert [b.id for b in blocks] == ["a", "b", "c"]
    assert isinstance(blocks[1], ProductsBlock)


def test_parse_blocks_uses_index_when_position_missing() -> None:
    blocks = parse_blocks([{"id": "a", "type": "hero"}, {"id": "b", "type": "text", "position": True}])
    assert [b.position for b in blocks] == [0, 1]


def test_parse_blocks_non_list_is_empty() -> None:
    assert parse_blocks({"type": "hero"}) == []
    assert parse_blocks(None) == []
