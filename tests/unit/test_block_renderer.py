"""Tests for block rendering (HTML output, escaping, editable markers)."""

from storefront.application.services.block_renderer import (
    EMPTY_PRODUCTS_MESSAGE,
    VIDEO_PROMPT,
    render_block,
    render_blocks,
    video_embed_url,
)
from storefront.domain.entities.blocks import UnknownBlock, parse_block, parse_blocks
from tests.conftest import make_product


def test_unknown_block_renders_placeholder() -> None:
    html = render_block(UnknownBlock(id="x", position=0, type_name="carousel"))
    assert "block-unknown" in html
    assert "Block: carousel" in html


def test_unknown_block_without_type_name() -> None:
    assert "Block: unknown" in render_block(UnknownBlock(id="x", position=0, type_name=""))


def test_editable_adds_block_markers() -> None:
    block = parse_block({"id": "b1", "type": "hero"})
    assert 'data-block-id="b1" data-block-type="hero"' in render_block(block, editable=True)
    assert "data-block-id" not in render_block(block)


def test_editable_marks_unknown_blocks() -> None:
    block = UnknownBlock(id="u1", position=0, type_name="carousel")
    assert 'data-block-type="carousel"' in render_block(block, editable=True)


def test_hero_escapes_config_values() -> None:
    block = parse_block(
        {"type": "hero", "config": {"title": "<script>alert(1)</script>", "subtitle": 'a"b'}}
    )
    html = render_block(block)
    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "a&quot;b" in html


def test_hero_button_rejects_javascript_links() -> None:
    block = parse_block(
        {"type": "hero", "config": {"buttonText": "Go", "buttonLink": "javascript:alert(1)"}}
    )
    html = render_block(block)
    assert 'href="#"' in html
    assert "javascript:" not in html


def test_hero_background_image_cannot_break_out_of_css_url() -> None:
    block = parse_block(
        {"type": "hero", "config": {"backgroundImage": "https://img.test/a.jpg');color:red;('"}}
    )
    html = render_block(block)
    assert "url(&#x27;https://img.test/a.jpg;color:red;&#x27;)" in html


def test_text_block_sanitizes_rich_text() -> None:
    block = parse_block(
        {"type": "text", "config": {"content": "<p>Hello <b>there</b></p><script>alert(1)</script>"}}
    )
    html = render_block(block)
    assert "<p>Hello <b>there</b></p>" in html
    assert "script" not in html


def test_image_block_with_link() -> None:
    block = parse_block(
        {"type": "image", "config": {"imageUrl": "https://img.test/a.jpg", "alt": "A", "link": "/sale"}}
    )
    html = render_block(block)
    assert '<a href="/sale"><img src="https://img.test/a.jpg" alt="A"' in html


def test_products_block_empty_state() -> None:
    html = render_block(parse_block({"type": "products"}))
    assert EMPTY_PRODUCTS_MESSAGE in html


def test_products_block_respects_limit_and_formats_price() -> None:
    products = [make_product("a", 1000), make_product("b", 2000), make_product("c", 3000)]
    block = parse_block({"type": "products", "config": {"limit": 2, "heading": "New"}})
    html = render_block(block, products=products, currency_symbol="$")
    assert html.count('class="product-card"') == 2
    assert "<h2>New</h2>" in html
    assert "$10.00" in html
    assert 'href="/products/c"' not in html


def test_products_block_placeholder_image() -> None:
    product = make_product("a", images=[])
    html = render_block(parse_block({"type": "products"}), products=[product])
    assert "https://picsum.photos/400/400" in html


def test_video_embed_urls() -> None:
    assert video_embed_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == (
        "https://www.youtube.com/embed/dQw4w9WgXcQ"
    )
    assert video_embed_url("https://youtu.be/dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"
    assert video_embed_url("https://vimeo.com/76979871") == "https://player.vimeo.com/video/76979871"
    assert video_embed_url("https://example.com/video.mp4") is None
    assert video_embed_url(None) is None


def test_video_block_without_url_prompts() -> None:
    assert VIDEO_PROMPT in render_block(parse_block({"type": "video"}))


def test_video_block_embeds_player() -> None:
    block = parse_block({"type": "video", "config": {"videoUrl": "https://vimeo.com/76979871"}})
    assert '<iframe src="https://player.vimeo.com/video/76979871"' in render_block(block)


def test_gallery_drops_unsafe_sources() -> None:
    block = parse_block({"type": "gallery", "config": {"images": ["javascript:x", "https://img.test/1.jpg"]}})
    html = render_block(block)
    assert 'src=""' in html
    assert 'src="https://img.test/1.jpg"' in html


def test_render_blocks_orders_and_concatenates() -> None:
    blocks = parse_blocks(
        [
            {"id": "t", "type": "text", "position": 1, "config": {"content": "<p>second</p>"}},
            {"id": "h", "type": "hero", "position": 0, "config": {"title": "first"}},
        ]
    )
    html = render_blocks(reversed(blocks))
    assert html.index("first") < html.index("second")


def test_render_blocks_is_deterministic() -> None:
    blocks = parse_blocks([{"type": "hero"}, {"type": "gallery"}, {"type": "mystery"}])
    assert render_blocks(blocks) == render_blocks(blocks)
    assert render_blocks([]) == ""
