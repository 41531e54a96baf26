"""Page-builder block rendering: typed blocks -> HTML, no template engine.

render_blocks is a pure function: the same blocks (and products) always
produce the same HTML, and no block ever raises. Unknown blocks render a
visible placeholder naming their type. Every config value is escaped or
sanitized before it reaches the markup.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from storefront.application.services.template_filters import format_money, truncate
from storefront.domain.entities.blocks import (
    HERO_DEFAULT_ACCENT,
    ContentBlock,
    GalleryBlock,
    HeroBlock,
    ImageBlock,
    ProductsBlock,
    TextBlock,
    UnknownBlock,
    VideoBlock,
)
from storefront.domain.entities.catalog import Product
from storefront.shared.utils.sanitization import HtmlSanitizer

PRODUCT_PLACEHOLDER_IMAGE = "https://picsum.photos/400/400"
EMPTY_PRODUCTS_MESSAGE = (
    "No products available yet. Add products in your dashboard to display them here."
)
VIDEO_PROMPT = "Add a YouTube or Vimeo URL"

_YOUTUBE_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)
_VIMEO_ID_RE = re.compile(r"vimeo\.com/(\d+)")
_SAFE_URL_RE = re.compile(r"^(https?://|/|#|mailto:)", re.IGNORECASE)
_CSS_URL_UNSAFE = str.maketrans("", "", "'\"()\\")

_attr = HtmlSanitizer.attr


def _safe_url(url: str | None, fallback: str = "#") -> str:
    """Allow http(s), site-relative, fragment and mailto URLs; anything else becomes fallback."""
    if url and _SAFE_URL_RE.match(url.strip()):
        return url.strip()
    return fallback


def _text(value: str | None) -> str:
    return _attr(value) if value else ""


def video_embed_url(url: str | None) -> str | None:
    """YouTube / Vimeo page URL -> embeddable player URL, else None."""
    if not url:
        return None
    if "youtube.com" in url or "youtu.be" in url:
        match = _YOUTUBE_ID_RE.search(url)
        return f"https://www.youtube.com/embed/{match.group(1)}" if match else None
    if "vimeo.com" in url:
        match = _VIMEO_ID_RE.search(url)
        return f"https://player.vimeo.com/video/{match.group(1)}" if match else None
    return None


def _editable_attrs(block: ContentBlock, editable: bool) -> str:
    if not editable:
        return ""
    return f' data-block-id="{_attr(block.id)}" data-block-type="{_attr(_type_name(block))}"'


def _type_name(block: ContentBlock) -> str:
    if isinstance(block, UnknownBlock):
        return block.type_name
    return block.type.value


def _render_hero(block: HeroBlock, ctx: _RenderContext) -> str:
    c = block.config
    if c.background_image:
        background = (
            "linear-gradient(rgba(0,0,0,0.3), rgba(0,0,0,0.3)), "
            f"url('{_safe_url(c.background_image, '').translate(_CSS_URL_UNSAFE)}')"
        )
    else:
        background = c.background
    subtitle = (
        f'<p class="hero-subtitle" style="color: {_attr(c.title_color)};">{_text(c.subtitle)}</p>'
        if c.subtitle
        else ""
    )
    button = ""
    if c.button_text:
        button = (
            f'<a class="hero-button" href="{_attr(_safe_url(c.button_link))}" '
            f'style="background: {_attr(c.button_color)}; '
            f'color: {_attr(c.background_color or HERO_DEFAULT_ACCENT)};">'
            f"{_text(c.button_text)}</a>"
        )
    return (
        f'<section class="block block-hero"{ctx.attrs(block)} '
        f'style="min-height: {_attr(c.height)}; background: {_attr(background)}; '
        f'background-size: cover; background-position: center;">'
        f'<div class="hero-inner">'
        f'<h1 style="color: {_attr(c.title_color)};">{_text(c.title)}</h1>'
        f"{subtitle}{button}"
        f"</div></section>"
    )


def _render_text(block: TextBlock, ctx: _RenderContext) -> str:
    c = block.config
    heading = (
        f'<h2 style="color: {_attr(c.text_color)};">{_text(c.heading)}</h2>'
        if c.heading
        else ""
    )
    return (
        f'<section class="block block-text"{ctx.attrs(block)} '
        f'style="background: {_attr(c.background_color)}; text-align: {_attr(c.text_align)};">'
        f"{heading}"
        f'<div class="text-content" style="color: {_attr(c.text_color)};">'
        f"{HtmlSanitizer.rich_text(c.content)}</div>"
        f"</section>"
    )


def _render_image(block: ImageBlock, ctx: _RenderContext) -> str:
    c = block.config
    img = f'<img src="{_attr(_safe_url(c.image_url, ""))}" alt="{_attr(c.alt)}" loading="lazy" />'
    if c.link:
        img = f'<a href="{_attr(_safe_url(c.link))}">{img}</a>'
    return f'<section class="block block-image"{ctx.attrs(block)}>{img}</section>'


def _product_card(product: Product, symbol: str) -> str:
    image = _safe_url(product.featured_image, PRODUCT_PLACEHOLDER_IMAGE)
    description = truncate(HtmlSanitizer.plain_text(product.description or ""), 120)
    price = format_money(product.price, symbol) if product.price is not None else ""
    return (
        f'<div class="product-card">'
        f'<a href="/products/{_attr(product.handle)}">'
        f'<img src="{_attr(image)}" alt="{_attr(product.title)}" loading="lazy" /></a>'
        f"<h3>{_text(product.title)}</h3>"
        f"<p>{description}</p>"
        f'<span class="price">{_attr(price)}</span>'
        f"</div>"
    )


def _render_products(block: ProductsBlock, ctx: _RenderContext) -> str:
    c = block.config
    heading = f"<h2>{_text(c.heading)}</h2>" if c.heading else ""
    products = list(ctx.products)[: c.limit]
    if products:
        cards = "".join(_product_card(p, ctx.currency_symbol) for p in products)
        body = f'<div class="product-grid">{cards}</div>'
    else:
        body = f'<p class="empty-state">{EMPTY_PRODUCTS_MESSAGE}</p>'
    return (
        f'<section class="block block-products"{ctx.attrs(block)} '
        f'style="background: {_attr(c.background_color)};">'
        f"{heading}{body}</section>"
    )


def _render_video(block: VideoBlock, ctx: _RenderContext) -> str:
    c = block.config
    heading = f"<h2>{_text(c.heading)}</h2>" if c.heading else ""
    embed = video_embed_url(c.video_url)
    if embed:
        body = (
            f'<div class="video-frame"><iframe src="{_attr(embed)}" frameborder="0" '
            'allow="accelerometer; autoplay; clipboard-write; encrypted-media; '
            'gyroscope; picture-in-picture" allowfullscreen></iframe></div>'
        )
    else:
        body = f'<div class="video-placeholder"><p>{VIDEO_PROMPT}</p></div>'
    return f'<section class="block block-video"{ctx.attrs(block)}>{heading}{body}</section>'


def _render_gallery(block: GalleryBlock, ctx: _RenderContext) -> str:
    images = "".join(
        f'<div class="gallery-item"><img src="{_attr(_safe_url(src, ""))}" '
        'alt="Gallery image" loading="lazy" /></div>'
        for src in block.config.images
    )
    return (
        f'<section class="block block-gallery"{ctx.attrs(block)}>'
        f'<div class="gallery-grid">{images}</div></section>'
    )


def _render_unknown(block: UnknownBlock, ctx: _RenderContext) -> str:
    name = block.type_name or "unknown"
    return (
        f'<div class="block block-unknown"{ctx.attrs(block)} '
        'style="padding: 60px 20px; text-align: center; background: #f5f5f5; '
        'border: 2px dashed #ccc; border-radius: 8px; margin: 20px;">'
        f"<p>\U0001f4e6 Block: {_attr(name)}</p></div>"
    )


class _RenderContext:
    __slots__ = ("products", "editable", "currency_symbol")

    def __init__(self, products: Sequence[Product], editable: bool, currency_symbol: str) -> None:
        self.products = products
        self.editable = editable
        self.currency_symbol = currency_symbol

    def attrs(self, block: ContentBlock) -> str:
        return _editable_attrs(block, self.editable)


_RENDERERS: dict[type, Callable[[Any, _RenderContext], str]] = {
    HeroBlock: _render_hero,
    TextBlock: _render_text,
    ImageBlock: _render_image,
    ProductsBlock: _render_products,
    VideoBlock: _render_video,
    GalleryBlock: _render_gallery,
    UnknownBlock: _render_unknown,
}


def render_block(
    block: ContentBlock,
    *,
    products: Sequence[Product] = (),
    editable: bool = False,
    currency_symbol: str = "€",
) -> str:
    """Render one block. Anything without a renderer gets the unknown placeholder."""
    ctx = _RenderContext(products, editable, currency_symbol)
    renderer = _RENDERERS.get(type(block))
    if renderer is None:
        placeholder = UnknownBlock(
            id=str(getattr(block, "id", "")),
            position=int(getattr(block, "position", 0) or 0),
            type_name=type(block).__name__,
        )
        return _render_unknown(placeholder, ctx)
    return renderer(block, ctx)


def render_blocks(
    blocks: Iterable[ContentBlock],
    *,
    products: Sequence[Product] = (),
    editable: bool = False,
    currency_symbol: str = "€",
) -> str:
    """Render blocks in position order (stable for equal positions) and concatenate.

    Args:
        blocks: Parsed blocks (see parse_blocks).
        products: Products shown by product-grid blocks (newest first).
        editable: Add data-block-id attributes for the page-builder preview.
        currency_symbol: Symbol used for product prices.
    """
    ordered = sorted(blocks, key=lambda b: b.position)
    return "".join(
        render_block(
            b, products=products, editable=editable, currency_symbol=currency_symbol
        )
        for b in ordered
    )
