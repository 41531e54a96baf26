"""Page-builder content blocks.

A page is an ordered list of blocks. Each known block type has its own typed
configuration with documented defaults; anything else becomes an UnknownBlock
so a page with malformed or experimental data still renders.

Block JSON (from the page builder and the pages table) looks like::

    {"id": "b1", "type": "hero", "position": 0, "config": {"title": "Hi"}}

Config keys are camelCase on the wire (backgroundImage, buttonText, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from storefront.domain.enums import BlockType

HERO_DEFAULT_BACKGROUND = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"
HERO_DEFAULT_ACCENT = "#4f46e5"
DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=800&h=400&fit=crop"
)
DEFAULT_GALLERY_IMAGE = "https://via.placeholder.com/400x400"
DEFAULT_TEXT_CONTENT = "<p>Add your text here...</p>"
PRODUCTS_DEFAULT_LIMIT = 4
PRODUCTS_MAX_LIMIT = 50


def _str(config: dict[str, Any], key: str, default: str | None = None) -> str | None:
    """Return config[key] as a non-empty string, else default. Numbers are stringified."""
    value = config.get(key)
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return default


def _int(config: dict[str, Any], key: str, default: int, *, lo: int, hi: int) -> int:
    value = config.get(key)
    if isinstance(value, bool):
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return max(lo, min(hi, parsed))


@dataclass(frozen=True)
class HeroConfig:
    title: str = "Welcome to our store"
    subtitle: str | None = None
    background_image: str | None = None
    background_color: str | None = None
    title_color: str = "#ffffff"
    height: str = "500px"
    button_text: str | None = None
    button_link: str = "#"
    button_color: str = "#ffffff"

    @classmethod
    def from_config(cls, c: dict[str, Any]) -> HeroConfig:
        return cls(
            title=_str(c, "title", cls.title),
            subtitle=_str(c, "subtitle"),
            background_image=_str(c, "backgroundImage"),
            background_color=_str(c, "backgroundColor"),
            title_color=_str(c, "titleColor", cls.title_color),
            height=_str(c, "height", cls.height),
            button_text=_str(c, "buttonText"),
            button_link=_str(c, "buttonLink", cls.button_link),
            button_color=_str(c, "buttonColor", cls.button_color),
        )

    @property
    def background(self) -> str:
        """CSS background: darkened image, else configured color, else the default gradient."""
        if self.background_image:
            return (
                "linear-gradient(rgba(0,0,0,0.3), rgba(0,0,0,0.3)), "
                f"url('{self.background_image}')"
            )
        return self.background_color or HERO_DEFAULT_BACKGROUND


@dataclass(frozen=True)
class TextConfig:
    heading: str | None = None
    content: str = DEFAULT_TEXT_CONTENT
    text_align: str = "left"
    text_color: str = "#333333"
    background_color: str = "#ffffff"

    @classmethod
    def from_config(cls, c: dict[str, Any]) -> TextConfig:
        align = _str(c, "textAlign", cls.text_align)
        return cls(
            heading=_str(c, "heading"),
            content=_str(c, "content", cls.content),
            text_align=align if align in ("left", "center", "right", "justify") else cls.text_align,
            text_color=_str(c, "textColor", cls.text_color),
            background_color=_str(c, "backgroundColor", cls.background_color),
        )


@dataclass(frozen=True)
class ImageConfig:
    image_url: str = DEFAULT_IMAGE_URL
    alt: str = "Image"
    link: str | None = None

    @classmethod
    def from_config(cls, c: dict[str, Any]) -> ImageConfig:
        return cls(
            image_url=_str(c, "imageUrl", cls.image_url),
            alt=_str(c, "alt", cls.alt),
            link=_str(c, "link"),
        )


@dataclass(frozen=True)
class ProductsConfig:
    heading: str | None = None
    limit: int = PRODUCTS_DEFAULT_LIMIT
    background_color: str = "#f9fafb"

    @classmethod
    def from_config(cls, c: dict[str, Any]) -> ProductsConfig:
        return cls(
            heading=_str(c, "heading"),
            limit=_int(c, "limit", PRODUCTS_DEFAULT_LIMIT, lo=1, hi=PRODUCTS_MAX_LIMIT),
            background_color=_str(c, "backgroundColor", cls.background_color),
        )


@dataclass(frozen=True)
class VideoConfig:
    heading: str | None = None
    video_url: str | None = None

    @classmethod
    def from_config(cls, c: dict[str, Any]) -> VideoConfig:
        return cls(heading=_str(c, "heading"), video_url=_str(c, "videoUrl"))


@dataclass(frozen=True)
class GalleryConfig:
    images: tuple[str, ...] = (DEFAULT_GALLERY_IMAGE,) * 3

    @classmethod
    def from_config(cls, c: dict[str, Any]) -> GalleryConfig:
        raw = c.get("images")
        if isinstance(raw, list):
            images = tuple(i for i in raw if isinstance(i, str) and i.strip())
            if images:
                return cls(images=images)
        return cls()


@dataclass(frozen=True)
class HeroBlock:
    id: str
    position: int
    config: HeroConfig = field(default_factory=HeroConfig)
    type: ClassVar[BlockType] = BlockType.HERO


@dataclass(frozen=True)
class TextBlock:
    id: str
    position: int
    config: TextConfig = field(default_factory=TextConfig)
    type: ClassVar[BlockType] = BlockType.TEXT


@dataclass(frozen=True)
class ImageBlock:
    id: str
    position: int
    config: ImageConfig = field(default_factory=ImageConfig)
    type: ClassVar[BlockType] = BlockType.IMAGE


@dataclass(frozen=True)
class ProductsBlock:
    id: str
    position: int
    config: ProductsConfig = field(default_factory=ProductsConfig)
    type: ClassVar[BlockType] = BlockType.PRODUCTS


@dataclass(frozen=True)
class VideoBlock:
    id: str
    position: int
    config: VideoConfig = field(default_factory=VideoConfig)
    type: ClassVar[BlockType] = BlockType.VIDEO


@dataclass(frozen=True)
class GalleryBlock:
    id: str
    position: int
    config: GalleryConfig = field(default_factory=GalleryConfig)
    type: ClassVar[BlockType] = BlockType.GALLERY


@dataclass(frozen=True)
class UnknownBlock:
    """Any block whose type tag is not a BlockType (or is missing)."""

    id: str
    position: int
    type_name: str
    config: dict[str, Any] = field(default_factory=dict)


ContentBlock = (
    HeroBlock
    | TextBlock
    | ImageBlock
    | ProductsBlock
    | VideoBlock
    | GalleryBlock
    | UnknownBlock
)

_KNOWN_BLOCKS: dict[str, tuple[type, Any]] = {
    BlockType.HERO.value: (HeroBlock, HeroConfig.from_config),
    BlockType.TEXT.value: (TextBlock, TextConfig.from_config),
    BlockType.IMAGE.value: (ImageBlock, ImageConfig.from_config),
    BlockType.PRODUCTS.value: (ProductsBlock, ProductsConfig.from_config),
    BlockType.VIDEO.value: (VideoBlock, VideoConfig.from_config),
    BlockType.GALLERY.value: (GalleryBlock, GalleryConfig.from_config),
}


def parse_block(raw: Any, index: int = 0) -> ContentBlock:
    """Build a typed block from untrusted JSON. Never raises.

    Args:
        raw: Decoded JSON value for one block.
        index: Position in the source list, used when the block has no position.

    Returns:
        A known block variant, or UnknownBlock for anything else.
    """
    if not isinstance(raw, dict):
        return UnknownBlock(id=str(index), position=index, type_name=type(raw).__name__)
    block_id = str(raw.get("id") if raw.get("id") is not None else index)
    position = raw.get("position")
    if isinstance(position, bool) or not isinstance(position, int):
        position = index
    config = raw.get("config")
    if not isinstance(config, dict):
        config = {}
    type_name = raw.get("type")
    type_name = type_name if isinstance(type_name, str) else ""
    known = _KNOWN_BLOCKS.get(type_name)
    if known is None:
        return UnknownBlock(
            id=block_id, position=position, type_name=type_name, config=config
        )
    block_cls, parse_config = known
    return block_cls(id=block_id, position=position, config=parse_config(config))


def parse_blocks(raw: Any) -> list[ContentBlock]:
    """Parse a block list and order it by position (stable for equal positions)."""
    if not isinstance(raw, list):
        return []
    blocks = [parse_block(item, i) for i, item in enumerate(raw)]
    return sorted(blocks, key=lambda b: b.position)
