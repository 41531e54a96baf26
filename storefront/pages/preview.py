"""Standalone document wrapping page-builder blocks for live preview."""

from html import escape


def render_preview_page(blocks_html: str, title: str = "Store Preview") -> str:
    """Wrap already-rendered block HTML in a minimal document."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Preview - {escape(title)}</title>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            line-height: 1.6;
            color: #333;
            background: #fff;
        }}
        img {{ max-width: 100%; height: auto; display: block; }}
        a {{ color: #4f46e5; text-decoration: none; }}
        a:hover {{ text-decoration: underline; }}
        .block {{ padding: 40px 20px; }}
        .hero-inner {{ max-width: 960px; margin: 0 auto; padding: 80px 20px; text-align: center; }}
        .hero-button {{ display: inline-block; margin-top: 24px; padding: 12px 28px; border-radius: 6px; }}
        .product-grid, .gallery-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(220px, 1fr));
            gap: 20px;
            max-width: 1200px;
            margin: 0 auto;
        }}
        .video-frame {{ position: relative; padding-bottom: 56.25%; height: 0; }}
        .video-frame iframe {{ position: absolute; top: 0; left: 0; width: 100%; height: 100%; }}
        [data-block-id]:hover {{ outline: 2px dashed #4f46e5; cursor: pointer; }}
    </style>
</head>
<body>
{blocks_html}
</body>
</html>
"""
