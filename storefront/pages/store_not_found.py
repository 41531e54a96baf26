"""Page shown when a host maps to no active store."""

from html import escape

_BASE_CSS = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 20px;
        }
        .container {
            background: white;
            border-radius: 12px;
            box-shadow: 0 20px 60px rgba(0,0,0,0.3);
            max-width: 600px;
            width: 100%;
            padding: 60px 40px;
            text-align: center;
        }
        .logo { font-size: 3rem; margin-bottom: 20px; }
        h1 { font-size: 2.5rem; color: #333; margin-bottom: 20px; font-weight: 600; }
        p { font-size: 1.1rem; color: #666; line-height: 1.6; margin-bottom: 30px; }
        .host { font-family: monospace; color: #764ba2; }
        .buttons { display: flex; gap: 15px; justify-content: center; flex-wrap: wrap; }
        .btn {
            padding: 14px 28px;
            border-radius: 8px;
            text-decoration: none;
            font-weight: 600;
        }
        .btn-primary { background: #667eea; color: white; }
        .btn-secondary { background: #f0f0f0; color: #333; }
        .footer { margin-top: 40px; font-size: 0.9rem; color: #999; }
        .footer a { color: #667eea; text-decoration: none; }
"""


def render_store_not_found_page(
    host: str,
    platform_name: str = "FV-Company",
    platform_url: str = "https://fv-company.com",
) -> str:
    """Return HTML for the 404 "store not found" page."""
    name = escape(platform_name)
    url = escape(platform_url.rstrip("/"), quote=True)
    host_line = f' (<span class="host">{escape(host)}</span>)' if host else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Store Not Found</title>
    <style>{_BASE_CSS}    </style>
</head>
<body>
    <div class="container">
        <div class="logo">&#128722;</div>
        <h1>Store Not Found</h1>
        <p>
            Sorry, we couldn't find this store{host_line}. The store might have been moved,
            deleted, or the URL might be incorrect.
        </p>
        <div class="buttons">
            <a href="{url}" class="btn btn-primary">Go to {name}</a>
            <a href="{url}/signup" class="btn btn-secondary">Create Your Store</a>
        </div>
        <div class="footer">
            Powered by <a href="{url}">{name}</a>. The easiest way to start your online store.
        </div>
    </div>
</body>
</html>
"""
