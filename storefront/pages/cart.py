"""Cart page shell. Cart state lives in the browser and is submitted to /cart/checkout by theme scripts."""

from html import escape


def render_cart_page(shop_name: str = "Shopping Cart") -> str:
    """Return HTML for GET /cart."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Shopping Cart - {escape(shop_name)}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
        }}
        h1 {{ color: #333; }}
        .cart-item {{ border: 1px solid #ddd; padding: 15px; margin: 10px 0; border-radius: 8px; }}
        .checkout-btn {{
            background: #2c6ecb;
            color: white;
            padding: 12px 24px;
            border: none;
            border-radius: 6px;
            font-size: 16px;
            cursor: pointer;
        }}
        .checkout-btn:hover {{ background: #1e5bb5; }}
    </style>
</head>
<body>
    <h1>Shopping Cart</h1>
    <div id="cart-items"></div>
    <div id="cart-summary"></div>
    <button class="checkout-btn" type="button" id="checkout">Proceed to Checkout</button>
</body>
</html>
"""
