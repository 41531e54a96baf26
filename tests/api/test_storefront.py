"""End-to-end storefront render over the ASGI app."""

from httpx import AsyncClient

from tests.conftest import SHOP_HOST, THEME_PREFIX, FakeStorage


async def test_home_renders_featured_products_in_layout(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    body = response.text
    assert body.startswith("<html><body>")
    assert "<h1>Acme Store</h1>" in body
    assert "<h2>Summer</h2>" in body
    # Only the featured product is on the home page
    assert "Blue Shirt €25.00" in body
    assert "Red Hat" not in body


async def test_home_index_may_use_products_alias(client: AsyncClient, storage: FakeStorage) -> None:
    storage.objects[f"{THEME_PREFIX}/templates/index.liquid"] = (
        "{% for p in products %}<p>{{ p.title }}</p>{% endfor %}|count={{ products | length }}"
    )
    response = await client.get("/")
    assert response.status_code == 200
    assert "<p>Blue Shirt</p>|count=1" in response.text


async def test_render_headers(client: AsyncClient) -> None:
    response = await client.get("/products/blue-shirt")
    assert response.status_code == 200
    headers = response.headers
    assert headers["X-Tenant-ID"] == "acme"
    assert headers["X-Theme-Version"] == "3"
    assert headers["X-Render-Time"].endswith("ms")
    assert headers["Surrogate-Key"] == "tenant_acme page_product"
    assert headers["Cache-Control"] == "public, max-age=3600, s-maxage=3600"
    assert headers["CDN-Cache-Control"] == "max-age=3600"
    assert "Accept-Encoding" in [token.strip() for token in headers["Vary"].split(",")]
    assert "X-Request-ID" in headers


async def test_product_page(client: AsyncClient) -> None:
    response = await client.get("/products/red-hat")
    assert response.status_code == 200
    assert "<h1>Red Hat</h1>" in response.text
    assert "€9.99" in response.text


async def test_unknown_product_handle_is_404(client: AsyncClient) -> None:
    response = await client.get("/products/unknown-handle")
    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "ROUTE_NOT_FOUND"
    assert data["details"]["handle"] == "unknown-handle"


async def test_unmatched_path_is_404(client: AsyncClient) -> None:
    response = await client.get("/blog/hello")
    assert response.status_code == 404
    assert response.json()["error"] == "ROUTE_NOT_FOUND"


async def test_trailing_slash_does_not_match(client: AsyncClient) -> None:
    response = await client.get("/products/red-hat/")
    assert response.status_code == 404


async def test_collection_page_lists_member_products(client: AsyncClient) -> None:
    response = await client.get("/collections/summer")
    assert response.status_code == 200
    assert "<h1>Summer</h1>" in response.text
    assert '<a href="/products/red-hat">Red Hat</a>' in response.text
    assert "Blue Shirt" not in response.text
    assert response.headers["Surrogate-Key"] == "tenant_acme page_collection"


async def test_static_page_renders_blocks(client: AsyncClient) -> None:
    response = await client.get("/pages/about")
    assert response.status_code == 200
    body = response.text
    assert "<h1>About</h1>" in body
    assert "About Acme" in body
    assert 'class="block block-products"' in body
    # Block HTML is not escaped by the page template
    assert "&lt;section" not in body


async def test_unknown_host_gets_store_not_found_page(client: AsyncClient) -> None:
    response = await client.get("/", headers={"Host": "nobody.example.com"})
    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]
    assert "Store Not Found" in response.text
    assert "nobody.example.com" in response.text


async def test_host_with_port_resolves(client: AsyncClient) -> None:
    response = await client.get("/", headers={"Host": f"{SHOP_HOST.upper()}:8080"})
    assert response.status_code == 200


async def test_missing_template_is_500(client: AsyncClient, storage: FakeStorage) -> None:
    del storage.objects[f"{THEME_PREFIX}/templates/product.liquid"]
    response = await client.get("/products/red-hat")
    assert response.status_code == 500
    assert response.json()["error"] == "TEMPLATE_NOT_FOUND"


async def test_second_render_served_from_cache(client: AsyncClient, storage: FakeStorage) -> None:
    await client.get("/")
    reads = len(storage.reads)
    response = await client.get("/")
    assert response.status_code == 200
    assert len(storage.reads) == reads


async def test_tenant_without_theme_is_500(client: AsyncClient, services) -> None:
    services.themes.repository.themes.clear()
    response = await client.get("/")
    assert response.status_code == 500
    assert response.json()["error"] == "THEME_NOT_FOUND"


async def test_request_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/", headers={"X-Request-ID": "bad id!"})
    assert response.headers["X-Request-ID"] != "bad id!"
    assert len(response.headers["X-Request-ID"]) == 36
