"""Request body size limit middleware.

Cart and preview bodies are small JSON documents; anything above max_bytes
(1 MB by default) is rejected with 413. Declared Content-Length is checked
up front; bodies without one are counted while they stream in.
"""

from typing import Callable

from storefront.middleware._asgi import get_header, send_json_error


async def _send_413(send: Callable, max_bytes: int, actual: int) -> None:
    await send_json_error(
        send,
        413,
        "PAYLOAD_TOO_LARGE",
        f"Request body must be at most {max_bytes} bytes",
        {"max_bytes": max_bytes, "content_length": actual},
    )


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or scope.get("method") in ("GET", "HEAD", "OPTIONS"):
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared and declared.isdigit():
            if int(declared) > max_bytes:
                await _send_413(send, max_bytes, int(declared))
                return
            await app(scope, receive, send)
            return

        # No usable Content-Length (chunked): buffer while counting.
        chunks: list[bytes] = []
        total = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            body = message.get("body", b"")
            total += len(body)
            if total > max_bytes:
                await _send_413(send, max_bytes, total)
                return
            chunks.append(body)
            more_body = message.get("more_body", False)

        replayed = False

        async def replay_receive() -> dict:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": b"".join(chunks), "more_body": False}
            return await receive()

        await app(scope, replay_receive, send)

    return asgi_app
