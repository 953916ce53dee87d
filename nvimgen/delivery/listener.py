# nvimgen Listener Client
# Async HTTP client for the companion listener running inside Neovim

import asyncio
from dataclasses import dataclass
from typing import Any, Optional

import aiohttp

from nvimgen.config.schema import ListenerConfig, UploadFormat
from nvimgen.delivery.result import DeliveryResult


@dataclass
class ListenerResponse:
    """Reply of the listener to a save request."""

    success: bool
    message: str = ""
    path: Optional[str] = None
    status: Optional[int] = None


class ListenerClient:
    """
    Client for the listener's GET /ping and POST /save endpoints.

    One aiohttp session is created lazily and reused until `close`.
    Every request is a single attempt.

    Attributes:
        config (ListenerConfig): Host, port, token and timeout.
        session (Optional[aiohttp.ClientSession]): Session for HTTP calls.
    """

    def __init__(self, config: Optional[ListenerConfig] = None):
        self.config = config or ListenerConfig()
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "ListenerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get a valid aiohttp session, creating one if needed."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
        return self.session

    async def close(self) -> None:
        """Close the aiohttp session if it's currently open."""
        if self.session and not self.session.closed:
            await self.session.close()

    def _headers(self) -> dict[str, str]:
        if self.config.token:
            return {"Authorization": f"Bearer {self.config.token}"}
        return {}

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.config.timeout)

    async def ping(self) -> bool:
        """
        Check whether the listener is reachable and accepts our token.

        Returns:
            True on HTTP 200, False on any other status or network error.
        """
        try:
            session = await self._get_session()
            async with session.get(
                f"{self.config.base_url}/ping", headers=self._headers(), timeout=self._timeout()
            ) as response:
                return response.status == 200
        except (TimeoutError, asyncio.TimeoutError, aiohttp.ClientError):
            return False

    def _body(self, content: str, filename: str, upload: UploadFormat) -> dict[str, Any]:
        if upload is UploadFormat.JSON:
            return {"json": {"filename": filename, "content": content}}
        form = aiohttp.FormData()
        form.add_field("file", content.encode("utf-8"), filename=filename, content_type="text/plain")
        return {"data": form}

    async def save(
        self, content: str, filename: str = "init.lua", upload: Optional[UploadFormat] = None
    ) -> ListenerResponse:
        """
        Push a file to the listener.

        Args:
            content: File content.
            filename: Bare file name written in the Neovim config directory.
            upload: Body format; defaults to the configured one.

        Returns:
            ListenerResponse describing the outcome. Network failures are
            reported in the response, never raised.
        """
        upload = upload or self.config.upload
        try:
            session = await self._get_session()
            async with session.post(
                f"{self.config.base_url}/save",
                headers=self._headers(),
                timeout=self._timeout(),
                **self._body(content, filename, upload),
            ) as response:
                data = await self._read_json(response)
                if response.status != 200:
                    message = data.get("error") or f"HTTP {response.status}"
                    return ListenerResponse(success=False, message=message, status=response.status)
                return ListenerResponse(
                    success=True,
                    message=data.get("message", "File saved"),
                    path=data.get("path"),
                    status=response.status,
                )
        except (TimeoutError, asyncio.TimeoutError):
            return ListenerResponse(success=False, message="Listener request timed out")
        except aiohttp.ClientError as e:
            return ListenerResponse(success=False, message=f"Network error: {e}")

    @staticmethod
    async def _read_json(response: Any) -> dict[str, Any]:
        try:
            data = await response.json(content_type=None)
        except (ValueError, aiohttp.ContentTypeError):
            return {}
        return data if isinstance(data, dict) else {}


async def push_to_listener(
    content: str,
    filename: str = "init.lua",
    config: Optional[ListenerConfig] = None,
    client: Optional[ListenerClient] = None,
) -> DeliveryResult:
    """
    Push a file through a listener client and report it as a delivery.

    Args:
        content: File content.
        filename: Target file name.
        config: Listener settings, used when no client is given.
        client: Existing client to reuse; it is left open.

    Returns:
        DeliveryResult for the push.
    """
    owned = client is None
    client = client or ListenerClient(config)
    target = f"{client.config.base_url}/save"
    try:
        response = await client.save(content, filename)
    finally:
        if owned:
            await client.close()
    if not response.success:
        return DeliveryResult.failed(target, response.message)
    return DeliveryResult(target=target, message=response.message, path=response.path)
