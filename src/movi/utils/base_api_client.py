"""
Base API Client - Shared GET request handling for catalog services.
All API services should inherit from this and use its _core_async_request method.

One request, one response: no caching, no deduplication, no retries.
Failures are raised as movi.contracts.errors types.
"""

import asyncio
from typing import Any

import aiohttp

from movi.contracts.errors import DecodeError, NotFoundError, RemoteError
from movi.utils.get_logger import get_logger

logger = get_logger(__name__)


class BaseAPIClient:
    """
    Base class for API clients with shared request handling.
    """

    async def _core_async_request(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Core async HTTP GET request.

        Args:
            url: Full URL to request
            params: Optional query parameters
            headers: Optional HTTP headers
            timeout: Total timeout in seconds; None keeps the aiohttp default

        Returns:
            Decoded JSON response (dict, list, or other JSON type)

        Raises:
            NotFoundError: provider answered 404
            RemoteError: any other non-2xx status, or a transport failure
            DecodeError: the body is not valid JSON
        """
        request_kwargs: dict[str, Any] = {"headers": headers, "params": params}
        if timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        try:
            async with (  # noqa: SIM117
                aiohttp.ClientSession() as session,
                session.get(url, **request_kwargs) as response,
            ):
                status = response.status

                if not 200 <= status < 300:
                    # Ensure response body is consumed to properly close connection
                    await response.read()
                    if status == 404:
                        # 404s are expected (resource doesn't exist) - log as DEBUG
                        logger.debug(f"API returned status {status} for {url} (resource not found)")
                        raise NotFoundError(
                            f"HTTP {status}: resource not found", status=status, url=url
                        )
                    logger.warning(f"API returned status {status} for {url}")
                    raise RemoteError(f"HTTP {status}", status=status, url=url)

                try:
                    return await response.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    logger.warning(f"Malformed JSON from {url}: {e}")
                    raise DecodeError(
                        f"Malformed response body: {e}", status=status, url=url
                    ) from e

        except asyncio.CancelledError:
            raise
        except (TimeoutError, aiohttp.ClientError) as e:
            # Include exception type for better debugging when message is empty
            error_detail = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            logger.error(f"Error making request to {url}: {error_detail}")
            raise RemoteError(error_detail, url=url) from e
