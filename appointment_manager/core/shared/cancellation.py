"""
Cooperative cancellation.

A CancellationToken is threaded through every asynchronous use case and
repository call. Code checks it at suspension points and abandons the work
by raising asyncio.CancelledError.
"""

import asyncio


class CancellationToken:
    """Cooperative cancellation signal shared by one request."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """Raise asyncio.CancelledError if cancellation was requested."""
        if self._event.is_set():
            raise asyncio.CancelledError("Operation was cancelled")

    async def wait(self) -> None:
        """Wait until cancellation is requested."""
        await self._event.wait()

    @staticmethod
    def check(token: "CancellationToken | None") -> None:
        """Raise if an optional token was cancelled."""
        if token is not None:
            token.raise_if_cancelled()
