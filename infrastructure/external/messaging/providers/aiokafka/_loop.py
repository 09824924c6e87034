from __future__ import annotations

import asyncio
import threading
from typing import Any, Coroutine, Optional


class LoopThread:
    """Private event loop on a daemon thread so sync callers can drive aiokafka.

    Publisher.publish() already runs on a worker thread (asyncio.to_thread);
    the producer itself must live on one loop for its whole lifetime.
    """

    def __init__(self, name: str = "aiokafka-producer") -> None:
        self.loop = asyncio.new_event_loop()
        self._ready = threading.Event()
        self._thread = threading.Thread(target=self._serve, name=name, daemon=True)

    def _serve(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.call_soon(self._ready.set)
        self.loop.run_forever()
        self.loop.close()

    def start(self) -> "LoopThread":
        self._thread.start()
        self._ready.wait(5)
        return self

    def stop(self) -> None:
        if self.loop.is_running():
            self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=5)

    def run(self, coro: Coroutine[Any, Any, Any], timeout: Optional[float] = None) -> Any:
        """Run coro on the private loop and block until it finishes (or timeout)."""
        return asyncio.run_coroutine_threadsafe(coro, self.loop).result(timeout=timeout)
