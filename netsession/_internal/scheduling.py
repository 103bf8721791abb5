"""Default event loop for completions issued outside any running loop."""

import asyncio
import threading

_default_loop: asyncio.AbstractEventLoop | None = None
_lock = threading.Lock()


def get_default_loop() -> asyncio.AbstractEventLoop:
    """Return the process-wide default loop, starting it on first use.

    The loop runs forever in a daemon thread.
    """
    global _default_loop
    with _lock:
        if _default_loop is None or _default_loop.is_closed():
            _default_loop = asyncio.new_event_loop()
            threading.Thread(
                target=_default_loop.run_forever,
                name="netsession-default-loop",
                daemon=True,
            ).start()
        return _default_loop
