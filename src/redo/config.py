r"""Built-in default values for the retry engine.

These constants seed the default configuration store and are restored by
``redo.defaults.reset``.
"""

from __future__ import annotations

__all__ = ["DEFAULT_DELAY", "DEFAULT_MAX_RETRIES"]

from datetime import timedelta

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 30

# Default base delay between attempts
# With the default constant strategy every retry waits 100ms
DEFAULT_DELAY = timedelta(milliseconds=100)
