"""
Output sinks for HarAmmo.

Two completion modes:
- CallbackSink hands every block to the caller's callback
- FileSink appends every block to one output file and signals the
  callback without a payload after each write
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from ..common import normalize_path

logger = logging.getLogger("harammo.sink")

# callback(error, data=None)
ResultCallback = Callable[..., None]


class CallbackSink:
    """Streams blocks to the result callback as they are produced."""

    def __init__(self, callback: ResultCallback):
        self.callback = callback

    def prepare(self) -> None:
        """Nothing to set up in callback mode."""

    def deliver(self, block: str) -> None:
        self.callback(None, block)


class FileSink:
    """Appends blocks to an output file, truncated once per run."""

    def __init__(self, output_path: str, callback: Optional[ResultCallback] = None):
        self.output_path: Path = normalize_path(output_path)
        self.callback = callback

    def prepare(self) -> None:
        """Create or truncate the output file before the first block."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, 'w', encoding='utf-8'):
            pass
        logger.debug(f"Truncated {self.output_path}")

    def deliver(self, block: str) -> None:
        with open(self.output_path, 'a', encoding='utf-8', newline='') as f:
            f.write(block)
        if self.callback:
            self.callback(None)


def make_sink(output_path: Optional[str], callback: ResultCallback):
    """Pick the completion mode for a run."""
    if output_path:
        return FileSink(output_path, callback)
    return CallbackSink(callback)
