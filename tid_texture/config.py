"""Decoder configuration.

Options default to a plain single-threaded decode. They can be set in code or
picked up from the environment:

    TID_DECODE_WORKERS   number of threads used for block-compressed payloads
    TID_DEBUG=1          enable debug logging of header/tile decoding
"""

import os
from dataclasses import dataclass


DEBUG = os.environ.get('TID_DEBUG', '') == '1'


@dataclass
class DecodeOptions:
    """Options controlling how pixel payloads are decoded."""

    # Threads used for DXT1 tile decoding. 1 = decode inline.
    workers: int = 1

    # Tiles handed to a worker per task when workers > 1.
    tiles_per_task: int = 64

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.tiles_per_task < 1:
            raise ValueError(f"tiles_per_task must be >= 1, got {self.tiles_per_task}")

    @classmethod
    def from_env(cls, environ=None):
        """Build options from TID_DECODE_WORKERS (defaults otherwise)."""
        environ = os.environ if environ is None else environ
        raw = environ.get('TID_DECODE_WORKERS', '').strip()
        if not raw:
            return cls()
        try:
            workers = int(raw)
        except ValueError:
            raise ValueError(f"TID_DECODE_WORKERS must be an integer, got {raw!r}") from None
        return cls(workers=workers)
