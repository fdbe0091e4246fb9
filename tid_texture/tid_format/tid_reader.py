"""TID file reader.

Reads a .tid file and exposes its header fields and decoded pixels.
"""

import logging

from ..utils.image_convert import decode_pixels
from .tid_header import read_tid


_log = logging.getLogger("tid_texture.reader")


class TIDReader:
    """Reads a complete TID file.

    Usage:
        reader = TIDReader("path/to/file.tid")
        reader.read()
        rgba = reader.to_rgba()
        # reader.descriptor - ImageDescriptor
        # reader.payload    - raw pixel payload bytes
    """

    def __init__(self, filepath, options=None):
        self.filepath = filepath
        self.options = options
        self.descriptor = None
        self.payload = None

    def read(self):
        """Read and parse the header and payload."""
        with open(self.filepath, "rb") as f:
            self.descriptor, self.payload = read_tid(f)
        _log.debug(f"{self.filepath}: {self.descriptor.summary()}")
        return self

    def _require_read(self):
        if self.descriptor is None:
            raise RuntimeError(f"{self.filepath}: read() has not been called")

    @property
    def name(self):
        self._require_read()
        return self.descriptor.name

    @property
    def data_type(self):
        self._require_read()
        return self.descriptor.data_type

    @property
    def dimensions(self):
        self._require_read()
        return self.descriptor.dimensions

    def to_rgba(self):
        """Decode the payload to a width*height*4 RGBA bytearray."""
        self._require_read()
        return decode_pixels(self.descriptor, self.payload, self.options)

    def __repr__(self):
        if self.descriptor is None:
            return f"TIDReader({self.filepath!r}, unread)"
        return f"TIDReader({self.filepath!r}, {self.descriptor.summary()})"
