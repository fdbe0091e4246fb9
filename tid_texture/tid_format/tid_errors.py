"""Exceptions raised while reading and decoding TID textures."""


class TIDError(Exception):
    """Base class for every TID read/decode failure."""


class FormatError(TIDError, ValueError):
    """The container violates the TID layout."""


class BadMagic(FormatError):
    def __init__(self, found):
        self.found = bytes(found)
        super().__init__(f"Invalid TID magic: {self.found!r} (expected b'TID')")


class UnknownDataType(FormatError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"0x{value:02X} is unknown as a data type")


class UnknownFourCC(FormatError):
    def __init__(self, tag):
        self.tag = bytes(tag)
        super().__init__(f"FourCC {self.tag!r} is unknown")


class MissingCompressionTag(FormatError):
    def __init__(self):
        super().__init__(
            "No FourCC was defined, cannot infer what type of block "
            "compression to decode"
        )


class NameDecodeError(FormatError):
    def __init__(self, raw, reason):
        self.raw = bytes(raw)
        super().__init__(f"Failed to read name in header ({self.raw!r}): {reason}")


class InvalidDimensions(FormatError):
    def __init__(self, width, height, reason):
        self.width = width
        self.height = height
        super().__init__(f"Invalid dimensions {width}x{height}: {reason}")


class TruncatedDataError(TIDError, IOError):
    """Fewer bytes were available than a field or payload requires."""

    def __init__(self, what, expected, available):
        self.what = what
        self.expected = expected
        self.available = available
        super().__init__(
            f"Truncated {what}: need {expected} bytes, only {available} available"
        )


class UnsupportedFeature(TIDError, NotImplementedError):
    """The file is valid but uses a variant this decoder does not implement."""
