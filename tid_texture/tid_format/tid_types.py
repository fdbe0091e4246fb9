"""Value types describing a parsed TID texture."""

from dataclasses import dataclass
from enum import Enum

from .tid_constants import BLOCK_DIM


class DataType(Enum):
    """Pixel layout declared by the header's type code."""

    RGBA = "RGBA"
    ARGB = "ARGB"
    BLOCK_COMPRESSION = "BlockCompression"

    def __str__(self):
        return self.value


class BlockCompressionType(Enum):
    """Compression variant declared by the header's FourCC."""

    NONE = "None"
    DXT1 = "DXT1"
    DXT5 = "DXT5"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ImageSize:
    width: int
    height: int

    @property
    def pixel_count(self):
        return self.width * self.height

    def tile_grid(self):
        """Size of the grid of 4x4 tiles covering this image."""
        return ImageSize(self.width // BLOCK_DIM, self.height // BLOCK_DIM)

    def __str__(self):
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ImageDescriptor:
    """Header fields of a TID file.

    Attributes:
        name: texture name from the 32-byte name field, NUL-trimmed
        data_type: DataType from the type code byte
        bc_type: BlockCompressionType from the FourCC tag
        dimensions: ImageSize in pixels
        file_size: file size as declared by the header (not trusted)
    """

    name: str
    data_type: DataType
    bc_type: BlockCompressionType
    dimensions: ImageSize
    file_size: int

    @property
    def width(self):
        return self.dimensions.width

    @property
    def height(self):
        return self.dimensions.height

    @property
    def is_compressed(self):
        return self.data_type is DataType.BLOCK_COMPRESSION

    def summary(self):
        """One-line description: 'name', TYPE, WxH."""
        return f"'{self.name}', {self.data_type}, {self.dimensions}"
