import struct
import zlib

import pytest

from tid_texture.cli import main
from tid_texture.config import DecodeOptions
from tid_texture.tid_format.tid_reader import TIDReader
from tid_texture.tid_format.tid_types import DataType, ImageSize
from tid_texture.utils.png_writer import PNG_SIGNATURE, encode_png


@pytest.fixture
def dxt1_file(tmp_path, make_tid, make_block):
    payload = b"".join(make_block(0xF800, 0x0000, 0) for _ in range(4))
    path = tmp_path / "sample.tid"
    path.write_bytes(make_tid(type_code=0x9C, width=8, height=8, name=b"sample",
                              fourcc=b"DXT1", payload=payload))
    return path


def read_png(data):
    """Return (width, height, raw scanlines) from a PNG written by encode_png."""
    assert data[:8] == PNG_SIGNATURE
    pos = 8
    chunks = {}
    while pos < len(data):
        length, = struct.unpack_from(">I", data, pos)
        kind = data[pos + 4:pos + 8]
        chunks[kind] = data[pos + 8:pos + 8 + length]
        pos += 12 + length
    width, height = struct.unpack(">II", chunks[b"IHDR"][:8])
    return width, height, zlib.decompress(chunks[b"IDAT"])


def test_reader_exposes_header_and_pixels(dxt1_file):
    reader = TIDReader(str(dxt1_file)).read()
    assert reader.name == "sample"
    assert reader.data_type is DataType.BLOCK_COMPRESSION
    assert reader.dimensions == ImageSize(8, 8)
    assert reader.to_rgba() == bytearray([255, 0, 0, 255] * 64)
    assert "'sample', BlockCompression, 8x8" in repr(reader)


def test_reader_requires_read(dxt1_file):
    with pytest.raises(RuntimeError):
        TIDReader(str(dxt1_file)).to_rgba()


def test_encode_png_rows():
    rgba = bytes(range(2 * 2 * 4))
    width, height, raw = read_png(encode_png(rgba, 2, 2))
    assert (width, height) == (2, 2)
    assert raw == b"\x00" + rgba[:8] + b"\x00" + rgba[8:]


def test_encode_png_rejects_short_data():
    with pytest.raises(ValueError):
        encode_png(b"\x00" * 15, 2, 2)


def test_cli_converts_to_png(dxt1_file, tmp_path, capsys):
    out = tmp_path / "sample.png"
    assert main([str(dxt1_file), str(out)]) == 0
    stdout = capsys.readouterr().out
    assert "'sample', BlockCompression, 8x8" in stdout
    assert "Converted image successfully" in stdout
    width, height, raw = read_png(out.read_bytes())
    assert (width, height) == (8, 8)
    assert raw[1:5] == b"\xff\x00\x00\xff"


def test_cli_info_only(dxt1_file, tmp_path, capsys):
    assert main([str(dxt1_file), "--info"]) == 0
    assert capsys.readouterr().out.strip() == "'sample', BlockCompression, 8x8"
    assert not list(tmp_path.glob("*.png"))


def test_cli_reports_decode_errors(tmp_path, make_tid, capsys):
    path = tmp_path / "dxt5.tid"
    path.write_bytes(make_tid(type_code=0x94, width=8, height=8, fourcc=b"DXT5",
                              payload=bytes(64)))
    assert main([str(path), str(tmp_path / "out.png")]) == 1
    assert "DXT5" in capsys.readouterr().err
    assert not (tmp_path / "out.png").exists()


def test_cli_missing_input(tmp_path):
    assert main([str(tmp_path / "nope.tid"), str(tmp_path / "out.png")]) == 1


def test_cli_requires_output(dxt1_file):
    with pytest.raises(SystemExit):
        main([str(dxt1_file)])


def test_options_from_env():
    assert DecodeOptions.from_env({}) == DecodeOptions()
    assert DecodeOptions.from_env({"TID_DECODE_WORKERS": "3"}).workers == 3
    with pytest.raises(ValueError):
        DecodeOptions.from_env({"TID_DECODE_WORKERS": "many"})
    with pytest.raises(ValueError):
        DecodeOptions(workers=0)
