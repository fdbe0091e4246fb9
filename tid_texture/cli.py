"""Command-line converter: TID texture -> PNG."""

import argparse
import logging
import sys

from . import __version__
from .config import DEBUG, DecodeOptions
from .tid_format.tid_errors import TIDError
from .tid_format.tid_reader import TIDReader
from .utils.png_writer import write_png


_log = logging.getLogger("tid_texture.cli")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tid-to-png",
        description="Convert a TID texture to an RGBA PNG",
    )
    parser.add_argument("input", metavar="INPUT", help="Input .tid file")
    parser.add_argument("output", metavar="OUTPUT", nargs="?",
                        help="Output .png file (required unless --info)")
    parser.add_argument("--info", action="store_true",
                        help="Print the header summary and exit")
    parser.add_argument("--workers", "-j", type=int, default=None,
                        help="Threads for DXT1 decoding (default: TID_DECODE_WORKERS or 1)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or DEBUG) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.info and not args.output:
        parser.error("OUTPUT is required unless --info is given")

    try:
        if args.workers is not None:
            options = DecodeOptions(workers=args.workers)
        else:
            options = DecodeOptions.from_env()
    except ValueError as e:
        parser.error(str(e))

    reader = TIDReader(args.input, options)
    try:
        reader.read()
        print(reader.descriptor.summary())
        if args.info:
            return 0
        rgba = reader.to_rgba()
        write_png(rgba, reader.dimensions.width, reader.dimensions.height, args.output)
    except (TIDError, OSError) as e:
        _log.debug("Conversion failed", exc_info=True)
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 1

    print("Converted image successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
