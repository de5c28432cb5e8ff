#!/usr/bin/env python3
"""CLI entry point for producing decathlon league tables.

Usage:
    python process_results.py
    python process_results.py --input Decathlon.dat --output Decathlon.out

Nothing is printed; failures are reported only through the exit status:
    66  input file can't be opened
    73  output file can't be created
    74  I/O error while processing
    70  any other failure
"""

import argparse
import logging
import os
import sys

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from decathlon.core.models import RunConfig
from decathlon.core.output_generator import process_file

logger = logging.getLogger(__name__)


# sysexits.h codes
EX_OK = 0
EX_NOINPUT = 66
EX_SOFTWARE = 70
EX_CANTCREAT = 73
EX_IOERR = 74


def run(config: RunConfig) -> int:
    """Process config.input_path into config.output_path, returning an exit status."""
    # Undecodable bytes become U+FFFD so the rest of the file is still read
    try:
        reader = open(config.input_path, 'r', encoding=config.encoding, errors='replace')
    except OSError as e:
        logger.debug("Can't open input %s: %s", config.input_path, e)
        return EX_NOINPUT
    except LookupError as e:
        logger.debug("Unknown encoding %r: %s", config.encoding, e)
        return EX_SOFTWARE

    with reader:
        try:
            writer = open(config.output_path, 'w', encoding=config.encoding, newline='\n')
        except OSError as e:
            logger.debug("Can't create output %s: %s", config.output_path, e)
            return EX_CANTCREAT

        with writer:
            try:
                count = process_file(reader, writer, config)
            except OSError as e:
                logger.debug("I/O error while processing: %s", e)
                return EX_IOERR
            except Exception:
                logger.debug("Processing failed", exc_info=True)
                return EX_SOFTWARE

    logger.info("Wrote %d tables to %s", count, config.output_path)
    return EX_OK


def main(argv=None):
    parser = argparse.ArgumentParser(description='Produce decathlon league tables')
    parser.add_argument('--input', default=RunConfig.input_path,
                        help='Results file to read (default: %(default)s)')
    parser.add_argument('--output', default=RunConfig.output_path,
                        help='League table file to write (default: %(default)s)')
    parser.add_argument('--encoding', default=RunConfig.encoding,
                        help='Text encoding of both files (default: %(default)s)')
    parser.add_argument('--verbose', action='store_true',
                        help='Log diagnostics to stderr')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(name)s %(levelname)s %(message)s')

    config = RunConfig(
        input_path=args.input,
        output_path=args.output,
        encoding=args.encoding,
    )
    sys.exit(run(config))


if __name__ == '__main__':
    main()
