#!/usr/bin/env python3
"""
huffman_cli.py : command-line front end for the Huffman compressor

Usage:
    huffman -c document.txt document.huf            #compress
    huffman -d document.huf document_restored.txt   #decompress
    huffman -s document.txt document.huf            #show statistics
    huffman --codes document.txt                    #list the code table
"""

import argparse
import logging
import sys
import time

from huffman_errors import HuffmanError
from huffman_report import compression_stats, format_code_table, format_stats, validate_files
from huffman_service import HuffmanService

logger = logging.getLogger("huffman")


def build_parser():
    parser = argparse.ArgumentParser(prog="huffman", description="Huffman coding compression tool.")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", nargs=2, metavar=("INPUT", "OUTPUT"), dest="compress",
                      help="compress INPUT into OUTPUT")
    mode.add_argument("-d", nargs=2, metavar=("INPUT", "OUTPUT"), dest="decompress",
                      help="decompress INPUT into OUTPUT")
    mode.add_argument("-s", nargs=2, metavar=("ORIGINAL", "COMPRESSED"), dest="stats",
                      help="show compression statistics")
    mode.add_argument("--codes", metavar="INPUT",
                      help="print the Huffman code for every byte value in INPUT")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress details")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    return parser


def configure_logging(verbose=False, quiet=False):
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(args, service=None):
    service = service or HuffmanService()

    if args.compress:
        src, dst = args.compress
        validate_files(src, dst)
        t0 = time.perf_counter()
        service.compress_file(src, dst)
        logger.info("compression completed in %.2f seconds", time.perf_counter() - t0)
        print(format_stats(compression_stats(src, dst)))

    elif args.decompress:
        src, dst = args.decompress
        validate_files(src, dst)
        t0 = time.perf_counter()
        service.decompress_file(src, dst)
        logger.info("decompression completed in %.2f seconds", time.perf_counter() - t0)

    elif args.stats:
        print(format_stats(compression_stats(*args.stats)))

    elif args.codes:
        with open(args.codes, "rb") as f:
            freqs = service.logic.count_frequencies(f.read())
        codes = service.logic.generate_codes(service.logic.build_tree(freqs))
        print(format_code_table(codes))

    return 0


def main(argv=None):
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # usage errors exit 1, --help exits 0
        return 0 if e.code == 0 else 1
    configure_logging(args.verbose, args.quiet)
    try:
        return run(args)
    except HuffmanError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
