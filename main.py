# main.py
# Command line entry point: rank the images of a directory from blur to clarity.

import argparse
import logging
import sys

from clarity import (
    format_failures,
    format_report,
    format_report_by_image,
    format_scores,
    run_batch,
)
from config import (
    DEFAULT_DATASET_DIR,
    DEFAULT_LOG_LEVEL,
    EXIT_BAD_INPUT,
    LOG_FORMAT,
    SOBEL_MAX_KSIZE,
    TENG_KSIZE,
)
from ResourcePath import resource_path

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Score images with LAPM, LAPV, TENG and GLVN and sort them from blur to clarity"
    )
    parser.add_argument("path", nargs="?", default=None,
                        help=f"Directory of images (default: {DEFAULT_DATASET_DIR}/ next to this tool)")
    parser.add_argument("--ksize", type=int, default=TENG_KSIZE,
                        help="Sobel kernel size for TENG (odd, 1-31)")
    parser.add_argument("--by-image", action="store_true",
                        help="Also print each image's rank under every measure")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print per-image scores while processing")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    args = parser.parse_args(argv)
    if args.ksize <= 0 or args.ksize % 2 == 0 or args.ksize > SOBEL_MAX_KSIZE:
        parser.error(f"--ksize must be an odd integer between 1 and {SOBEL_MAX_KSIZE}")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    root = args.path if args.path is not None else resource_path(DEFAULT_DATASET_DIR)

    def print_scores(path, scores):
        print(format_scores(path, scores))

    try:
        result = run_batch(root, ksize=args.ksize,
                           on_scored=None if args.quiet else print_scores)
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(str(e))
        print(f"Cannot read directory: {root}", file=sys.stderr)
        return EXIT_BAD_INPUT

    print(format_report(result), end="")
    if args.by_image:
        print(format_report_by_image(result), end="")

    summary = format_failures(result)
    if summary:
        print(summary, end="", file=sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
