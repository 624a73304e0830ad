# -*- coding: utf-8 -*-
"""
Command line entry point:

    python -m mlbrot --method classic -c 20 -n 1000
"""
import argparse
import logging
import sys

import mlbrot as mb
import mlbrot.settings
from mlbrot.models.classifier import COLORING_METHODS


logger = logging.getLogger("mlbrot")


def make_parser():
    s = mb.settings
    parser = argparse.ArgumentParser(
        prog="mlbrot",
        description=(
            "Renders the Mandelbrot set, classifying each pixel either with "
            "the escape-time test or with a remote ML predictor."
        ),
    )
    parser.add_argument(
        "--method",
        choices=COLORING_METHODS,
        default=s.coloring_method,
        help="the coloring method (default: %(default)s)",
    )
    parser.add_argument(
        "-c", "--concurrency",
        type=int,
        default=s.concurrency_level,
        help="concurrency level (default: %(default)s)",
    )
    parser.add_argument(
        "-n", "--max-lines",
        type=int,
        default=s.max_lines_to_write,
        help=(
            "max lines to write to the csv data file, 0 for no data file, "
            "-1 for no limit (default: %(default)s)"
        ),
    )
    parser.add_argument("--width", type=int, default=s.nx)
    parser.add_argument("--height", type=int, default=s.ny)
    parser.add_argument(
        "--max-iter", type=int, default=s.bailout_iteration,
        help="bailout iteration (default: %(default)s)",
    )
    parser.add_argument(
        "--directory", default=".",
        help="output directory (default: current directory)",
    )
    parser.add_argument(
        "--verbosity", default=str(s.verbosity),
        help="log verbosity, 0 to 3 (default: %(default)s)",
    )
    parser.add_argument("--model-id", default=s.aws_model_id)
    parser.add_argument("--endpoint", default=s.aws_endpoint)
    parser.add_argument("--region", default=s.aws_region)
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)

    s = mb.settings
    s.coloring_method = args.method
    s.concurrency_level = args.concurrency
    s.max_lines_to_write = args.max_lines
    s.nx = args.width
    s.ny = args.height
    s.bailout_iteration = args.max_iter
    s.aws_model_id = args.model_id
    s.aws_endpoint = args.endpoint
    s.aws_region = args.region
    mb.set_log_handlers(args.verbosity)

    try:
        image_path, data_path = mb.run(args.directory)
    except OSError as exc:
        logger.error(f"Unable to write output: {exc}")
        return 1
    except ValueError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 2

    print(image_path)
    if data_path is not None:
        print(data_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
