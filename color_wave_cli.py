#!/usr/bin/env python3
import os
import sys
import argparse
import traceback
import logging

import cv2
import numpy as np

from colorwave.config.wave_config import STATE_PATH, WINDOW_TITLE
from colorwave.utils.logging_config import setup_logging
from colorwave.wave.parameters import clamp_parameters, load_parameters, parameters_to_dict, save_parameters
from colorwave.wave.rasterizer import render
from colorwave.wave.sampler import default_parameters, random_parameters

logger = logging.getLogger('colorwave')


def build_parser():
    parser = argparse.ArgumentParser(description='Render a procedural color wave.')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--reset', action='store_true', help='Use the default parameters')
    source.add_argument('--random', action='store_true', help='Draw random parameters')
    source.add_argument('--state', help=f'Load parameters from a JSON state file (e.g. {STATE_PATH})')
    parser.add_argument('--rng-seed', type=int, help='Seed for --random, for reproducible draws')
    parser.add_argument('--save', help='Write the parameters used to a JSON state file')
    parser.add_argument('--preview', action='store_true', help='Show the rendered strip in a window')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    return parser


def choose_parameters(args):
    if args.random:
        return random_parameters(np.random.default_rng(args.rng_seed))
    if args.state:
        if not os.path.exists(args.state):
            raise FileNotFoundError(f"State file not found: {args.state}")
        return clamp_parameters(load_parameters(args.state))
    return default_parameters()


def describe(params, frame):
    """Summarize parameters and the edge colors of both bands."""
    lines = [f"{key}: {value:.4f}" for key, value in parameters_to_dict(params).items()]
    height, width = frame.shape[:2]
    for name, row in (('top', 0), ('bottom', height - 1)):
        first = tuple(int(v) for v in frame[row, 0])
        last = tuple(int(v) for v in frame[row, width - 1])
        lines.append(f"{name} band: first={first} last={last}")
    return "\n".join(lines)


def show_preview(frame):
    cv2.imshow(WINDOW_TITLE, cv2.cvtColor(frame, cv2.COLOR_RGBA2BGRA))
    cv2.waitKey(0)
    cv2.destroyAllWindows()


def main(argv=None):
    """
    Main entry point for the color wave shell.
    Parses command line arguments, renders once and reports the result.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rng_seed is not None and not args.random:
        parser.error("--rng-seed only applies with --random")

    # Setup logging
    setup_logging(args.debug)

    params = choose_parameters(args)
    frame = render(params)
    logger.info(f"Rendered {frame.shape[1]}x{frame.shape[0]} color wave")
    print(describe(params, frame))

    if args.save:
        save_parameters(params, args.save)
    if args.preview:
        show_preview(frame)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as error:
        logging.error(f"Fatal error: {error}")
        traceback.print_exc()
        sys.exit(1)
