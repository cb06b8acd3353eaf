"""
Usage:
    nominae [options]

Options:
    -n --count N                 Number of names to generate
    --min LENGTH                 Minimum number of fragments in a name
    --max LENGTH                 Maximum number of fragments in a name (exclusive)
    --seed SEED                  Integer seed for reproducible names
    --configuration-file FILE    Load config variables from FILE
    -h --help                    Show this screen
"""

import logging
import os
import random
import sys
from typing import Optional

from docopt import DocoptExit, docopt

from .config import config
from .exceptions import InvalidRange
from .totro import NameGenerator

logger = logging.getLogger(__name__)


def int_option(args: dict, name: str, default: Optional[int]) -> Optional[int]:
    value = args.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise DocoptExit(f"{name} must be an integer, got {value!r}")


def main(argv=None) -> int:
    args = docopt(__doc__, argv=argv, version="nominae")
    config_file = args.get("--configuration-file")
    if config_file:
        os.environ["CONFIGURATION_FILE"] = config_file
    config.refresh()

    count = int_option(args, "--count", config.COUNT)
    min_length = int_option(args, "--min", config.MIN_LENGTH)
    max_length = int_option(args, "--max", config.MAX_LENGTH)
    seed = int_option(args, "--seed", config.SEED)

    rng = random if seed is None else random.Random(seed)
    logger.debug(
        "Generating %d names of %d to %d fragments (seed %s)",
        count, min_length, max_length, seed
    )

    try:
        names = NameGenerator.generate_many(
            count, min_length, max_length, rng
        )
    except InvalidRange as e:
        logger.error("Can't generate names: %s", e.message)
        return 1

    for name in names:
        print(name)

    return 0


def run():
    logger = logging.getLogger()
    stderr_handler = logging.StreamHandler()
    stderr_handler.setFormatter(
        logging.Formatter(
            fmt="%(levelname)-8s %(asctime)s %(name)-30s %(message)s",
            datefmt="%b %d  %H:%M:%S"
        )
    )
    logger.addHandler(stderr_handler)
    logger.setLevel(config.LOG_LEVEL)

    exit_code = main()
    if exit_code:
        logger.error("Exited with code: %s", exit_code)

    sys.exit(exit_code)
