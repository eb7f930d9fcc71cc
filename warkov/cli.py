"""Command-line interface for generating words from a list of examples."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from warkov.data.dataset import TOKENIZERS, get_tokenizer, read_lines
from warkov.models.markov import MarkovChain
from warkov.utils.errors import WarkovError
from warkov.utils.rng import TorchRandomSource
from warkov.utils.trainer import GenerationConfig, Generator, Trainer


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def run(filename: Path, config: GenerationConfig) -> None:
    """Train on ``filename`` and print generated words."""
    lines = read_lines(filename)
    logger.info(f"Read {len(lines)} lines from {filename}")

    tokenizer = get_tokenizer(config.tokenize)
    model = MarkovChain(config.max_look, rng=TorchRandomSource(config.seed))
    Trainer(model, tokenizer).train_lines(lines)

    generator = Generator(model, tokenizer)
    if config.min_look is None:
        for text in generator.sample(config.num, config.max_look):
            print(text)
    else:
        for lookbehind, text in generator.sweep(config.num, config.min_look, config.max_look):
            print(f"{lookbehind} {text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate words from a file of existing words'
    )
    parser.add_argument(
        'filename',
        type=Path,
        help='File to read example words from, e.g. /usr/share/dict/words'
    )
    parser.add_argument(
        '-n', '--num',
        type=int,
        default=10,
        metavar='N',
        help='Number of new words to generate (per lookbehind with --min-look)'
    )
    parser.add_argument(
        '--max-look',
        type=int,
        default=3,
        metavar='N',
        help='Max lookbehind to use when generating'
    )
    parser.add_argument(
        '--min-look',
        type=int,
        metavar='N',
        help='Generate NUM items for every lookbehind from MAX_LOOK down to MIN_LOOK'
    )
    parser.add_argument('--seed', type=int, help='Seed for reproducible output')
    parser.add_argument(
        '--tokenize',
        choices=sorted(TOKENIZERS),
        default='chars',
        help='Split lines into characters or whitespace-separated words'
    )
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = GenerationConfig(
            num=args.num,
            max_look=args.max_look,
            min_look=args.min_look,
            seed=args.seed,
            tokenize=args.tokenize
        )
        run(args.filename, config)
    except (WarkovError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
