"""Command-line interface for training and generation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from markovseed import config
from markovseed.errors import InvalidModelError, MarkovSeedError
from markovseed.models.markov import MarkovModel


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def check_model(model: MarkovModel) -> None:
    """Log validation problems without stopping."""
    try:
        model.validate()
    except InvalidModelError as exc:
        logger.warning(f"Model validation warning: {exc}")


def train(args):
    """Train a new model and save it."""
    model = MarkovModel(n=args.n, verbose=args.verbose)
    if args.file is not None:
        model.train_from_file(args.file)
    else:
        model.train(args.text)

    if not args.skip_validation:
        check_model(model)

    print(model.summary(), end='')
    args.model.parent.mkdir(parents=True, exist_ok=True)
    model.save(args.model)
    logger.info(f"Model saved to {args.model}")


def generate(args):
    """Generate text from a saved model."""
    model = MarkovModel(
        verbose=args.verbose,
        secure_random=args.seed is None,
        seed=args.seed,
    )
    model.load(args.model, adopt_n=True)

    samples = [model.generate(args.length, args.start) for _ in range(args.count)]
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as out_f:
            for sample in samples:
                out_f.write(sample + '\n')
        logger.info(f"Wrote {len(samples)} samples to {args.output}")
    else:
        for i, sample in enumerate(samples, start=1):
            print(f"Generated {i}: {sample}")


def stats(args):
    """Print statistics for a saved model."""
    model = MarkovModel(verbose=args.verbose)
    model.load(args.model, adopt_n=True)
    print(f"n = {model.n}")
    print(model.summary(), end='')
    check_model(model)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Train and run a character-level n-gram Markov model'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log diagnostics from the model'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Training arguments
    train_parser = subparsers.add_parser('train')
    source = train_parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--text', type=str, help='Inline training text')
    source.add_argument('--file', type=Path, help='Training text file')
    train_parser.add_argument('--n', type=int, default=config.DEFAULT_N)
    train_parser.add_argument('--model', type=Path, default=config.DEFAULT_MODEL_PATH)
    train_parser.add_argument('--skip-validation', action='store_true')
    train_parser.set_defaults(func=train)

    # Generation arguments
    generate_parser = subparsers.add_parser('generate')
    generate_parser.add_argument('--model', type=Path, default=config.DEFAULT_MODEL_PATH)
    generate_parser.add_argument('--length', type=int, default=config.DEFAULT_LENGTH)
    generate_parser.add_argument('--start', type=str, help='Text to start generation with')
    generate_parser.add_argument('--count', type=int, default=1)
    generate_parser.add_argument('--seed', type=int, help='Seed for reproducible output')
    generate_parser.add_argument('--output', type=Path)
    generate_parser.set_defaults(func=generate)

    stats_parser = subparsers.add_parser('stats')
    stats_parser.add_argument('--model', type=Path, default=config.DEFAULT_MODEL_PATH)
    stats_parser.set_defaults(func=stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        args.func(args)
    except MarkovSeedError as exc:
        logger.error(f"Error: {exc}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
