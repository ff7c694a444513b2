#!/usr/bin/env python
"""onto-triggers command line interface.

Usage:
    onto-triggers FILE [PREFIX]
    python -m onto_triggers FILE [PREFIX]

Examples:
    # Label triggers for every class and object property
    onto-triggers Core.rdf

    # BFO numeric and shortname triggers
    onto-triggers bfo-core.owl --strategy numeric

    # Numeric triggers under a different vocabulary prefix
    onto-triggers iof-core.rdf iof --strategy numeric

    # Qualified-name triggers without annotation labels
    onto-triggers Core.rdf --preset qname
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import STRATEGIES, ExpanderConfig
from .errors import OntoTriggersError
from .pipeline import write_pipeline


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="onto-triggers",
        description="Generate text-expansion triggers (packages.yml) from an OWL ontology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  onto-triggers Core.rdf
  onto-triggers bfo-core.owl --strategy numeric
  onto-triggers Core.rdf --preset qname --output core.yml
        """
    )

    parser.add_argument('file', metavar='FILE', type=Path, help='RDF/XML ontology document')
    parser.add_argument(
        'prefix',
        metavar='PREFIX',
        nargs='?',
        help='Vocabulary prefix for numeric triggers (e.g. "bfo"); ignored by the label strategy'
    )

    parser.add_argument('--preset', choices=['qname', 'label', 'bfo'], help='Start from a preset configuration')
    parser.add_argument('--config', type=Path, help='YAML file with configuration values')
    parser.add_argument('--strategy', choices=STRATEGIES, help='Trigger synthesis strategy (default: label)')
    parser.add_argument('--marker', help='Trigger marker character (default: ":")')
    parser.add_argument(
        '--no-prefer-labels',
        dest='prefer_labels',
        action='store_false',
        default=None,
        help='Use qualified names as triggers even when an English label exists'
    )
    parser.add_argument(
        '--no-annotations',
        dest='include_labels',
        action='store_false',
        default=None,
        help='Omit the label field from each match'
    )
    parser.add_argument('--output', type=Path, help='Output file (default: packages.yml)')
    parser.add_argument(
        '--strict',
        dest='lax',
        action='store_false',
        default=None,
        help='Fail instead of retrying with a guessed format when RDF/XML parsing fails'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log pipeline progress')
    return parser


def build_config(args: argparse.Namespace) -> ExpanderConfig:
    """Combine preset, config file and flags, in that order of precedence."""
    config = ExpanderConfig.from_preset(args.preset) if args.preset else ExpanderConfig()
    if args.config:
        config = ExpanderConfig.from_yaml(args.config, base=config)
    return config.with_overrides(
        strategy=args.strategy,
        marker=args.marker,
        vocab_prefix=args.prefix,
        prefer_labels=args.prefer_labels,
        include_labels=args.include_labels,
        output=args.output,
        lax=args.lax,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        out, collection = write_pipeline(args.file, config)
    except OntoTriggersError as e:
        print(f"error during {e.stage}: {e}", file=sys.stderr)
        return 1

    print(f"Generated {len(collection)} matches from {args.file}")
    print(f"Write completed: {out}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
