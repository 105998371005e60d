#!/usr/bin/env python3
"""
gen_injectors.py - view injector generator entry point

Generates one injector class per target described in the given JSON files.

Usage:
    python scripts/gen_injectors.py bindings.json [-o gen/java] [-j N] [--dry-run] [--stdout]
"""

import argparse
import logging
import os
import sys

# Add scripts directory to path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)

from inject_gen import Generator, GeneratorConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate view injector sources')
    parser.add_argument('inputs', nargs='+',
                        help='JSON binding description files')
    parser.add_argument('-o', '--output', default='gen/java',
                        help='Output root for generated sources (default: gen/java)')
    parser.add_argument('-j', '--jobs', type=int, default=os.cpu_count() or 1,
                        help=f'Number of render threads (default: {os.cpu_count()})')
    parser.add_argument('--dry-run', action='store_true',
                        help='Render without writing files')
    parser.add_argument('--stdout', action='store_true',
                        help='Print generated sources to stdout')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: [%(name)s] %(message)s',
    )

    gen = Generator(GeneratorConfig(
        output_root=args.output,
        jobs=args.jobs,
        dry_run=args.dry_run or args.stdout,
    ))

    print('=== Generating view injectors:')
    report = gen.generate(args.inputs)

    for result in report.results:
        if result.ok:
            print(f'  [OK] {result.name} => {result.path}')
            if args.stdout:
                print(result.source)
        else:
            print(f'  [FAIL] {result.name}')
            print(f'       {result.error}')

    print(f'\nResults: {len(report.succeeded)} succeeded, {len(report.failed)} failed')
    return 0 if not report.failed else 1


if __name__ == '__main__':
    sys.exit(main())
