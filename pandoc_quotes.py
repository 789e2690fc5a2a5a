#!/usr/bin/env python3
"""
pandoc-quotes - Replaces plain quotation marks with typographic ones

Pandoc JSON filter that turns Quoted elements into the quotation marks
of the document's language. The language comes from the first of these
metadata fields that is set:

    quot-marks: “”‘’          (or a list of four strings)
    quot-lang: de-CH
    lang: en-GB

Spans and divs with a `lang` attribute use their own language.
Further languages can be defined in quot-marks.yaml files.

Usage:
    pandoc --filter pandoc-quotes input.md -o output.html
    pandoc-quotes --input input.md --output output.html
    pandoc-quotes --input input.md --output output.html --lang de

Examples:
    # As a JSON filter (pandoc passes the output format as an argument)
    pandoc -t json input.md | pandoc-quotes html | pandoc -f json -o output.html

    # With your own quotation marks
    pandoc --filter pandoc-quotes input.md -o output.html \\
        -M quot-marks='«»‹›'
"""

import argparse
import json
import sys
from pathlib import Path

from config.constants import PROGRAM_NAME, VERSION
from config.logging_config import setup_logger
from config.settings import Settings
from quotemarks.errors import StructuralError
from quotemarks.pandoc_runner import PandocError, PandocRunner
from quotemarks.quote_filter import QuoteFilter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Replace pandoc Quoted elements with language-appropriate quotation marks",
        epilog="""
Examples:
  pandoc --filter %(prog)s input.md -o output.html
  %(prog)s --input input.md --output output.html --lang de
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'format',
        nargs='?',
        help='Output format passed by pandoc (ignored)'
    )

    parser.add_argument(
        '-i', '--input',
        type=Path,
        help='Input file; run pandoc instead of filtering stdin'
    )

    parser.add_argument(
        '-o', '--output',
        type=Path,
        help='Output file (required with --input)'
    )

    parser.add_argument(
        '-f', '--from',
        dest='from_format',
        help='Input format for pandoc (default: markdown)'
    )

    parser.add_argument(
        '-t', '--to',
        dest='to_format',
        help='Output format for pandoc (default: guessed from --output)'
    )

    parser.add_argument(
        '-s', '--standalone',
        action='store_true',
        help='Produce a standalone document'
    )

    parser.add_argument(
        '-q', '--quot-marks',
        dest='quot_marks',
        type=Path,
        action='append',
        default=[],
        metavar='FILE',
        help='Read quotation marks from FILE (may be repeated; later files win)'
    )

    parser.add_argument(
        '-l', '--lang',
        help='Language to use when a document sets none'
    )

    parser.add_argument(
        '--no-data-dir',
        action='store_true',
        help="Don't read quot-marks.yaml from pandoc's user data directory"
    )

    parser.add_argument(
        '--skip-invalid',
        action='store_true',
        help='Leave quotations with an unknown quote type untouched instead of failing'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug messages to stderr'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    return parser


def make_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line options applied on top."""
    settings = Settings()
    if args.lang:
        settings.default_lang = args.lang
    if args.no_data_dir:
        settings.search_data_dir = False
    if args.skip_invalid:
        settings.skip_invalid = True
    if args.verbose:
        settings.log_level = 'DEBUG'
    return settings


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input and not args.output:
        parser.error('--output is required with --input')

    settings = make_settings(args)
    logger = setup_logger('quotemarks', level=settings.log_level, log_file=settings.log_file)
    quote_filter = QuoteFilter(settings, override_files=args.quot_marks)

    try:
        if args.input:
            runner = PandocRunner()
            document = runner.read(args.input, args.from_format)
            result = quote_filter.apply(document)
            runner.write(result.document, args.output, args.to_format, args.standalone)
        else:
            # pandoc writes UTF-8 regardless of the locale
            document = json.load(getattr(sys.stdin, 'buffer', sys.stdin))
            result = quote_filter.apply(document)
            json.dump(result.document, sys.stdout)

        logger.debug(f"{result.rewritten} quotation(s) rewritten, {result.untouched} left untouched")
        return 0

    except json.JSONDecodeError as e:
        logger.error(f"input is not JSON: {e}")
        return 1
    except (ValueError, StructuralError) as e:
        logger.error(str(e))
        return 1
    except PandocError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
