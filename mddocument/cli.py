"""
mddocument - markdown document output format

Inspect the pandoc options of a markdown format and run its hooks on files.
"""

import argparse
import json
import logging
import sys

from . import __version__
from .config import DEFAULT_CONFIG
from .exceptions import MdDocumentError
from .frontmatter_parser import read_metadata
from .output_format import Includes, md_document
from .variants import adapt_md_variant

logger = logging.getLogger('mddocument')


def setup_logging(verbose=False, quiet=False):
    """Configure logging based on CLI flags.

    Args:
        verbose: If True, show DEBUG level messages
        quiet: If True, suppress all non-error output
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger = logging.getLogger('mddocument')
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def _add_format_arguments(parser):
    parser.add_argument("--variant", default=DEFAULT_CONFIG.DEFAULT_VARIANT,
                        help="Markdown variant to produce (default: %(default)s)")
    parser.add_argument("--md-extension", action="append", dest="md_extensions", default=None,
                        help="Reader extension such as +gfm_auto_identifiers (repeatable)")


def _format_to_dict(output_format):
    pandoc = output_format.pandoc
    return {
        "to": pandoc.to,
        "from": pandoc.from_,
        "args": pandoc.args,
        "lua_filters": pandoc.lua_filters,
        "ext": pandoc.ext,
        "knitr": output_format.knitr.opts_chunk(),
        "clean_supporting": output_format.clean_supporting,
        "df_print": output_format.df_print,
        "pre_processor": output_format.pre_processor is not None,
        "post_processor": output_format.post_processor is not None,
    }


def cmd_format(args):
    includes = None
    if args.in_header or args.before_body or args.after_body:
        includes = Includes(
            in_header=args.in_header or [],
            before_body=args.before_body or [],
            after_body=args.after_body or [],
        )
    output_format = md_document(
        variant=args.variant,
        preserve_yaml=args.preserve_yaml,
        toc=args.toc,
        toc_depth=args.toc_depth,
        number_sections=args.number_sections,
        standalone=args.standalone,
        includes=includes,
        md_extensions=args.md_extensions,
        pandoc_args=args.pandoc_args,
        ext=args.ext,
    )
    json.dump(_format_to_dict(output_format), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_adapt(args):
    print(adapt_md_variant(args.variant))


def cmd_preserve_yaml(args):
    output_format = md_document(preserve_yaml=True)
    metadata = read_metadata(args.input_file)
    result = output_format.post_processor(metadata, args.input_file, args.output_file)
    logger.info("Front matter restored in %s", result)


def cmd_number_sections(args):
    output_format = md_document(
        variant=args.variant,
        number_sections=True,
        md_extensions=args.md_extensions,
    )
    if output_format.pre_processor is None:
        logger.error("Variant %s with extensions %s does not need section preprocessing",
                     args.variant, args.md_extensions)
        sys.exit(1)
    metadata = read_metadata(args.input_file)
    output_format.pre_processor(metadata, args.input_file)
    logger.info("Numbered sections in %s", args.input_file)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mddocument",
        description="Markdown document output format for pandoc.",
        epilog="Examples:\n"
               "  mddocument format --variant gfm --toc\n"
               "  mddocument adapt markdown+smart\n"
               "  mddocument preserve-yaml input.Rmd output.md\n"
               "  mddocument number-sections input.md --variant gfm --md-extension +gfm_auto_identifiers",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", default=False,
                        help="Show detailed debug output")
    parser.add_argument("-q", "--quiet", action="store_true", default=False,
                        help="Suppress all non-error output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_format = subparsers.add_parser("format", help="Print the assembled pandoc options as JSON")
    _add_format_arguments(p_format)
    p_format.add_argument("--preserve-yaml", action="store_true")
    p_format.add_argument("--toc", action="store_true")
    p_format.add_argument("--toc-depth", type=int, default=DEFAULT_CONFIG.DEFAULT_TOC_DEPTH)
    p_format.add_argument("--number-sections", action="store_true")
    p_format.add_argument("--standalone", action="store_true")
    p_format.add_argument("--in-header", action="append")
    p_format.add_argument("--before-body", action="append")
    p_format.add_argument("--after-body", action="append")
    p_format.add_argument("--pandoc-arg", action="append", dest="pandoc_args",
                          help="Raw pandoc argument passed through verbatim (repeatable)")
    p_format.add_argument("--ext", default=DEFAULT_CONFIG.DEFAULT_EXT)
    p_format.set_defaults(func=cmd_format)

    p_adapt = subparsers.add_parser("adapt", help="Print the normalized writer variant")
    p_adapt.add_argument("variant")
    p_adapt.set_defaults(func=cmd_adapt)

    p_preserve = subparsers.add_parser("preserve-yaml",
                                       help="Copy the front matter of INPUT on top of OUTPUT")
    p_preserve.add_argument("input_file")
    p_preserve.add_argument("output_file")
    p_preserve.set_defaults(func=cmd_preserve_yaml)

    p_number = subparsers.add_parser("number-sections", help="Number headers of INPUT in place")
    p_number.add_argument("input_file")
    _add_format_arguments(p_number)
    p_number.set_defaults(func=cmd_number_sections)

    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        args.func(args)
    except MdDocumentError as e:
        logger.error("%s", e)
        sys.exit(1)
    except OSError as e:
        logger.error("File error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
