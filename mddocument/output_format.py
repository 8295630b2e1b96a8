"""
The markdown document output format.

build_format() turns a FormatOptions into an OutputFormat: the pandoc flags,
the writer variant and the optional pre/post-processing hooks a rendering
driver calls around its own pandoc run.
"""

import logging
import warnings
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import DEFAULT_CONFIG
from .files import read_utf8, write_utf8
from .frontmatter_parser import preserve_yaml
from .pandoc import (
    from_markdown,
    includes_to_args,
    lua_filter_path,
    pandoc_available,
    pandoc_convert,
    toc_args,
)
from .variants import adapt_md_variant

logger = logging.getLogger('mddocument')


@dataclass
class Includes:
    """Files pandoc should splice into the document."""
    in_header: list = field(default_factory=list)
    before_body: list = field(default_factory=list)
    after_body: list = field(default_factory=list)


@dataclass(frozen=True)
class FormatOptions:
    variant: str = DEFAULT_CONFIG.DEFAULT_VARIANT
    preserve_yaml: bool = False
    toc: bool = False
    toc_depth: int = DEFAULT_CONFIG.DEFAULT_TOC_DEPTH
    number_sections: bool = False
    standalone: bool = False
    fig_width: float = DEFAULT_CONFIG.FIG_WIDTH
    fig_height: float = DEFAULT_CONFIG.FIG_HEIGHT
    fig_retina: Optional[float] = None
    dev: str = DEFAULT_CONFIG.FIG_DEV
    df_print: str = DEFAULT_CONFIG.DEFAULT_DF_PRINT
    includes: Optional[Includes] = None
    md_extensions: Optional[tuple] = None
    pandoc_args: Optional[tuple] = None
    ext: str = DEFAULT_CONFIG.DEFAULT_EXT

    def __post_init__(self):
        # detach from caller-owned lists
        for name in ('md_extensions', 'pandoc_args'):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, tuple(value))


@dataclass
class KnitrOptions:
    """Chunk options for figures produced while knitting."""
    fig_width: float
    fig_height: float
    fig_retina: Optional[float] = None
    dev: str = DEFAULT_CONFIG.FIG_DEV
    dpi: int = DEFAULT_CONFIG.KNITR_DPI

    def opts_chunk(self) -> dict:
        return {
            'dev': self.dev,
            'dpi': self.dpi,
            'fig.width': self.fig_width,
            'fig.height': self.fig_height,
            'fig.retina': self.fig_retina,
        }


@dataclass
class PandocOptions:
    to: str
    from_: str
    args: list = field(default_factory=list)
    lua_filters: list = field(default_factory=list)
    ext: str = DEFAULT_CONFIG.DEFAULT_EXT


@dataclass
class OutputFormat:
    knitr: KnitrOptions
    pandoc: PandocOptions
    clean_supporting: bool = False
    df_print: str = DEFAULT_CONFIG.DEFAULT_DF_PRINT
    pre_processor: Optional[Callable] = None
    post_processor: Optional[Callable] = None


def _needs_number_sections_preprocess(variant, md_extensions):
    config = DEFAULT_CONFIG
    return (variant.startswith(config.AUTO_IDENTIFIER_BASES)
            and any(config.AUTO_IDENTIFIER_EXTENSION in ext for ext in md_extensions or []))


def _number_sections_pre_processor(md_extensions):
    """Build the hook that numbers headers in place before the main pandoc run.

    gfm_auto_identifiers derive ids from header text, so numbering has to
    happen on the intermediate markdown while the original ids still apply.
    The reader format is explicit so inputs such as .Rmd are read as markdown.
    """
    reader = from_markdown(extensions=md_extensions)

    def pre_processor(metadata, input_file, *args, **kwargs):
        logger.debug("Numbering sections in %s", input_file)
        input_lines = read_utf8(input_file)
        pandoc_convert(
            input_file, to='markdown', output=input_file,
            options=[
                '--lua-filter', lua_filter_path(DEFAULT_CONFIG.NUMBER_SECTIONS_FILTER),
                '--metadata', DEFAULT_CONFIG.NUMBER_SECTIONS_META,
            ],
            from_=reader,
        )
        rewritten_lines = read_utf8(input_file)
        write_utf8(preserve_yaml(input_lines, rewritten_lines), input_file)
        return []

    return pre_processor


def _preserve_yaml_post_processor(metadata, input_file, output_file, clean=False, verbose=False):
    logger.debug("Restoring front matter of %s into %s", input_file, output_file)
    input_lines = read_utf8(input_file)
    output_lines = read_utf8(output_file)
    write_utf8(preserve_yaml(input_lines, output_lines), output_file)
    return output_file


def build_format(options: FormatOptions, pandoc_version=None) -> OutputFormat:
    """
    Assemble the markdown document output format.

    Args:
        options: Format configuration
        pandoc_version: Optional callable returning the installed pandoc
                        version. Defaults to asking pandoc itself.

    Returns:
        OutputFormat for the rendering driver
    """
    standalone = options.standalone or options.toc

    args = ['--standalone'] if standalone else []
    args += toc_args(options.toc, options.toc_depth)
    args += includes_to_args(options.includes)
    args += list(options.pandoc_args or [])

    number_sections = options.number_sections
    if number_sections and not pandoc_available(DEFAULT_CONFIG.NUMBER_SECTIONS_MIN_PANDOC, pandoc_version):
        message = ("`number_sections=True` requires at least Pandoc %s. "
                   "The feature will be deactivated" % DEFAULT_CONFIG.NUMBER_SECTIONS_MIN_PANDOC)
        logger.warning(message)
        warnings.warn(message, UserWarning, stacklevel=2)
        number_sections = False

    pre_processor = None
    if number_sections and _needs_number_sections_preprocess(options.variant, options.md_extensions):
        pre_processor = _number_sections_pre_processor(options.md_extensions)

    variant = adapt_md_variant(options.variant, pandoc_version)

    # pandoc's own yaml_metadata_block writer reorders keys, so the original
    # front matter is copied back verbatim instead
    post_processor = _preserve_yaml_post_processor if options.preserve_yaml else None

    lua_filters = []
    if number_sections:
        lua_filters.append(lua_filter_path(DEFAULT_CONFIG.NUMBER_SECTIONS_FILTER))

    logger.debug("Markdown format: to=%s args=%s", variant, args)

    return OutputFormat(
        knitr=KnitrOptions(
            fig_width=options.fig_width,
            fig_height=options.fig_height,
            fig_retina=options.fig_retina,
            dev=options.dev,
        ),
        pandoc=PandocOptions(
            to=variant,
            from_=from_markdown(extensions=options.md_extensions),
            args=args,
            lua_filters=lua_filters,
            ext=options.ext,
        ),
        clean_supporting=False,
        df_print=options.df_print,
        pre_processor=pre_processor,
        post_processor=post_processor,
    )


def md_document(pandoc_version=None, **kwargs) -> OutputFormat:
    """Convert to a markdown document (strict markdown, gfm, commonmark, ...).

    Keyword arguments are the FormatOptions fields, e.g.
    ``md_document(variant='gfm', toc=True, preserve_yaml=True)``.
    """
    return build_format(FormatOptions(**kwargs), pandoc_version=pandoc_version)
