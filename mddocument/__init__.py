"""
mddocument - the markdown document output format

Builds the pandoc options, writer variant and pre/post-processing hooks for
rendering a document to strict markdown, GitHub flavored markdown,
CommonMark and the other pandoc markdown writers.
"""

__version__ = "0.1.0"

from .output_format import (
    md_document,
    build_format,
    FormatOptions,
    Includes,
    KnitrOptions,
    PandocOptions,
    OutputFormat,
)
from .variants import adapt_md_variant, split_variant
from .frontmatter_parser import (
    partition_yaml_front_matter,
    preserve_yaml,
    read_metadata,
    YamlPartition,
)
from .pandoc import pandoc_available, pandoc_convert
from .config import FormatConfig, DEFAULT_CONFIG
from .exceptions import MdDocumentError, PandocNotFoundError, ConversionError, FrontMatterError

__all__ = [
    "md_document",
    "build_format",
    "FormatOptions",
    "Includes",
    "KnitrOptions",
    "PandocOptions",
    "OutputFormat",
    "adapt_md_variant",
    "split_variant",
    "partition_yaml_front_matter",
    "preserve_yaml",
    "read_metadata",
    "YamlPartition",
    "pandoc_available",
    "pandoc_convert",
    "FormatConfig",
    "DEFAULT_CONFIG",
    "MdDocumentError",
    "PandocNotFoundError",
    "ConversionError",
    "FrontMatterError",
]
