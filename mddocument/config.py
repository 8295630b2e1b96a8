"""
Configuration constants for the markdown document format.

This module centralizes the defaults and pandoc version thresholds used when
assembling a format. Values can be overridden by:
1. Keyword arguments to md_document()
2. CLI arguments
"""


class FormatConfig:
    """Default configuration values for markdown output."""

    # === Format Defaults ===
    DEFAULT_VARIANT = 'markdown_strict'
    DEFAULT_TOC_DEPTH = 3
    DEFAULT_EXT = '.md'
    DEFAULT_DF_PRINT = 'default'

    # === Figures ===
    FIG_WIDTH = 7
    FIG_HEIGHT = 5
    FIG_DEV = 'png'
    KNITR_DPI = 96

    # === Pandoc Version Thresholds ===
    NUMBER_SECTIONS_MIN_PANDOC = '2.1'
    YAML_METADATA_BLOCK_MIN_PANDOC = '2.13'  # extension unknown to older writers

    # === Section Numbering ===
    NUMBER_SECTIONS_FILTER = 'number-sections.lua'
    NUMBER_SECTIONS_META = 'preprocess_number_sections=true'
    AUTO_IDENTIFIER_BASES = ('commonmark', 'gfm', 'markdown')
    AUTO_IDENTIFIER_EXTENSION = '+gfm_auto_identifiers'

    # === Reader ===
    READER_BASE = 'markdown'
    READER_EXTENSIONS = ['+autolink_bare_uris', '+tex_math_single_backslash']

    # === Writer Variants ===
    # Extensions removed from each writer so pandoc does not emit its own
    # metadata header; the front matter is restored by the post-processor.
    YAML_BLOCK_EXTENSION = 'yaml_metadata_block'
    VERSIONED_VARIANTS = ('gfm', 'commonmark', 'commonmark_x')
    VARIANT_REMOVALS = {
        'markdown': ['yaml_metadata_block', 'pandoc_title_block'],
        'markdown_mmd': ['yaml_metadata_block', 'mmd_title_block'],
        'markdown_github': ['yaml_metadata_block'],
        'markdown_phpextra': ['yaml_metadata_block'],
        'markdown_strict': ['yaml_metadata_block'],
    }


# Global default config instance
DEFAULT_CONFIG = FormatConfig()
