"""
Normalization of pandoc markdown writer variants.

A variant is a base writer name followed by extension flags, for example
``gfm+footnotes-yaml_metadata_block``. Each flag is prefixed with ``+`` to
enable or ``-`` to disable it.
"""

from .config import DEFAULT_CONFIG
from .pandoc import pandoc_available


def split_variant(variant):
    """Split a variant at its first '+' or '-'.

    >>> split_variant('gfm+smart-raw_html')
    ('gfm', '+smart-raw_html')
    >>> split_variant('markdown_strict')
    ('markdown_strict', '')
    """
    for i, ch in enumerate(variant):
        if ch in '+-':
            return variant[:i], variant[i:]
    return variant, ''


def set_extension(extensions, names, add=True):
    """Append '+name' or '-name' flags not already present in `extensions`."""
    sign = '+' if add else '-'
    for name in names:
        flag = sign + name
        # NOTE: substring test, so a flag whose name contains another flag's
        # name would be treated as present
        if flag in extensions:
            continue
        extensions += flag
    return extensions


def adapt_md_variant(variant, pandoc_version=None):
    """
    Disable the metadata header extensions of a markdown writer variant.

    Leaves the variant alone when it already mentions yaml_metadata_block or
    when its base writer is unknown.

    Args:
        variant: Writer variant such as 'gfm' or 'markdown+smart'
        pandoc_version: Optional callable returning the installed pandoc version

    Returns:
        Normalized variant string
    """
    config = DEFAULT_CONFIG
    base, extensions = split_variant(variant)

    if config.YAML_BLOCK_EXTENSION not in extensions:
        if base in config.VERSIONED_VARIANTS:
            if pandoc_available(config.YAML_METADATA_BLOCK_MIN_PANDOC, pandoc_version):
                extensions = set_extension(extensions, [config.YAML_BLOCK_EXTENSION], add=False)
        elif base in config.VARIANT_REMOVALS:
            extensions = set_extension(extensions, config.VARIANT_REMOVALS[base], add=False)

    return base + extensions
