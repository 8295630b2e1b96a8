"""
Thin wrappers around the pandoc executable.

Everything here either describes pandoc command-line flags or hands work to
pandoc through pypandoc. The installed version can be replaced by any
zero-argument callable, which is how callers pin a version in tests.
"""

import functools
import logging
import os
import re

import pypandoc

from .config import DEFAULT_CONFIG
from .exceptions import ConversionError, PandocNotFoundError

logger = logging.getLogger('mddocument')

_LUA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'lua')


@functools.lru_cache(maxsize=None)
def installed_pandoc_version():
    """Return the installed pandoc version string, or None if pandoc is missing."""
    try:
        return pypandoc.get_pandoc_version()
    except OSError as e:
        logger.debug("Pandoc not found: %s", e)
        return None


def parse_version(value):
    """Turn '2.13.1', (2, 13) or None into a comparable tuple of ints.

    Args:
        value: Version string or tuple

    Returns:
        Tuple of ints, or None when value is None or has no numeric part
    """
    if value is None:
        return None
    if isinstance(value, tuple):
        return tuple(int(v) for v in value)
    m = re.match(r'\s*(\d+(?:\.\d+)*)', str(value))
    if not m:
        return None
    return tuple(int(part) for part in m.group(1).split('.'))


def pandoc_available(version=None, pandoc_version=None) -> bool:
    """Check that pandoc is installed and, optionally, at least `version`.

    Args:
        version: Minimum required version ('2.13'), or None for any version
        pandoc_version: Callable returning the installed version. Defaults to
                        installed_pandoc_version.
    """
    query = pandoc_version or installed_pandoc_version
    current = parse_version(query())
    if current is None:
        return False
    if version is None:
        return True
    required = parse_version(version)
    # pad so that 2.1 == 2.1.0
    width = max(len(current), len(required))
    current += (0,) * (width - len(current))
    required += (0,) * (width - len(required))
    return current >= required


def toc_args(toc, toc_depth=DEFAULT_CONFIG.DEFAULT_TOC_DEPTH):
    args = []
    if toc:
        args.append('--table-of-contents')
        args.extend(['--toc-depth', str(toc_depth)])
    return args


def includes_to_args(includes):
    """Convert an Includes object into pandoc --include-* flags."""
    args = []
    if includes is None:
        return args
    for flag, paths in (('--include-in-header', includes.in_header),
                        ('--include-before-body', includes.before_body),
                        ('--include-after-body', includes.after_body)):
        for path in paths:
            args.extend([flag, str(path)])
    return args


def from_markdown(implicit_figures=True, extensions=None):
    """Build the pandoc reader format for the source markdown.

    Input:  extensions=['+smart', '-citations']
    Output: 'markdown+autolink_bare_uris+tex_math_single_backslash+smart-citations'
    """
    parts = [DEFAULT_CONFIG.READER_BASE] + list(DEFAULT_CONFIG.READER_EXTENSIONS)
    if not implicit_figures:
        parts.append('-implicit_figures')
    if extensions:
        parts.extend(extensions)
    return ''.join(parts)


def lua_filter_path(name):
    """Return the path of a lua filter bundled with the package."""
    path = os.path.join(_LUA_DIR, name)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Bundled lua filter not found: {name}")
    return path


def pandoc_convert(input_file, to, output=None, options=None, from_=None):
    """Run pandoc on a file.

    Args:
        input_file: Source file path
        to: Pandoc writer format
        output: Output file path. May be the input path to rewrite in place.
        options: Extra command-line options
        from_: Reader format; inferred from the file extension when None

    Raises:
        PandocNotFoundError: If pandoc cannot be executed.
        ConversionError: If pandoc exits with an error.
    """
    extra_args = list(options or [])
    logger.debug("pandoc %s -t %s -o %s %s", input_file, to, output, ' '.join(extra_args))
    try:
        return pypandoc.convert_file(
            str(input_file),
            to,
            format=from_,
            outputfile=str(output) if output is not None else None,
            extra_args=extra_args,
        )
    except OSError as e:
        raise PandocNotFoundError(f"pandoc could not be run: {e}") from e
    except RuntimeError as e:
        raise ConversionError(str(e)) from e
