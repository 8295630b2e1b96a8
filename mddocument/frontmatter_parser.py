"""
YAML front matter detection and preservation.
"""

import re
from typing import NamedTuple, Optional

import frontmatter
import yaml

from .exceptions import FrontMatterError

_DELIMITER = re.compile(r'^(---|\.\.\.)\s*$')
_OPENING = re.compile(r'^---\s*$')


class YamlPartition(NamedTuple):
    front_matter: Optional[list]
    body: list


def partition_yaml_front_matter(input_lines) -> YamlPartition:
    """
    Split lines into a leading front matter block and the remaining body.

    The block opens with '---' and closes with '---' or '...'. It must hold at
    least one line and may only be preceded by blank lines.

    Args:
        input_lines: Document lines without line terminators

    Returns:
        YamlPartition with front_matter=None when no block is found
    """
    lines = list(input_lines)
    delimiters = [i for i, line in enumerate(lines) if _DELIMITER.match(line)]

    if len(delimiters) < 2:
        return YamlPartition(None, lines)
    start, end = delimiters[0], delimiters[1]
    if end - start <= 1 or not _OPENING.match(lines[start]):
        return YamlPartition(None, lines)
    if any(line.strip() for line in lines[:start]):
        return YamlPartition(None, lines)

    return YamlPartition(lines[start:end + 1], lines[:start] + lines[end + 1:])


def preserve_yaml(input_lines, output_lines) -> list:
    """
    Put the front matter of input_lines back on top of output_lines.

    Input:  ["---", "title: x", "---", "body"], ["converted body"]
    Output: ["---", "title: x", "---", "", "converted body"]
    """
    partitioned = partition_yaml_front_matter(input_lines)
    if partitioned.front_matter is None:
        return list(output_lines)
    return partitioned.front_matter + [''] + list(output_lines)


def read_metadata(file_path: str) -> dict:
    """
    Load the front matter metadata of a Markdown file.

    Args:
        file_path: Path to the Markdown file

    Returns:
        Metadata dictionary (empty when the file has no front matter)

    Raises:
        FrontMatterError: If the front matter is not valid YAML.
    """
    try:
        post = frontmatter.load(file_path)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front matter in {file_path}: {e}") from e
    return dict(post.metadata)
