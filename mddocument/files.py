"""Whole-file, line-oriented UTF-8 reading and writing."""


def read_utf8(path) -> list[str]:
    """Read a file as a list of lines without line terminators.

    Only '\\n', '\\r\\n' and '\\r' end a line; form feeds and Unicode line
    separators stay inside their line.
    """
    # universal newlines turn '\r\n' and '\r' into '\n'
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return lines


def write_utf8(lines, path):
    with open(path, 'w', encoding='utf-8') as f:
        f.writelines(line + '\n' for line in lines)
