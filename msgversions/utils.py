class VersionLimits:
    MIN_VERSION = 0
    # largest signed 16-bit value; also the "no upper bound" sentinel
    MAX_VERSION = 2**15 - 1


def annotate_source(source: str, col_offset: int = None) -> str:
    """
    Annotate the location specified by ``col_offset`` in the single-line
    ``source`` with a location marker.

    :param source: The text containing the location, e.g. a version range
        string taken from a schema file.
    :param col_offset: The 0-indexed column offset of the location.

    :return: A string containing the source with a marker line below it.
    """
    if col_offset is None:
        return source

    if col_offset < 0 or col_offset > len(source):
        raise ValueError("Column offset is out of range")

    return f"{source}\n{'-' * col_offset}^"
