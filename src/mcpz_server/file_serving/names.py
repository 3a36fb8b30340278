"""Stored name encoding.

A stored name is ``{id}{delimiter}{original_filename}``. Nothing else is
persisted: both parts are recovered by splitting at the first delimiter, so
original filenames may themselves contain the delimiter.
"""

from ..models import StoredName


def format_stored_name(id: str, original_filename: str, delimiter: str) -> str:  # noqa: A002
    """Join an ID and an original filename.

    Example:
        format_stored_name("abc123", "report-2024.pdf", "-")
        # => 'abc123-report-2024.pdf'
    """
    return f"{id}{delimiter}{original_filename}"


def parse_stored_name(stored_name: str, delimiter: str) -> StoredName:
    """Split a stored name back into ID and original filename.

    Everything before the first delimiter is the ID, everything after it the
    filename. Names without a delimiter come back as both ID and filename.

    Examples:
        parse_stored_name("abc123-report-2024-final.pdf", "-")
        # => StoredName(id='abc123', filename='report-2024-final.pdf')

        parse_stored_name("report.pdf", "-")
        # => StoredName(id='report.pdf', filename='report.pdf')
    """
    id_part, found, filename = stored_name.partition(delimiter)
    if not found:
        return StoredName(id=stored_name, filename=stored_name)
    return StoredName(id=id_part, filename=filename)
