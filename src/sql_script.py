"""
Turns the text of a bundled SQL file into a list of statements that can be
executed one after another.

Only ``-- `` line comments are understood. Semicolons inside string literals
are not, so the bundled files must not contain any.
"""

import os
import re

from app_config import SQL_DIR
from db_error import DbError

COMMENT_MARKER = "-- "


def remove_comments(content):
    """Drop every '-- ' comment up to and including the end of its line."""
    position = content.find(COMMENT_MARKER)

    while position != -1:
        end_of_line = content.find("\n", position)
        if end_of_line == -1:
            content = content[:position]
        else:
            content = content[:position] + content[end_of_line + 1:]
        position = content.find(COMMENT_MARKER, position)

    return content


def collapse_whitespace(content):
    """Replace each run of whitespace with a single space."""
    return re.sub(r"\s+", " ", content)


def split_statements(content):
    """Split on ';', trimming each piece and dropping blank ones."""
    statements = []

    while content:
        semicolon = content.find(";")

        if semicolon == -1:
            if content.strip():
                statements.append(content.strip())
            content = ""
        else:
            statement = content[:semicolon].strip()
            if statement:
                statements.append(statement)
            content = content[semicolon + 1:]

    return statements


def convert_to_statements(content):
    content = remove_comments(content)
    content = collapse_whitespace(content)
    return split_statements(content)


def read_resource(file_name, resource_dir=None):
    """Read a bundled SQL file as text."""
    path = os.path.join(resource_dir or SQL_DIR, file_name)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DbError(f"Unable to read {path}: {e}") from e
