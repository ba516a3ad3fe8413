import pytest

from db_error import DbError
from sql_script import (
    collapse_whitespace, convert_to_statements, read_resource, remove_comments,
    split_statements
)


def test_split_drops_trailing_empty_fragment():
    assert split_statements("A; B;") == ["A", "B"]


def test_split_keeps_unterminated_last_statement():
    assert split_statements("A; B") == ["A", "B"]


def test_split_ignores_blank_pieces():
    assert split_statements("A;; ;B;   ") == ["A", "B"]


def test_remove_comments_up_to_newline():
    text = "SELECT 1; -- first; second\nSELECT 2;"
    assert remove_comments(text) == "SELECT 1; SELECT 2;"


def test_remove_comment_at_end_of_text():
    assert remove_comments("SELECT 1; -- trailing") == "SELECT 1; "


def test_double_dash_without_space_is_kept():
    assert remove_comments("SELECT 5 --3;") == "SELECT 5 --3;"


def test_collapse_whitespace():
    assert collapse_whitespace("CREATE\n\tTABLE   t\r\n(x)") == "CREATE TABLE t (x)"


def test_comment_semicolons_never_split():
    text = (
        "-- header; with; semicolons\n"
        "CREATE TABLE a (\n"
        "  id INTEGER -- id; column\n"
        ");\n"
        "-- another;\n"
        "INSERT INTO a VALUES (1);\n"
    )
    assert convert_to_statements(text) == [
        "CREATE TABLE a ( id INTEGER )",
        "INSERT INTO a VALUES (1)",
    ]


def test_bundled_schema_reads_and_splits():
    statements = convert_to_statements(read_resource("customers-schema.sql"))
    assert statements[0] == "DROP TABLE IF EXISTS projects"
    assert any(s.startswith("CREATE TABLE customers") for s in statements)
    assert all("--" not in s for s in statements)


def test_missing_resource_raises_db_error(tmp_path):
    with pytest.raises(DbError):
        read_resource("nope.sql", str(tmp_path))


def test_undecodable_resource_raises_db_error(tmp_path):
    (tmp_path / "latin1.sql").write_bytes(b"INSERT INTO customers VALUES (9, 'M\xfcller');")
    with pytest.raises(DbError):
        read_resource("latin1.sql", str(tmp_path))
