"""Unit tests for extracting enum declarations from CREATE TYPE statements."""

from sql2enums.parser.enum_parser import extract
from sql2enums.sql_models import EnumDeclaration, ScannerOptions

STRICT = ScannerOptions(strict=True)


def test_extract_simple_enum():
    declaration = extract("CREATE TYPE status AS ENUM ('active', 'inactive');")

    assert declaration == EnumDeclaration(
        type_name="Status",
        values=("Active", "Inactive"),
        sql_name="status",
        sql_values=("active", "inactive"),
    )


def test_extract_multi_word_names():
    declaration = extract("CREATE TYPE order_status AS ENUM ('on hold', 'done');")

    assert declaration.type_name == "OrderStatus"
    assert declaration.values == ("OnHold", "Done")
    assert declaration.sql_values == ("on hold", "done")


def test_extract_multiline_enum():
    block = """CREATE TYPE status_type AS ENUM (
        'pending',
        'active',
        'deleted'
    );"""

    declaration = extract(block)

    assert declaration.type_name == "StatusType"
    assert declaration.values == ("Pending", "Active", "Deleted")


def test_extract_is_case_insensitive():
    declaration = extract("create type color as enum('red','green','blue');")

    assert declaration.type_name == "Color"
    assert declaration.values == ("Red", "Green", "Blue")


def test_extract_drops_schema_prefix():
    declaration = extract("CREATE TYPE public.user_role AS ENUM ('admin');")

    assert declaration.type_name == "UserRole"
    assert declaration.sql_name == "user_role"


def test_composite_type_is_not_a_match():
    assert extract("CREATE TYPE point AS (x int, y int);") is None


def test_value_with_punctuation_is_not_a_match():
    assert extract("CREATE TYPE a AS ENUM ('x;y');") is None


def test_missing_terminator_is_not_a_match():
    assert extract("CREATE TYPE a AS ENUM ('x')") is None


def test_empty_value_list_is_not_a_match():
    assert extract("CREATE TYPE a AS ENUM ();") is None


def test_duplicate_values_pass_through():
    declaration = extract("CREATE TYPE a AS ENUM ('x', 'x');")

    assert declaration.values == ("X", "X")


def test_trailing_comma_keeps_empty_value_in_lax_mode():
    declaration = extract("CREATE TYPE a AS ENUM ('x', 'y',);")

    assert declaration.values == ("X", "Y", "")
    assert declaration.sql_values == ("x", "y", "")


def test_trailing_comma_is_filtered_in_strict_mode():
    declaration = extract("CREATE TYPE a AS ENUM ('x', 'y',);", STRICT)

    assert declaration.values == ("X", "Y")
    assert declaration.sql_values == ("x", "y")


def test_only_empty_values_is_not_a_match_in_strict_mode():
    assert extract("CREATE TYPE a AS ENUM ( , );", STRICT) is None


def test_constant_names_concatenate_type_and_value():
    declaration = extract("CREATE TYPE order_status AS ENUM ('on hold', 'done');")

    assert declaration.constant_names() == ["OrderStatusOnHold", "OrderStatusDone"]
