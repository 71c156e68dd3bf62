import pytest

from core_logic.errors import FormatterError
from core_logic.formatter import DeclarationParser, ObjectType, TypeReference, format_typescript, tokenize

DEMO_SOURCE = (
    "type people = { id?: BigInt; first_name: string; last_name: string; is_child?: BigInt };"
    "\n\n"
    "type items = { id?: BigInt; name: string; owner?: people };"
    "\n\n"
    "type Tables = { people: people; items: items };"
)

DEMO_OUTPUT = """type people = {
  id?: BigInt;
  first_name: string;
  last_name: string;
  is_child?: BigInt;
};

type items = { id?: BigInt; name: string; owner?: people };

type Tables = { people: people; items: items };
"""


def test_formats_demo_schema_like_prettier():
    assert format_typescript(DEMO_SOURCE) == DEMO_OUTPUT


def test_formatting_is_idempotent():
    assert format_typescript(DEMO_OUTPUT) == DEMO_OUTPUT


def test_commas_are_normalized_to_semicolons():
    # Arrange
    source = "type items = { id?: BigInt,name: string,owner?: people };"

    # Act
    output = format_typescript(source)

    # Assert
    assert output == "type items = { id?: BigInt; name: string; owner?: people };\n"


def test_line_of_exactly_print_width_stays_flat():
    # Arrange
    source = "type t = { a: b };"  # 18 characters

    # Act / Assert
    assert format_typescript(source, print_width=18) == "type t = { a: b };\n"
    assert format_typescript(source, print_width=17) == "type t = {\n  a: b;\n};\n"


def test_tab_width_controls_indent():
    output = format_typescript("type t = { a: b };", print_width=10, tab_width=4)
    assert output == "type t = {\n    a: b;\n};\n"


def test_nested_object_types_break_independently():
    # Arrange
    source = "type outer = { inner: { first: string; second: string }; flag?: BigInt };"

    # Act
    output = format_typescript(source, print_width=50)

    # Assert
    assert output == (
        "type outer = {\n"
        "  inner: { first: string; second: string };\n"
        "  flag?: BigInt;\n"
        "};\n"
    )


def test_blank_lines_collapse_to_one():
    # Arrange
    source = "type a = {};\n\n\n\ntype b = {};\ntype c = x;"

    # Act
    output = format_typescript(source)

    # Assert
    assert output == "type a = {};\n\ntype b = {};\ntype c = x;\n"


def test_empty_source_formats_to_empty_string():
    assert format_typescript("") == ""
    assert format_typescript("\n\n") == ""


def test_parser_builds_tree():
    # Act
    aliases = DeclarationParser("type items = { owner?: people }").parse()

    # Assert
    assert len(aliases) == 1
    alias = aliases[0]
    assert alias.name == "items"
    assert isinstance(alias.type, ObjectType)
    member = alias.type.members[0]
    assert (member.name, member.optional, member.type) == ("owner", True, TypeReference("people"))


def test_tokenize_reports_one_based_positions():
    tokens = tokenize("type a =\n  b;")
    assert [(t.value, t.line, t.column) for t in tokens[:4]] == [
        ("type", 1, 1),
        ("a", 1, 6),
        ("=", 1, 8),
        ("b", 2, 3),
    ]


def test_invalid_identifier_raises_with_position():
    # A table name with a space cannot be emitted as a type.
    with pytest.raises(FormatterError) as exc_info:
        format_typescript("type order items = { id?: BigInt };")
    assert (exc_info.value.line, exc_info.value.column) == (1, 12)
    assert "'=' expected" in str(exc_info.value)


def test_unexpected_character_raises():
    with pytest.raises(FormatterError, match=r"Unexpected character '-' \(1:19\)"):
        format_typescript("type t = { created-at: string };")


def test_unterminated_object_raises():
    with pytest.raises(FormatterError, match="end of input"):
        format_typescript("type t = { a: string")


def test_statement_must_start_with_type_keyword():
    with pytest.raises(FormatterError, match="'type' expected"):
        format_typescript("interface t = {};")


def test_unicode_identifiers_are_accepted():
    # Act
    output = format_typescript("type café = { naïve: string; 名前?: string };")

    # Assert
    assert output == "type café = { naïve: string; 名前?: string };\n"


def test_identifier_cannot_start_with_digit():
    with pytest.raises(FormatterError, match=r"Unexpected character '2' \(1:6\)"):
        format_typescript("type 2024_sales = { id: BigInt };")


def test_empty_object_never_breaks():
    # Arrange
    name = "t" * 80
    source = f"type {name} = {{}};"

    # Act / Assert
    assert format_typescript(source) == f"type {name} = {{}};\n"
