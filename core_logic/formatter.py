# SqliteTypes/core_logic/formatter.py
import re
import logging
from typing import List, NamedTuple, Optional, Union

from config.settings import PRINT_WIDTH, TAB_WIDTH
from core_logic.errors import FormatterError

formatter_logger = logging.getLogger('SqliteTypes.Formatter')

# --- Lexer ---

TOKEN_PATTERN = re.compile(
    r"(?P<NEWLINE>\n)|(?P<SPACE>[ \t\r]+)|(?P<IDENT>(?:[^\W\d]|\$)[\w$]*)|(?P<PUNCT>[{}=;:,?])"
)


class Token(NamedTuple):
    kind: str
    value: str
    line: int
    column: int
    blank_line_before: bool


def tokenize(source: str) -> List[Token]:
    """
    Splits declaration source into tokens. Columns are 1-based like Prettier's.
    Identifiers may contain any Unicode letter (`café`), as in TypeScript.
    """
    tokens = []
    line, line_start, pos = 1, 0, 0
    newlines_since_token = 0

    while pos < len(source):
        match = TOKEN_PATTERN.match(source, pos)
        if not match:
            raise FormatterError(f"Unexpected character {source[pos]!r}", line, pos - line_start + 1)
        kind = match.lastgroup
        if kind == "NEWLINE":
            line += 1
            line_start = match.end()
            newlines_since_token += 1
        elif kind != "SPACE":
            tokens.append(Token(kind, match.group(), line, pos - line_start + 1, newlines_since_token >= 2))
            newlines_since_token = 0
        pos = match.end()

    tokens.append(Token("EOF", "", line, pos - line_start + 1, newlines_since_token >= 2))
    return tokens


# --- Syntax tree ---

class TypeReference(NamedTuple):
    name: str


class PropertySignature(NamedTuple):
    name: str
    optional: bool
    type: "TypeNode"


class ObjectType(NamedTuple):
    members: List[PropertySignature]


TypeNode = Union[TypeReference, ObjectType]


class TypeAlias(NamedTuple):
    name: str
    type: TypeNode
    blank_line_before: bool


class DeclarationParser:
    """
    Recursive descent parser for the subset of TypeScript the generator emits:

        program   := alias*
        alias     := 'type' IDENT '=' type ';'?
        type      := IDENT | '{' (member ((';' | ',') member)* (';' | ',')?)? '}'
        member    := IDENT '?'? ':' type
    """
    def __init__(self, source: str):
        self.tokens = tokenize(source)
        self.index = 0

    def _peek(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def _error(self, expected: str) -> FormatterError:
        token = self._peek()
        found = "end of input" if token.kind == "EOF" else repr(token.value)
        return FormatterError(f"'{expected}' expected, found {found}", token.line, token.column)

    def _accept(self, value: str) -> Optional[Token]:
        token = self._peek()
        if token.kind == "PUNCT" and token.value == value:
            return self._advance()
        return None

    def _expect(self, value: str) -> Token:
        token = self._accept(value)
        if token is None:
            raise self._error(value)
        return token

    def _expect_identifier(self) -> Token:
        if self._peek().kind != "IDENT":
            raise self._error("identifier")
        return self._advance()

    def parse(self) -> List[TypeAlias]:
        aliases = []
        while self._peek().kind != "EOF":
            aliases.append(self._parse_alias())
        return aliases

    def _parse_alias(self) -> TypeAlias:
        keyword = self._peek()
        if keyword.kind != "IDENT" or keyword.value != "type":
            raise self._error("type")
        self._advance()
        name = self._expect_identifier().value
        self._expect("=")
        type_node = self._parse_type()
        self._accept(";")
        return TypeAlias(name, type_node, keyword.blank_line_before)

    def _parse_type(self) -> TypeNode:
        if self._peek().kind == "IDENT":
            return TypeReference(self._advance().value)
        if self._accept("{"):
            return self._parse_object_body()
        raise self._error("type")

    def _parse_object_body(self) -> ObjectType:
        members = []
        while not self._accept("}"):
            members.append(self._parse_member())
            if self._accept(";") or self._accept(","):
                continue
            self._expect("}")
            break
        return ObjectType(members)

    def _parse_member(self) -> PropertySignature:
        name = self._expect_identifier().value
        optional = self._accept("?") is not None
        self._expect(":")
        return PropertySignature(name, optional, self._parse_type())


# --- Printer ---

class DeclarationPrinter:
    """
    Prints aliases the way Prettier does: an object type stays on one line when
    the whole line fits in print_width, otherwise each member gets its own line.
    """
    def __init__(self, print_width: int = PRINT_WIDTH, tab_width: int = TAB_WIDTH):
        self.print_width = print_width
        self.tab_width = tab_width

    def _member_head(self, member: PropertySignature) -> str:
        return f"{member.name}{'?' if member.optional else ''}: "

    def _flat(self, node: TypeNode) -> str:
        if isinstance(node, TypeReference):
            return node.name
        if not node.members:
            return "{}"
        members = "; ".join(self._member_head(m) + self._flat(m.type) for m in node.members)
        return f"{{ {members} }}"

    def _print_type(self, node: TypeNode, indent: int, column: int, trailing: int) -> str:
        flat = self._flat(node)
        # An empty object never breaks, whatever the width.
        if isinstance(node, TypeReference) or not node.members:
            return flat
        if column + len(flat) + trailing <= self.print_width:
            return flat

        inner_indent = " " * (indent + self.tab_width)
        lines = ["{"]
        for member in node.members:
            head = inner_indent + self._member_head(member)
            body = self._print_type(member.type, indent + self.tab_width, len(head), 1)
            lines.append(f"{head}{body};")
        lines.append(" " * indent + "}")
        return "\n".join(lines)

    def print_alias(self, alias: TypeAlias) -> str:
        head = f"type {alias.name} = "
        return f"{head}{self._print_type(alias.type, 0, len(head), 1)};"

    def print_program(self, aliases: List[TypeAlias]) -> str:
        if not aliases:
            return ""
        parts = []
        for i, alias in enumerate(aliases):
            if i > 0:
                parts.append("\n\n" if alias.blank_line_before else "\n")
            parts.append(self.print_alias(alias))
        parts.append("\n")
        return "".join(parts)


def format_typescript(source: str, print_width: int = PRINT_WIDTH, tab_width: int = TAB_WIDTH) -> str:
    """Parses and reprints generated declarations. Raises FormatterError on bad input."""
    aliases = DeclarationParser(source).parse()
    formatter_logger.info(f"Formatting {len(aliases)} declarations (print width {print_width}).")
    return DeclarationPrinter(print_width, tab_width).print_program(aliases)
