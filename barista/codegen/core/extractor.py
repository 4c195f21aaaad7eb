"""
Field declaration extraction.

Scans raw Java class source and produces the ordered list of private,
non-static, non-final, non-transient fields. The source is lexed with
javalang first, so comments and literals (text blocks included) never
leak into the result, and each single-line statement is matched against
the grammar

    annotation* modifier* type name ('[' ']')* ('=' initializer)? ';'

Declarations that carry the private modifier but fall outside this
grammar, such as ``private int a, b;``, are skipped and reported as
warnings rather than split incorrectly.
"""

import re
from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterator, List, Optional

import javalang

from ...logging_config import get_logger
from .generator import GeneratorError
from .schema import FieldDescriptor

logger = get_logger(__name__)

# Java 15 text blocks; javalang predates them
_TEXT_BLOCK_RE = re.compile(r'"""[ \t\f]*\r?\n.*?(?<!\\)"""', re.DOTALL)

# Shift operators that close nested type arguments: List<List<String>>
_ANGLE_RUNS = frozenset({">>", ">>>"})

FIELD_MODIFIERS = frozenset(
    {"public", "protected", "private", "static", "final", "transient", "volatile"}
)
EXCLUDED_MODIFIERS = frozenset({"static", "final", "transient"})
CLASS_KEYWORDS = frozenset({"class", "interface", "enum"})

# Tokens that may appear between the angle brackets of a field type
_TYPE_ARGUMENT_SYMBOLS = frozenset({"<", ">", ",", "?", "[", "]", "&"})

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())


class ExtractionError(GeneratorError):
    """Raised when the class source cannot be lexed as Java."""

    pass


@dataclass(frozen=True)
class Token:
    """A lexical token with the source line it starts on."""

    kind: str  # word, annotation, string, char, number, symbol
    text: str
    line: int

    def is_symbol(self, text: str) -> bool:
        return self.kind == "symbol" and self.text == text


@dataclass
class ExtractionResult:
    """Fields found in a class source plus notes about rejected declarations."""

    fields: List[FieldDescriptor] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    prefix_mismatches: int = 0  # Eligible fields dropped by the prefix filter

    @property
    def is_empty(self) -> bool:
        return not self.fields


class _Rejected(Exception):
    """A private field declaration the grammar cannot represent."""

    pass


def _mask_text_blocks(source: str) -> str:
    """Replace each text block with an empty literal, keeping its line breaks."""
    return _TEXT_BLOCK_RE.sub(lambda m: '""' + "\n" * m.group().count("\n"), source)


def _lex(source: str) -> List[javalang.tokenizer.JavaToken]:
    try:
        return list(javalang.tokenizer.tokenize(_mask_text_blocks(source)))
    except javalang.tokenizer.LexerError as e:
        raise ExtractionError(f"Cannot tokenize Java source: {e}") from e


def _qualified_name(raw: List[javalang.tokenizer.JavaToken], start: int):
    """Join ``a.b.c`` identifier chains; return (text, next index)."""
    parts = [raw[start].value]
    index = start + 1
    while (
        index + 1 < len(raw)
        and isinstance(raw[index], javalang.tokenizer.Separator)
        and raw[index].value == "."
        and isinstance(raw[index + 1], javalang.tokenizer.Identifier)
    ):
        parts.append(raw[index + 1].value)
        index += 2
    return ".".join(parts), index


def tokenize(source: str) -> Iterator[Token]:
    """
    Lex Java source into tokens, dropping whitespace and comments.

    Qualified names become one ``word`` token, ``@`` and its name one
    ``annotation`` token, and ``>>``/``>>>`` are split into single ``>``
    symbols.

    Raises:
        ExtractionError: If javalang cannot lex the source
    """
    raw = _lex(source)
    index = 0

    while index < len(raw):
        token = raw[index]
        line = token.position.line

        if isinstance(token, javalang.tokenizer.Annotation):
            following = raw[index + 1] if index + 1 < len(raw) else None
            if isinstance(following, javalang.tokenizer.Identifier):
                name, index = _qualified_name(raw, index + 1)
                yield Token("annotation", f"@{name}", line)
            elif following is not None:
                # @interface
                yield Token("annotation", f"@{following.value}", line)
                index += 2
            else:
                yield Token("symbol", "@", line)
                index += 1
            continue

        if isinstance(token, javalang.tokenizer.Identifier):
            name, index = _qualified_name(raw, index)
            yield Token("word", name, line)
            continue

        index += 1
        if isinstance(
            token,
            (javalang.tokenizer.Keyword, javalang.tokenizer.Boolean, javalang.tokenizer.Null),
        ):
            yield Token("word", token.value, line)
        elif isinstance(token, javalang.tokenizer.String):
            yield Token("string", token.value, line)
        elif isinstance(token, javalang.tokenizer.Character):
            yield Token("char", token.value, line)
        elif isinstance(token, javalang.tokenizer.Literal):
            yield Token("number", token.value, line)
        elif token.value in _ANGLE_RUNS:
            for _ in token.value:
                yield Token("symbol", ">", line)
        else:
            yield Token("symbol", token.value, line)


def _split_lines(tokens: Iterator[Token]) -> Iterator[List[Token]]:
    """Group tokens by the source line they start on."""
    for _, line_tokens in groupby(tokens, key=lambda token: token.line):
        yield list(line_tokens)


def _split_statements(tokens: List[Token]) -> Iterator[List[Token]]:
    """
    Yield the token runs of one line that end in a top-level semicolon.

    Block openers outside an initializer end the current run (a class or
    method header precedes them); a trailing run without a semicolon is
    dropped.
    """
    current: List[Token] = []
    depth = 0
    in_initializer = False

    for token in tokens:
        if token.kind != "symbol":
            current.append(token)
            continue

        text = token.text
        if text == ";" and depth == 0:
            yield current
            current = []
            in_initializer = False
            continue

        if text == "=" and depth == 0:
            in_initializer = True
        elif text == "{" and depth == 0 and not in_initializer:
            current = []
            continue
        elif text in _OPENERS:
            depth += 1
        elif text in _CLOSERS:
            if depth == 0:
                # Closes a block opened on an earlier line
                current = []
                in_initializer = False
                continue
            depth -= 1

        current.append(token)


def render_type(tokens: List[Token]) -> str:
    """Join type tokens with canonical spacing, e.g. ``Map<String, List<Integer>>``."""
    parts: List[str] = []
    previous: Optional[Token] = None

    for token in tokens:
        if previous is not None:
            wordish_before = previous.kind == "word" or previous.text == "?"
            wordish_now = token.kind == "word" or token.text == "?"
            if previous.text == "," or (wordish_before and wordish_now):
                parts.append(" ")
            elif token.text == "&" or previous.text == "&":
                parts.append(" ")
        parts.append(token.text)
        previous = token

    return "".join(parts)


def _opens_type_arguments(previous: Optional[Token]) -> bool:
    """
    Whether a ``<`` inside an initializer starts type arguments.

    True after a capitalized type name (``new HashMap<K, V>()``) or a
    member access dot (``Collections.<K, V>emptyMap()``).
    """
    if previous is None:
        return False
    if previous.is_symbol("."):
        return True
    return previous.kind == "word" and previous.text.rsplit(".", 1)[-1][:1].isupper()


class _DeclarationParser:
    """Recursive-descent matcher for one field declaration statement."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def _peek_symbol(self, text: str, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token is not None and token.is_symbol(text)

    def parse(self) -> Optional[FieldDescriptor]:
        """
        Match the statement against the field grammar.

        Returns:
            The field, or None when the statement is not an eligible
            private field declaration

        Raises:
            _Rejected: If the statement is a private field declaration the
                grammar cannot represent
        """
        modifiers = self._parse_modifiers()

        if "private" not in modifiers:
            return None

        if modifiers & EXCLUDED_MODIFIERS:
            logger.debug(
                "Excluding %s field on line %d",
                "/".join(sorted(modifiers & EXCLUDED_MODIFIERS)),
                self.tokens[0].line,
            )
            return None

        start = self.peek()
        if start is None or start.is_symbol("<"):
            # Nothing after the modifiers, or a generic method signature
            return None
        if start.kind != "word" or start.text in CLASS_KEYWORDS:
            return None

        type_tokens = self._parse_type()

        name_token = self.peek()
        if name_token is None:
            raise _Rejected("missing field name")
        if name_token.is_symbol("("):
            # Constructor or method declaration
            return None
        if name_token.kind != "word" or "." in name_token.text:
            raise _Rejected(f"unexpected token {name_token.text!r} after type")
        self.advance()

        if self._peek_symbol("("):
            return None

        # C-style array declarator: int scores[]
        type_tokens.extend(self._parse_dimensions())

        self._parse_tail()

        return FieldDescriptor(
            type=render_type(type_tokens),
            name=name_token.text,
            line=name_token.line,
        )

    def _parse_modifiers(self) -> set:
        modifiers = set()
        while True:
            token = self.peek()
            if token is None:
                break
            if token.kind == "annotation":
                self.advance()
                if self._peek_symbol("("):
                    self._skip_balanced()
            elif token.kind == "word" and token.text in FIELD_MODIFIERS:
                modifiers.add(token.text)
                self.advance()
            else:
                break
        return modifiers

    def _parse_type(self) -> List[Token]:
        tokens = [self.advance()]

        if self._peek_symbol("<"):
            depth = 0
            while True:
                token = self.advance()
                if token is None:
                    raise _Rejected("unterminated type arguments")
                if token.kind == "annotation":
                    raise _Rejected("annotated type arguments are not supported")
                if token.kind != "word" and token.text not in _TYPE_ARGUMENT_SYMBOLS:
                    raise _Rejected(f"unsupported token {token.text!r} in type")
                tokens.append(token)
                if token.is_symbol("<"):
                    depth += 1
                elif token.is_symbol(">"):
                    depth -= 1
                    if depth == 0:
                        break

        tokens.extend(self._parse_dimensions())
        return tokens

    def _parse_dimensions(self) -> List[Token]:
        tokens = []
        while self._peek_symbol("[") and self._peek_symbol("]", 1):
            tokens.append(self.advance())
            tokens.append(self.advance())
        return tokens

    def _parse_tail(self):
        """Accept end of statement or an initializer; reject anything else."""
        token = self.peek()
        if token is None:
            return
        if token.is_symbol(","):
            raise _Rejected("declares more than one field")
        if not token.is_symbol("="):
            raise _Rejected(f"unexpected token {token.text!r} after field name")

        self.advance()
        depth = 0
        angle_depth = 0
        previous = None
        while True:
            token = self.advance()
            if token is None:
                return
            if token.kind == "symbol":
                if token.text in _OPENERS:
                    depth += 1
                elif token.text in _CLOSERS:
                    depth -= 1
                elif token.text == "<" and _opens_type_arguments(previous):
                    angle_depth += 1
                elif token.text == ">" and angle_depth:
                    angle_depth -= 1
                elif token.text == "," and depth == 0 and angle_depth == 0:
                    raise _Rejected("declares more than one field")
            previous = token

    def _skip_balanced(self):
        """Skip a parenthesized group such as annotation arguments."""
        depth = 0
        while True:
            token = self.advance()
            if token is None:
                return
            if token.is_symbol("("):
                depth += 1
            elif token.is_symbol(")"):
                depth -= 1
                if depth == 0:
                    return


def extract_fields(source: str, var_prefix: str = "") -> ExtractionResult:
    """
    Extract eligible field declarations from class source.

    Args:
        source: Full Java class source text
        var_prefix: When non-empty, only fields whose name starts with it

    Returns:
        ExtractionResult with fields in declaration order (possibly empty)

    Raises:
        ExtractionError: If the source cannot be lexed as Java
    """
    result = ExtractionResult()

    for line_tokens in _split_lines(tokenize(source)):
        for statement in _split_statements(line_tokens):
            if not statement:
                continue

            try:
                descriptor = _DeclarationParser(statement).parse()
            except _Rejected as e:
                snippet = " ".join(token.text for token in statement)
                warning = f"line {statement[0].line}: skipped '{snippet};' ({e})"
                logger.debug(warning)
                result.warnings.append(warning)
                continue

            if descriptor is None:
                continue

            if var_prefix and not descriptor.name.startswith(var_prefix):
                logger.debug(
                    "Field %s does not match prefix %r", descriptor.name, var_prefix
                )
                result.prefix_mismatches += 1
                continue

            result.fields.append(descriptor)

    logger.debug(
        "Extracted %d field(s), %d warning(s)",
        len(result.fields),
        len(result.warnings),
    )
    return result


def find_class_name(source: str) -> Optional[str]:
    """
    Find the name of the first class, interface or enum declared in source.

    Returns:
        The type name, or None if no declaration is found
    """
    previous: Optional[Token] = None
    for token in tokenize(source):
        if (
            previous is not None
            and previous.kind == "word"
            and previous.text in CLASS_KEYWORDS
            and token.kind == "word"
        ):
            return token.text
        previous = token
    return None
