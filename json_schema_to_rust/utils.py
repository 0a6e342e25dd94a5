"""
Utility functions for JSON Schema to Rust generator.
"""

import re

# Runs of characters that are not ASCII letters or digits separate words
_WORD_SEPARATOR = re.compile(r"[^A-Za-z0-9]+")

# Characters that may not appear in a Rust identifier (ASCII subset)
_ILLEGAL_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")

# Prefix for generated identifiers that would otherwise be empty or start with a digit
IDENTIFIER_MARKER = "E"

# Rust strict and reserved keywords
RUST_KEYWORDS = {
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "crate",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "gen",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}

# Keywords that cannot be written as raw identifiers (r#...)
NON_RAW_KEYWORDS = {"crate", "self", "Self", "super"}

# Names already taken in generated files (prelude, std and serde imports)
RESERVED_TYPE_NAMES = {
    "BTreeMap",
    "Box",
    "Deserialize",
    "Err",
    "None",
    "Ok",
    "Option",
    "Result",
    "Self",
    "Serialize",
    "Some",
    "String",
    "Uuid",
    "Vec",
}


def _split_into_words(text: str) -> list[str]:
    """Split text on every run of non-alphanumeric characters."""
    return [part for part in _WORD_SEPARATOR.split(text) if part]


def _with_marker(name: str) -> str:
    if not name or name[0].isdigit():
        return f"{IDENTIFIER_MARKER}{name}"
    return name


def to_type_name(text: str) -> str:
    """Convert a title or property key to a Rust type name.

    Each word gets an uppercase first letter; the rest of the word is kept
    as written.

    Examples:
        "The Widget_Settings Schema" -> "TheWidgetSettingsSchema"
        "widget_settings" -> "WidgetSettings"
        "foo-bar-baz" -> "FooBarBaz"
        "nestedInfo" -> "NestedInfo"

    Returns:
        The PascalCase name, or "" when the text has no letters or digits
    """
    return "".join(word[0].upper() + word[1:] for word in _split_into_words(text))


def to_struct_name(text: str) -> str:
    """Like to_type_name, but always a usable Rust type identifier."""
    name = _with_marker(to_type_name(text))
    if name in RESERVED_TYPE_NAMES:
        name = name + "Type"
    return name


def to_variant_name(value: str) -> str:
    """Convert a raw enum value to a Rust enum variant name.

    Examples:
        "blackjack-a" -> "BlackjackA"
        "PENDING" -> "Pending"
        "123" -> "E123"
        "" -> "E"
    """
    name = "".join(word[0].upper() + word[1:].lower() for word in _split_into_words(value))
    name = _with_marker(name)
    if name in NON_RAW_KEYWORDS:
        name = name + "Value"
    return name


def sanitize_field_name(key: str) -> str:
    """Turn a JSON property key into a Rust field identifier.

    Keys made only of ASCII letters, digits and underscores that do not
    start with a digit and are not keywords come back unchanged.
    """
    name = _ILLEGAL_IDENTIFIER_CHARS.sub("_", key)
    if not name or name == "_":
        return "field"
    if name[0].isdigit():
        name = "_" + name
    if name in NON_RAW_KEYWORDS:
        return name + "_"
    if name in RUST_KEYWORDS:
        return "r#" + name
    return name


def unraw(identifier: str) -> str:
    """Strip the raw identifier prefix: "r#type" -> "type"."""
    return identifier.removeprefix("r#")


def rust_string_literal(text: str) -> str:
    """Quote text as a Rust string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\0", "\\0")
    )
    return f'"{escaped}"'


def json_pointer(path: str, segment: str) -> str:
    """Append one segment to a JSON Pointer (RFC 6901), escaping ~ and /."""
    return path + "/" + segment.replace("~", "~0").replace("/", "~1")
