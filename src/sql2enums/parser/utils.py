# ===== SECTION: IMPORTS =====
import re
import inflection

# ===== SECTION: REGEX =====
# Characters that never survive into an identifier (quotes, punctuation)
_NON_IDENTIFIER_REGEX = re.compile(r"[^\w\s.\-]")
# A letter directly after a digit starts a new word ("v2beta" -> "V2Beta")
_DIGIT_BOUNDARY_REGEX = re.compile(r"(?<=\d)(?=[^\W\d_])")
_SEPARATOR_REGEX = re.compile(r"[\s_.\-]+")
_WORD_REGEX = re.compile(r"\S+")

# ===== SECTION: FUNCTIONS =====


def _split_humps(text: str) -> str:
    """Inserts a space at each camel-case hump ("OnHold" -> "On Hold")."""
    chars = []
    for i, char in enumerate(text):
        if i and char.isupper() and (text[i - 1].islower() or text[i - 1].isdigit()):
            chars.append(" ")
        chars.append(char)
    return "".join(chars)


def _title_word(word: str) -> str:
    chars = []
    seen_cased = False
    for char in word:
        if not seen_cased and char.isalpha():
            # str.title() applies the Unicode titlecase mapping ("ǆ" -> "ǅ")
            chars.append(char.title())
            seen_cased = True
        else:
            chars.append(char.lower())
    return "".join(chars)


def title_case(text: str) -> str:
    """
    Title-cases every whitespace-delimited word of `text`.

    The first letter of each word gets its Unicode titlecase form and the
    remaining letters are lower-cased. Camel-case humps already present in
    the text count as word starts, so CamelCase input keeps its humps.

    Examples:
        >>> title_case("on hold")
        'On Hold'
        >>> title_case("'PENDING'")
        "'Pending'"
        >>> title_case("OnHold")
        'On Hold'
    """
    return _WORD_REGEX.sub(lambda m: _title_word(m.group(0)), _split_humps(text))


def camelize(text: str) -> str:
    """
    Converts text to a single CamelCase identifier.

    Whitespace, underscores, dashes and dots separate words and are removed;
    any other punctuation (such as quotes) is dropped. A letter following a
    digit starts a new word.

    Examples:
        >>> camelize("On Hold")
        'OnHold'
        >>> camelize("order_status")
        'OrderStatus'
        >>> camelize("'V2beta'")
        'V2Beta'
    """
    cleaned = _NON_IDENTIFIER_REGEX.sub("", text)
    cleaned = _DIGIT_BOUNDARY_REGEX.sub("_", cleaned)
    parts = [part for part in _SEPARATOR_REGEX.split(cleaned) if part]
    return "".join(inflection.camelize(part) for part in parts)


def normalize_identifier(text: str) -> str:
    """
    Normalizes a SQL type name or enum value into a CamelCase identifier.

    Trims surrounding whitespace, title-cases, then camel-cases the result.
    Applying it to its own output returns the same identifier.

    Args:
        text (str): Raw SQL name or value, possibly quoted

    Returns:
        str: CamelCase identifier; empty if `text` holds no word characters

    Examples:
        >>> normalize_identifier("  'on hold' ")
        'OnHold'
        >>> normalize_identifier("order_status")
        'OrderStatus'
        >>> normalize_identifier("OrderStatus")
        'OrderStatus'
    """
    return camelize(title_case(text.strip()))


def unquote_sql_literal(text: str) -> str:
    """
    Returns the contents of a single-quoted SQL literal.

    Doubled quotes inside the literal are collapsed. Unquoted text is returned
    stripped of surrounding whitespace.
    """
    stripped = text.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] == "'":
        return stripped[1:-1].replace("''", "'")
    return stripped.strip("'")
