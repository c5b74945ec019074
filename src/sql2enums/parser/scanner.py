# ===== SECTION: IMPORTS =====
import io
import logging
from typing import Iterator, Optional, TextIO

from ..constants import (
    CREATE_TYPE_KEYWORD,
    CREATE_TYPE_KEYWORD_LENGTH,
    LINE_COMMENT_MARKER,
    QUOTE_CHARS,
    STATEMENT_TERMINATOR,
)
from ..sql_models import ScannerContext, ScannerOptions, ScannerState
from .cursor import CharCursor


# ===== SECTION: STATE HANDLERS =====
# Each handler consumes one character (plus at most one lookahead character)
# and returns a finished statement block when one is complete.


def _enter_comment(ctx: ScannerContext, state: ScannerState) -> None:
    ctx.return_state = ctx.state
    ctx.state = state
    ctx.comment_depth = 1 if state is ScannerState.IN_BLOCK_COMMENT else 0


def _leave_comment(ctx: ScannerContext) -> None:
    """Resume the state that was active before the comment started."""
    if ctx.return_state is ScannerState.IN_STATEMENT:
        ctx.state = ScannerState.IN_STATEMENT
        # A comment separates tokens like whitespace does
        _append(ctx, " ")
    else:
        ctx.reset()


def _append(ctx: ScannerContext, char: str) -> None:
    """Append a character while the statement may still be a CREATE TYPE."""
    if not ctx.capturing:
        return
    ctx.buffer.append(char)
    if len(ctx.buffer) > CREATE_TYPE_KEYWORD_LENGTH:
        return
    text = ctx.text()
    if not CREATE_TYPE_KEYWORD.startswith(text.upper()):
        logging.debug(f"Skipping statement starting with {text!r}")
        ctx.capturing = False
        ctx.buffer.clear()


def _is_create_type(ctx: ScannerContext) -> bool:
    return ctx.capturing and len(ctx.buffer) >= CREATE_TYPE_KEYWORD_LENGTH


def _handle_idle(ctx: ScannerContext, cursor: CharCursor, char: str, options: ScannerOptions) -> Optional[str]:
    if char.isspace():
        return None

    if char == LINE_COMMENT_MARKER:
        # Lax mode treats a single dash as a line comment
        if not options.strict or cursor.peek() == LINE_COMMENT_MARKER:
            _enter_comment(ctx, ScannerState.IN_LINE_COMMENT)
            return None

    if char == "/" and cursor.peek() == "*":
        cursor.next()
        _enter_comment(ctx, ScannerState.IN_BLOCK_COMMENT)
        return None

    ctx.state = ScannerState.IN_STATEMENT
    return _handle_statement(ctx, cursor, char, options)


def _handle_line_comment(ctx: ScannerContext, cursor: CharCursor, char: str, options: ScannerOptions) -> Optional[str]:
    if char == "\n":
        _leave_comment(ctx)
    return None


def _handle_block_comment(ctx: ScannerContext, cursor: CharCursor, char: str, options: ScannerOptions) -> Optional[str]:
    if char == "*" and cursor.peek() == "/":
        cursor.next()
        ctx.comment_depth -= 1
        if ctx.comment_depth == 0:
            _leave_comment(ctx)
    elif options.strict and char == "/" and cursor.peek() == "*":
        # PostgreSQL block comments nest
        cursor.next()
        ctx.comment_depth += 1
    return None


def _handle_statement(ctx: ScannerContext, cursor: CharCursor, char: str, options: ScannerOptions) -> Optional[str]:
    if ctx.quote_char is not None:
        _append(ctx, char)
        if char == ctx.quote_char:
            ctx.quote_char = None
        return None

    if char in QUOTE_CHARS:
        ctx.quote_char = char
        _append(ctx, char)
        return None

    if char == LINE_COMMENT_MARKER and cursor.peek() == LINE_COMMENT_MARKER:
        cursor.next()
        _enter_comment(ctx, ScannerState.IN_LINE_COMMENT)
        return None

    if char == "/" and cursor.peek() == "*":
        cursor.next()
        _enter_comment(ctx, ScannerState.IN_BLOCK_COMMENT)
        return None

    _append(ctx, char)
    if char != STATEMENT_TERMINATOR:
        return None

    block = ctx.text() if _is_create_type(ctx) else None
    ctx.reset()
    return block


_HANDLERS = {
    ScannerState.IDLE: _handle_idle,
    ScannerState.IN_LINE_COMMENT: _handle_line_comment,
    ScannerState.IN_BLOCK_COMMENT: _handle_block_comment,
    ScannerState.IN_STATEMENT: _handle_statement,
}


# ===== SECTION: FUNCTIONS =====


def scan(stream: TextIO, options: ScannerOptions = None, name: str = None) -> Iterator[str]:
    """
    Scan a SQL text stream for CREATE TYPE statements.

    Comments and whitespace between statements are skipped. Statements that do
    not start with CREATE TYPE are consumed up to their terminating `;` and
    discarded. A statement cut short by end of stream is dropped.

    Args:
        stream (TextIO): Text stream positioned at the start of the SQL
        options (ScannerOptions, optional): Strictness options
        name (str, optional): Stream name used in read error messages

    Yields:
        str: Raw text of each CREATE TYPE statement, including its `;`

    Raises:
        SQLReadError: If reading from the stream fails
    """
    options = options or ScannerOptions()
    cursor = CharCursor(stream, name)
    ctx = ScannerContext()

    while True:
        char = cursor.next()
        if char is None:
            break
        block = _HANDLERS[ctx.state](ctx, cursor, char, options)
        if block is not None:
            logging.debug(f"Found CREATE TYPE statement: {block!r}")
            yield block

    in_statement = ScannerState.IN_STATEMENT in (ctx.state, ctx.return_state)
    if in_statement and _is_create_type(ctx):
        logging.warning(f"Discarding unterminated statement at end of input: {ctx.text()!r}")
    ctx.reset()


def scan_text(sql_content: str, options: ScannerOptions = None) -> Iterator[str]:
    """Scan SQL held in a string. See `scan`."""
    return scan(io.StringIO(sql_content), options)
