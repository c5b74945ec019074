# ===== SECTION: IMPORTS =====
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple


# ===== SECTION: DATA STRUCTURES =====
# Core data structures shared by the scanner, the extractor and the renderers

@dataclass(frozen=True)
class EnumDeclaration:
    """
    Represents one parsed `CREATE TYPE ... AS ENUM (...)` statement.

    Attributes:
        type_name (str): Normalized CamelCase type name (e.g., 'OrderStatus')
        values (Tuple[str, ...]): Normalized CamelCase values, in declaration order
        sql_name (str): Type name as written in SQL, without schema prefix
        sql_values (Tuple[str, ...]): Unquoted SQL literals, parallel to `values`
    """
    type_name: str
    values: Tuple[str, ...]
    sql_name: str = ""
    sql_values: Tuple[str, ...] = ()

    def constant_names(self) -> List[str]:
        """Per-value constant names: the type name followed by the value."""
        return [f"{self.type_name}{value}" for value in self.values]

    def literals(self) -> List[str]:
        """SQL literals for each value, falling back to the normalized value."""
        if len(self.sql_values) == len(self.values):
            return list(self.sql_values)
        return list(self.values)


@dataclass(frozen=True)
class ScannerOptions:
    """
    Options shared by the scanner and the extractor.

    Attributes:
        strict (bool): Require `--` for line comments, nest block comments and
            drop empty enum values. Defaults to the lax behaviour.
    """
    strict: bool = False


class ScannerState(Enum):
    """States of the statement scanner.

    Attributes:
        IDLE: Between statements, buffer empty.
        IN_LINE_COMMENT: Inside a `--` comment, up to end of line.
        IN_BLOCK_COMMENT: Inside a `/* */` comment.
        IN_STATEMENT: Accumulating or skipping a statement up to its `;`.
    """

    IDLE = auto()
    IN_LINE_COMMENT = auto()
    IN_BLOCK_COMMENT = auto()
    IN_STATEMENT = auto()


@dataclass
class ScannerContext:
    """
    Mutable scanner state for a single pass over one stream.

    Attributes:
        state: Current scanner state.
        buffer: Characters of the statement being assembled.
        capturing: True while the buffer may still hold a CREATE TYPE statement.
        quote_char: Open quote inside a statement, if any.
        comment_depth: Nesting depth of block comments.
        return_state: State to resume once a comment ends.
    """
    state: ScannerState = ScannerState.IDLE
    buffer: List[str] = field(default_factory=list)
    capturing: bool = True
    quote_char: Optional[str] = None
    comment_depth: int = 0
    return_state: ScannerState = ScannerState.IDLE

    def reset(self) -> None:
        """Discard the current statement and return to IDLE."""
        self.state = ScannerState.IDLE
        self.buffer.clear()
        self.capturing = True
        self.quote_char = None
        self.comment_depth = 0
        self.return_state = ScannerState.IDLE

    def text(self) -> str:
        return "".join(self.buffer)
