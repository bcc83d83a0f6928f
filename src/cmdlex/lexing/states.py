"""States of the argument extraction automaton."""

from __future__ import annotations

from enum import StrEnum


class ArgState(StrEnum):
    """Automaton states, in the order used for trace histograms."""

    START = "Start"
    LEADING_WHITESPACE = "LeadingWhitespace"
    SCANNING_BACKSLASHES_OUTSIDE_QUOTES = "ScanningBackslashesOutsideQuotes"
    QUOTE_AFTER_BACKSLASHES_OUTSIDE_QUOTES = "QuoteAfterBackslashesOutsideQuotes"
    EMITTING_BACKSLASHES_OUTSIDE_QUOTES = "EmittingBackslashesOutsideQuotes"
    CHECK_FOR_ARGUMENT_END_OUTSIDE_QUOTES = "CheckForArgumentEndOutsideQuotes"
    EMITTING_BACKSLASHES_OUTSIDE_QUOTES_GOING_INSIDE_QUOTES = (
        "EmittingBackslashesOutsideQuotesGoingInsideQuotes"
    )
    SCANNING_BACKSLASHES_INSIDE_QUOTES = "ScanningBackslashesInsideQuotes"
    QUOTE_AFTER_BACKSLASHES_INSIDE_QUOTES = "QuoteAfterBackslashesInsideQuotes"
    EMITTING_BACKSLASHES_INSIDE_QUOTES = "EmittingBackslashesInsideQuotes"
    CHECK_FOR_TWO_QUOTES_AFTER_BACKSLASHES_INSIDE_QUOTES = (
        "CheckForTwoQuotesAfterBackslashesInsideQuotes"
    )
    EMITTING_BACKSLASHES_INSIDE_QUOTES_GOING_OUTSIDE_QUOTES = (
        "EmittingBackslashesInsideQuotesGoingOutsideQuotes"
    )
    CHECK_FOR_ARGUMENT_END_INSIDE_QUOTES_GOING_OUTSIDE_QUOTES = (
        "CheckForArgumentEndInsideQuotesGoingOutsideQuotes"
    )
    EMITTING_BACKSLASHES_INSIDE_QUOTES_STAYING_INSIDE_QUOTES = (
        "EmittingBackslashesInsideQuotesStayingInsideQuotes"
    )
    EMIT_FINAL_BACKSLASHES = "EmitFinalBackslashes"
    END = "End"
