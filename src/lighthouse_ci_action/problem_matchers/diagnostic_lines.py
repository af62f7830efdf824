"""Problem-matcher line formatting."""

from __future__ import annotations

from decimal import Decimal

from .assertion_records import AssertionRecord


def format_value(value: object) -> str:
    """Render a JSON scalar the way a JavaScript template literal would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def format_number(value: float) -> str:
    """Render a float like JavaScript `Number#toString`.

    Exponent notation is used only below 1e-6 and from 1e21 upwards.
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    mantissa, separator, exponent = text.partition("e")
    if not separator:
        return text
    power = int(exponent)
    if -6 <= power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def describe_level(level: str) -> str:
    return "failure" if level == "error" else level


def format_diagnostic_message(record: AssertionRecord) -> str:
    return (
        f"`{record.audit_id}` {describe_level(record.level)} for `{record.name}` assertion, "
        f"expected **{record.operator} {format_value(record.expected)}**, "
        f"but found **{format_value(record.actual)}**."
    )


def format_diagnostic_line(record: AssertionRecord) -> str:
    """Format `<url>|<level>|<auditId>|<message>` for the lighthouse-ci matcher."""
    message = format_diagnostic_message(record)
    return f"{record.url}|{record.level}|{record.audit_id}|{message}"
