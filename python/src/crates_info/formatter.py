"""
Output Formatter

Renders crate metadata as a fixed-width report or as a single raw field.
"""

from .models import CrateField, CrateInfo

LABEL_WIDTH = 15
VALUE_WIDTH = 65
PLACEHOLDER = "- - -"


def pad(value: str, width: int) -> str:
    """Replace newlines with spaces and left-justify, never truncating."""
    return value.replace("\n", " ").ljust(width)


def _or_placeholder(value: str | None) -> str:
    return value if value is not None else PLACEHOLDER


def render_report(info: CrateInfo) -> str:
    """
    Render the full two-column report.

    Args:
        info: Crate metadata

    Returns:
        Eight newline-separated lines, label column 15 wide, value column 65 wide
    """
    rows = [
        ("Name:", info.name),
        ("Description:", info.description),
        ("Keywords:", ", ".join(info.keywords)),
        ("Stable Version:", info.max_stable_version),
        ("Latest Version:", info.max_version),
        ("Homepage:", _or_placeholder(info.homepage)),
        ("Repository:", _or_placeholder(info.repository)),
        ("Documentation:", _or_placeholder(info.documentation)),
    ]
    return "\n".join(f"{pad(label, LABEL_WIDTH)} {pad(value, VALUE_WIDTH)}" for label, value in rows)


def render_field(info: CrateInfo, field: CrateField) -> str:
    """Render one selected field verbatim."""
    if field is CrateField.LATEST:
        return info.max_version
    if field is CrateField.STABLE:
        return info.max_stable_version
    if field is CrateField.HOMEPAGE:
        return _or_placeholder(info.homepage)
    if field is CrateField.REPOSITORY:
        return _or_placeholder(info.repository)
    if field is CrateField.DOCUMENTATION:
        return _or_placeholder(info.documentation)
    raise ValueError(f"Unknown field: {field}")


def render_not_found(crate_id: str) -> str:
    return f"No crate found for '{crate_id}'!"
