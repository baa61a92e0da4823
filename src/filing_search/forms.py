"""Human-readable labels for SEC form codes."""

FORM_DESCRIPTIONS: dict[str, str] = {
    "10-K": "Annual Report",
    "10-Q": "Quarterly Report",
    "8-K": "Current Report",
    "6-K": "Foreign Issues Report",
    "20-F": "Foreign Annual Report",
    "S-1": "Initial Registration",
    "424B": "Prospectus",
    "DEF 14A": "Proxy Statement",
    "10-K/A": "Annual Report Amendment",
    "10-Q/A": "Quarterly Report Amendment",
    "8-K/A": "Current Report Amendment",
    "F-1": "Foreign Registration Statement",
    "F-4": "Foreign Merger Registration",
}

# (value, label) pairs offered by the form-type selector
AVAILABLE_FORMS: list[tuple[str, str]] = [
    ("all", "All Forms"),
    ("10-K", "Annual Report (10-K)"),
    ("10-Q", "Quarterly Report (10-Q)"),
    ("8-K", "Current Report (8-K)"),
    ("20-F", "Foreign Annual Report (20-F)"),
    ("DEF 14A", "Proxy Statement"),
    ("10-K/A", "Annual Report Amendment"),
    ("10-Q/A", "Quarterly Report Amendment"),
]


def describe_form(form_type: str) -> str:
    """Label for a form code, or the code itself when it is not in the table."""
    return FORM_DESCRIPTIONS.get(form_type, form_type)
