"""
Alert Text Cleanup

Removes the stock apology sentence PATH appends to most alerts.
"""

import re

APOLOGIZE_PATTERN = re.compile(
    r"We (apologize|regret) (for )?(the|this|any)?( )?(inconvenience)( )?"
    r"(this )?(may )?(have|has)?( )?(caused)?(.*\.?)"
)


def clean_alert_text(text: str) -> str:
    """Strip the apology clause and surrounding whitespace.

    The clause runs to the end of its line, so repeated application is a
    no-op. An empty result means the alert carried nothing but boilerplate.
    """
    return APOLOGIZE_PATTERN.sub("", text).strip()
