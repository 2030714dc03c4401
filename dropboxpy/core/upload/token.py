"""
Form token extraction.

Pulls the hidden anti-forgery token of one specific form out of served
HTML by targeted pattern matching.
"""
import re
from typing import Optional


_TOKEN_FIELD = re.compile(r'name="t" value="(.+?)"')


def extract_token(html: str, form_action: str) -> Optional[str]:
    """
    Extract the hidden ``t`` field of the form posting to ``form_action``.

    Only the first ``<form action="...">`` block with that exact action is
    considered, and within it only the first ``t`` field.

    Args:
        html: Page source
        form_action: Exact value of the form's ``action`` attribute

    Returns:
        Token value, or None if the form or the field is missing

    Example:
        >>> extract_token('<form action="/login"><input name="t" value="XYZ"></form>', '/login')
        'XYZ'
    """
    form = re.search(
        r'<form action="%s"(.+?)</form>' % re.escape(form_action),
        html,
        re.DOTALL
    )
    if not form:
        return None

    field = _TOKEN_FIELD.search(form.group(1))
    if not field:
        return None
    return field.group(1)
