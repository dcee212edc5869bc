"""
Request helpers shared by the blueprints.
"""

from flask import request


def request_data():
    """Body fields from either a JSON or a form-encoded request."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def field(data, name, strip=True):
    """A non-empty string field, or None. Numbers, lists and objects count as missing."""
    value = data.get(name)
    if not isinstance(value, str):
        return None
    if strip:
        value = value.strip()
    return value or None
