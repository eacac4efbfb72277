"""
File: http.py
Purpose: Request-body access shared by the API blueprints.
"""
from flask import request


def request_body():
    """
    The submitted fields as a dict: JSON objects or URL-encoded forms.
    Malformed JSON aborts with 400; non-object JSON counts as an empty body.
    """
    if request.is_json:
        body = request.get_json()
        return body if isinstance(body, dict) else {}
    return request.form.to_dict()
