from flask import request
from utils.errors import ValidationFailure


def read_json_object():
    """Return the request body as a dict, or fail validation when it is not a JSON object."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationFailure("Request body must be a JSON object")
    return payload
