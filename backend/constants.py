"""
Application-wide constants.

This module centralizes magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class EntityNames:
    """Entity names used in log and error messages"""

    USER = "User"
    GOOD = "Good"
    PAYMENT = "Payment"


class ApiPrefix:
    """URL prefix of the REST surface"""

    API = "/api"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
