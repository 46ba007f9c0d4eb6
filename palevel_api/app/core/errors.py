"""
Domain errors raised by the service layer.

Services raise these exceptions; the application converts them into
HTTP responses in ``main.py`` so that handlers stay free of status
code bookkeeping.
"""


class ValidationError(ValueError):
    """A creation request is missing one or more required fields.

    The message is returned to the client verbatim as the ``error``
    field of a 400 response.
    """
