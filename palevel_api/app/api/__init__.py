"""
API package containing the JSON routes.

``router.py`` exposes a single ``router`` which includes every
resource router from ``endpoints``.  It is mounted under ``/api``.
"""
