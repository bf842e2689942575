"""Keeps short notes, each tagged with a category, in a JSON file in your home directory.

If you installed via ``pip``, run ``heard`` with no arguments to get usage help.

To use the Python API, look at :class:`heard.api.Heard`
"""
