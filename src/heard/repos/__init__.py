"""Handles reading and writing the note store.

:class:`heard.repos.base.Repo` defines an API.
:class:`heard.repos.file.FileRepo` is the implementation that keeps notes in a JSON file.
"""
