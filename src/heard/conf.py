"""Configuration: where the store lives, and how categories are displayed."""

from __future__ import annotations
from dataclasses import dataclass, field
import os
import os.path
from typing import Dict


STORE_DIRNAME = '.heard'
STORE_FILENAME = 'notes.json'

DEFAULT_ICONS = {
    'shopping': '\U0001f6cd\ufe0f',
    'work': '\U0001f4bc',
    'personal': '\U0001f31f',
    'study': '\U0001f4da',
}

DEFAULT_ICON = '\U0001f4dd'


class ConfError(Exception):
    """Raised when the store location cannot be resolved or created."""
    pass


@dataclass
class HeardConf:
    store_path: str
    """Path to the JSON file holding the notes.

    The file does not need to exist yet, but its parent directory does.
    """

    icons: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ICONS))
    """Maps category names to the icon shown next to notes in that category. Matching is exact."""

    default_icon: str = DEFAULT_ICON
    """Icon for any category not present in :attr:`icons`."""

    @classmethod
    def for_user(cls) -> HeardConf:
        """Creates an instance that uses ``~/.heard/notes.json``, creating ``~/.heard`` if necessary.

        Raises :exc:`ConfError` if the home directory cannot be determined or the directory cannot be created.
        """
        home = os.path.expanduser('~')
        if home == '~' or not home:
            raise ConfError('Could not determine home directory')
        store_dir = os.path.join(home, STORE_DIRNAME)
        try:
            os.makedirs(store_dir, exist_ok=True)
        except OSError as e:
            raise ConfError(f'Failed to create notes directory {store_dir}: {e}')
        return cls(store_path=os.path.join(store_dir, STORE_FILENAME))

    def icon_for(self, category: str) -> str:
        return self.icons.get(category, self.default_icon)

    def instantiate_repo(self):
        from heard.repos.file import FileRepo
        return FileRepo(self.store_path)

    def instantiate(self):
        from heard.api import Heard
        return Heard(self)
