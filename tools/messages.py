"""Message template loading and rendering."""

import yaml
from pathlib import Path
from typing import Dict, Optional
from logger import get_logger

logger = get_logger()


class MessageCatalog:
    """Loads named message templates from a YAML file."""

    def __init__(self, messages_file: Optional[Path] = None):
        """Initialize the catalog.

        Args:
            messages_file: YAML file with message templates.
                          Defaults to tools/messages.yaml.
        """
        if messages_file is None:
            self.messages_file = Path(__file__).parent / "messages.yaml"
        else:
            self.messages_file = messages_file

        self._cache: Optional[Dict[str, Dict[str, str]]] = None

    def load(self) -> Dict[str, Dict[str, str]]:
        """Load all message groups from the YAML file.

        Raises:
            FileNotFoundError: If the messages file doesn't exist.
            yaml.YAMLError: If YAML is invalid.
        """
        if self._cache is not None:
            return self._cache

        if not self.messages_file.exists():
            raise FileNotFoundError(f"Messages file not found: {self.messages_file}")

        logger.debug(f"Loading messages from {self.messages_file}")

        with open(self.messages_file, "r", encoding="utf-8") as f:
            self._cache = yaml.safe_load(f) or {}

        return self._cache

    def render(self, group: str, name: str, /, **values) -> str:
        """Render one template with the given values.

        Any placeholder name is accepted in ``values``, including ``name``.

        Raises:
            KeyError: If the group or message name is not defined.
        """
        messages = self.load()
        try:
            template = messages[group][name]
        except KeyError:
            raise KeyError(f"Message '{group}.{name}' not defined in {self.messages_file}") from None

        return template.format(**values)
