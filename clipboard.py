import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


class Clipboard:
    """Single-slot text register.

    When ``interface_command`` is set (e.g. ``["wl-copy"]``) every copy is
    also piped to that command so the system clipboard follows along.
    """

    def __init__(self, interface_command: Optional[List[str]] = None):
        self.interface_command = interface_command
        self._value: Optional[str] = None

    def copy(self, text: str) -> None:
        self._value = text
        if self.interface_command:
            self._export(text)

    def paste(self) -> Optional[str]:
        return self._value

    def _export(self, text: str) -> None:
        try:
            subprocess.run(self.interface_command, input=text, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.warning("clipboard command %s failed: %s", self.interface_command, exc)
