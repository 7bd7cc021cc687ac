"""Step outputs and failure reporting for the Actions runner."""

import logging
import sys
import uuid
from pathlib import Path
from typing import Dict, TextIO

logger = logging.getLogger(__name__)


class ActionOutputs:
    """Writes step outputs to the GITHUB_OUTPUT file and reports failure.

    Values set during the run are also kept in ``values`` so callers (and
    tests) can read them back without parsing the file.
    """

    def __init__(self, output_path: str | None = None, stream: TextIO | None = None) -> None:
        self._output_path = Path(output_path) if output_path else None
        self._stream = stream
        self.values: Dict[str, str] = {}
        self.failed_message: str | None = None

    @property
    def failed(self) -> bool:
        return self.failed_message is not None

    def set_output(self, name: str, value: str) -> None:
        """Record an output; multi-line values use the heredoc syntax."""
        self.values[name] = value
        if self._output_path is None:
            logger.debug("GITHUB_OUTPUT not set, output %s=%s not written", name, value)
            return
        with self._output_path.open("a", encoding="utf-8") as f:
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                f.write(f"{name}={value}\n")

    def set_failed(self, message: str) -> None:
        """Mark the run failed with an ``::error::`` workflow command."""
        self.failed_message = message
        stream = self._stream or sys.stdout
        # Workflow commands are single-line; the runner decodes %0A back
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        print(f"::error::{escaped}", file=stream)
        logger.error(message)
