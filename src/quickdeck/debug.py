"""Before/after diff reporting for deletion passes."""

import os
import subprocess
import tempfile
from collections.abc import Sequence


def _write_lines(lines: Sequence[str], prefix: str) -> str:
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=".txt")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return path


class DiffReporter:
    """Runs an external line-diff tool over each deletion pass."""

    def __init__(self, command: str = "diff"):
        self.command = command

    def report(self, before: Sequence[str], after: Sequence[str]) -> int:
        """
        Print the difference between two line sequences.
        
        Returns the diff tool's exit status, or -1 if it could not be run.
        """
        prev = _write_lines(before, "prev.")
        next_ = _write_lines(after, "next.")
        try:
            try:
                result = subprocess.run(
                    [self.command, prev, next_],
                    capture_output=True,
                    text=True,
                )
                code = result.returncode
                output = result.stdout + result.stderr
            except OSError as e:
                code = -1
                output = str(e)
            
            if code == 0:
                print("No differences found.")
            elif code == 1:
                print("Differences found.")
            else:
                print("An error occurred while running the diff utility.")
            print(output)
            return code
        finally:
            os.unlink(prev)
            os.unlink(next_)
