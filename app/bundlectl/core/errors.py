"""Exception hierarchy for bundlectl.

Every failure is fatal: library code raises one of these and the CLI
reports it once and exits non-zero.
"""


class BundleError(Exception):
    """Base exception for all bundlectl errors."""


class UnsupportedPlatformError(BundleError):
    """Raised when the host is not a supported build platform."""


class ToolNotFoundError(BundleError):
    """Raised when a required external tool is not installed."""


class CommandError(BundleError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        args_: The command line that failed.
        returncode: Exit code of the command.
        stderr: Captured standard error (may be empty).
    """

    def __init__(self, args: list[str], returncode: int, stderr: str = "") -> None:
        self.args_ = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "no error output"
        super().__init__(f"Command failed ({returncode}): {' '.join(args)}: {detail}")


class ParseError(BundleError):
    """Raised when a query tool produces output of an unexpected shape."""


class CopyError(BundleError):
    """Raised when a payload file cannot be copied.

    Attributes:
        source: Source path of the failed copy.
        destination: Destination path of the failed copy.
    """

    def __init__(self, source: str, destination: str, reason: str) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Cannot copy {source} -> {destination}: {reason}")
