"""The single recoverable failure signal a test body may raise."""


class AssertionFailure(Exception):
    """Raised by a test body to report a failed check.

    Attributes:
        message: Human-readable detail about the failed check. It is written
            to the diagnostics stream next to the test's source location.

    Any other exception raised from a test body is not intercepted by the
    runner and terminates the run.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
