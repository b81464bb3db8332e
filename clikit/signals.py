# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the clikit interactive mode.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
standard `except Exception` blocks in handlers.

Signals:
- QuitSignal: Terminate the interactive session.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in clikit.

    These are not errors. They're used to control flow like quitting
    the interactive loop from user input or from inside a handler.
    """


class QuitSignal(FlowSignal):
    """Raised to signal an immediate exit from the interactive mode."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
