class AsciiShadeError(Exception):
    """Base class for all errors raised by asciishade."""


class ConfigurationError(AsciiShadeError):
    pass


class EmptyCharsetError(ConfigurationError):
    def __init__(self):
        super().__init__("Cannot match brightness against an empty character set")


class ShellError(AsciiShadeError):
    """A shell command failed. The message is what the user sees."""

    message = "Did not execute due to incorrect command."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class IllegalCommandError(ShellError):
    message = "Did not execute due to incorrect command."


class CharsetFormatError(ShellError):
    def __init__(self, adding: bool):
        verb = "add" if adding else "remove"
        super().__init__(f"Did not {verb} due to incorrect format.")


class ResolutionRangeError(ShellError):
    message = "Did not change resolution due to exceeding boundaries."


class ResolutionFormatError(ShellError):
    message = "Did not change resolution due to incorrect format."


class RoundFormatError(ShellError):
    message = "Did not change rounding method due to incorrect format."


class OutputFormatError(ShellError):
    message = "Did not change output method due to incorrect format."


class CharsetTooSmallError(ShellError):
    message = "Did not execute. Charset is too small."
