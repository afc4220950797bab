"""
HarAmmo Errors

Every failure the converter reports to its caller derives from
HarAmmoError. All of them are terminal.
"""


class HarAmmoError(Exception):
    """Base exception type for library consumers."""


class MissingInputFileError(HarAmmoError):
    """The HAR input path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} does not exist!")


class MissingConfigFileError(HarAmmoError):
    """A config path was given but does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} does not exist!")


class ParseError(HarAmmoError):
    pass


class InvalidArchiveError(HarAmmoError):
    pass
