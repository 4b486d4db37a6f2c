"""Errors raised by shared utilities."""


class UtilError(Exception):
    """Base class for utility-layer failures."""

    pass


class ConfigurationError(UtilError):
    """Settings the service refuses to start with.

    Attributes:
        setting: Environment variable that needs to be changed
    """

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        super().__init__(f"{setting} {reason}")
