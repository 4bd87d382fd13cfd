"""Configuration missing error."""


class ConfigurationMissingError(Exception):
    """Raised when the remote endpoint or credentials are not configured."""

    def __init__(self, missing: list[str]):
        if isinstance(missing, str):
            missing = [missing]
        self.missing = missing
        message = "WebDAV is not configured, missing: " + ", ".join(missing)
        super().__init__(message)
