__all__ = (
    "CanonreqError",
    "ConfigError",
    "InvalidArgument",
    "DuplicateHeader",
    "IncompleteRequest",
)


class CanonreqError(Exception):
    """Base exception of canonreq"""

    def __init__(self, message=None):
        self.message = message or type(self).__doc__
        super().__init__(self.message)

    def __repr__(self):
        return f"<{type(self).__name__} {self.message}>"

    def __str__(self):
        return self.message


class ConfigError(CanonreqError):
    """Config Error"""


class InvalidArgument(CanonreqError, ValueError):
    """Invalid argument"""


class DuplicateHeader(CanonreqError, KeyError):
    """Duplicate header found"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Duplicate header found: {name}")


class IncompleteRequest(CanonreqError, ValueError):
    """Request is incomplete"""

    def __init__(self, field):
        self.field = field
        super().__init__(f"{field} cannot be blank")
