"""Library exceptions."""


class NotemarkException(Exception):
    """Generic notemark exception."""


class NoteFileError(NotemarkException):
    """A notes file could not be read or did not hold valid note records."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
