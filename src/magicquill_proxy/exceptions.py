"""Errores de la comunicación con MagicQuill."""


class MagicQuillError(Exception):
    """Base class for failures on the way to or back from MagicQuill."""


class MagicQuillConnectionError(MagicQuillError):
    def __init__(self, message: str = "Could not establish connection to MagicQuill"):
        super().__init__(message)


class MagicQuillResponseError(MagicQuillError):
    pass
