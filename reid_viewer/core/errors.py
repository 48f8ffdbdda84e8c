"""
Error types raised while opening a dataset.
"""


class ParseError(ValueError):
    """Similarity table text is empty or has no header row."""


class SetupError(Exception):
    """A dataset could not be opened. The message is shown to the user as-is."""

    default_message = "Unable to open dataset"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class NoDirectorySelectedError(SetupError):
    default_message = "Directory not selected"


class MissingImagesDirectoryError(SetupError):
    def __init__(self, subdir: str = "images"):
        super().__init__(f'No "{subdir}" subdirectory found in the selected directory')


class MissingSimilarityFileError(SetupError):
    def __init__(self, filename: str = "cos_similarity.csv"):
        super().__init__(f'No "{filename}" file found in the selected directory')


class InvalidSimilarityFileError(SetupError):
    def __init__(self, filename: str, reason: str):
        super().__init__(f'Could not read "{filename}": {reason}')


class EmptyCatalogError(SetupError):
    default_message = "No images found in images directory"
