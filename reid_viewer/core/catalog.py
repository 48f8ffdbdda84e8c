"""
Ordered catalog of the images being compared.
"""

import os
import re
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Iterator, List, Optional

_DIGITS = re.compile(r"(\d+)")


@dataclass(frozen=True)
class ImageDescriptor:
    index: int
    filename: str
    base_identifier: str
    content_ref: str  # path handed to the renderer

    @property
    def position_label(self) -> str:
        """1-based position as shown in the UI."""
        return str(self.index + 1)


def compare_filenames(a: str, b: str) -> int:
    """Numeric comparison on the first digit run, lexicographic otherwise."""
    a_match = _DIGITS.search(a)
    b_match = _DIGITS.search(b)

    if a_match and b_match:
        return int(a_match.group(1)) - int(b_match.group(1))

    # Fallback to lexicographic order if either name has no number
    return (a > b) - (a < b)


def sort_filenames(filenames: Iterable[str]) -> List[str]:
    # sorted() is stable, so names with equal numbers keep their input order
    return sorted(filenames, key=cmp_to_key(compare_filenames))


def base_identifier(filename: str) -> str:
    """Filename with its final extension removed."""
    return os.path.splitext(filename)[0]


class ImageCatalog:
    """Read-only, numerically sorted list of ImageDescriptor."""

    def __init__(self, descriptors: List[ImageDescriptor], directory: str = ""):
        self._descriptors = list(descriptors)
        self.directory = directory

    @classmethod
    def build(cls, filenames: Iterable[str], directory: Optional[str] = None) -> "ImageCatalog":
        """
        Build a catalog from unordered filenames.

        Args:
            filenames: Image filenames (no directory component)
            directory: Folder holding the files; used for content references

        Returns:
            Catalog with indexes assigned in sorted order
        """
        directory = directory or ""
        descriptors = []
        for index, filename in enumerate(sort_filenames(filenames)):
            content_ref = os.path.join(directory, filename) if directory else filename
            descriptors.append(ImageDescriptor(
                index=index,
                filename=filename,
                base_identifier=base_identifier(filename),
                content_ref=content_ref,
            ))
        return cls(descriptors, directory)

    def find(self, filename: str) -> Optional[ImageDescriptor]:
        """Find a descriptor by filename or base identifier."""
        for descriptor in self._descriptors:
            if filename in (descriptor.filename, descriptor.base_identifier):
                return descriptor
        return None

    @property
    def filenames(self) -> List[str]:
        return [descriptor.filename for descriptor in self._descriptors]

    def is_empty(self) -> bool:
        return not self._descriptors

    def __getitem__(self, index: int) -> ImageDescriptor:
        return self._descriptors[index]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ImageDescriptor]:
        return iter(self._descriptors)
