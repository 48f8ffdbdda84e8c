#!/usr/bin/env python3
"""
Print the stored similarity between two images of a dataset.
Usage: reid-viewer-lookup <dataset_dir> <image_a> <image_b>
"""

import argparse
import sys
from typing import Optional

from ..core.dataset import Dataset, load_dataset
from ..core.errors import SetupError
from ..core.similarity_view import SimilarityView, classify, format_score


def lookup_pair(dataset: Dataset, image_a: str, image_b: str) -> Optional[float]:
    """
    Look up the similarity of two catalog images.

    Args:
        dataset: Loaded dataset
        image_a: Filename (or base name) of the first image
        image_b: Filename (or base name) of the second image

    Returns:
        Similarity, or None if the table has no entry for the pair

    Raises:
        KeyError: if either image is not in the catalog
    """
    descriptors = []
    for name in (image_a, image_b):
        descriptor = dataset.catalog.find(name)
        if descriptor is None:
            raise KeyError(name)
        descriptors.append(descriptor)

    view = SimilarityView(dataset.catalog, dataset.table)
    return view.similarity_between(descriptors[0].index, descriptors[1].index)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Look up the similarity of two dataset images")
    parser.add_argument("directory", help="Dataset directory")
    parser.add_argument("image_a", help="First image filename")
    parser.add_argument("image_b", help="Second image filename")
    args = parser.parse_args(argv)

    try:
        dataset = load_dataset(args.directory)
        similarity = lookup_pair(dataset, args.image_a, args.image_b)
    except SetupError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"Error: Image not found in catalog: {e.args[0]}", file=sys.stderr)
        return 1

    if similarity is None:
        print(f"Similarity: {format_score(similarity)}")
    else:
        print(f"Similarity: {format_score(similarity)} ({classify(similarity).value})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
