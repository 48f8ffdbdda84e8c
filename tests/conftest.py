import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PIL import Image

from reid_viewer.core.similarity_table import SimilarityTable


def make_image(path, value=128, size=(16, 16)):
    Image.new("RGB", size, (value, value, value)).save(path)


@pytest.fixture
def dataset_dir(tmp_path):
    """Dataset with three images and a single stored pair (Image_1, Image_2)."""
    images = tmp_path / "images"
    images.mkdir()
    for i, name in enumerate(["img3.png", "img1.png", "img2.png"]):
        make_image(images / name, value=40 * (i + 1))
    (images / "notes.txt").write_text("not an image")
    (tmp_path / "cos_similarity.csv").write_text(",Image_1,Image_2,Image_3\nImage_1,1.0,0.95\n")
    return tmp_path


@pytest.fixture
def abc_table():
    return SimilarityTable.from_text(",A,B,C\nA,1.0,0.5,0.2\n")
