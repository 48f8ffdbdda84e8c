import pytest

from reid_viewer.core.catalog import ImageCatalog
from reid_viewer.core.cursor import Side
from reid_viewer.core.dataset import load_dataset
from reid_viewer.core.similarity_table import SimilarityTable
from reid_viewer.core.similarity_view import Tier
from reid_viewer.core.viewer_session import ViewerSession


@pytest.fixture
def session(dataset_dir):
    return ViewerSession.from_dataset(load_dataset(str(dataset_dir)))


def test_initial_pair_is_found(session):
    assert session.cursor.reference_index == 0
    assert session.cursor.target_index == 1
    state = session.view_state()
    assert state.similarity == 0.95
    assert state.score_text == "0.9500"
    assert state.score_tier == Tier.HIGH


def test_missing_pair_shows_not_available(session):
    assert session.navigate(Side.TARGET, 1)
    state = session.view_state()
    assert state.target.index == 2
    assert state.similarity is None
    assert state.score_text == "N/A"
    assert state.score_tier == Tier.HIGH


def test_navigation_at_bounds_is_ignored(session):
    assert not session.navigate(Side.REFERENCE, -1)
    session.select(Side.TARGET, 2)
    assert not session.navigate(Side.TARGET, 1)
    assert not session.select(Side.TARGET, 7)
    assert session.cursor.target_index == 2


def test_slider_positions_are_one_based(session):
    assert session.select_from_slider(Side.REFERENCE, 3)
    assert session.cursor.reference_index == 2
    assert not session.select_from_slider(Side.REFERENCE, 0)


def test_distribution_follows_reference(session):
    assert [p.similarity for p in session.distribution] == [1.0, 0.95, 0]
    session.select(Side.REFERENCE, 1)
    assert [p.similarity for p in session.distribution] == [0.95, 0, 0]


def test_target_change_keeps_distribution(session):
    before = session.distribution
    session.navigate(Side.TARGET, 1)
    state = session.view_state()
    assert list(state.distribution) == before
    assert state.highlight_index == 2


def test_panel_state(session):
    state = session.view_state()
    assert state.reference.caption == "img1.png"
    assert state.reference.counter == "1 / 3"
    assert state.reference.slider_value == 1
    assert not state.reference.can_go_previous
    assert state.reference.can_go_next
    assert state.target.counter == "2 / 3"


def test_single_image_session():
    catalog = ImageCatalog.build(["only.png"])
    session = ViewerSession(catalog, SimilarityTable.from_text(",Image_1\n"))
    state = session.view_state()
    assert state.target.descriptor is None
    assert state.target.caption == "No image selected"
    assert state.target.counter == "- / 1"
    assert state.score_text == "-"
    assert len(state.distribution) == 1
    # the target can still be chosen explicitly
    assert session.select(Side.TARGET, 0)
    assert session.view_state().score_text == "N/A"


def test_empty_session():
    session = ViewerSession(ImageCatalog.build([]), SimilarityTable.from_text(",A\n"))
    assert session.is_empty
    assert session.cursor.reference_index == -1
    assert session.cursor.target_index == -1
    assert session.distribution == []
    assert not session.navigate(Side.TARGET, 1)
