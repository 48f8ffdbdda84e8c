from .errors import (
    ParseError, SetupError, NoDirectorySelectedError, MissingImagesDirectoryError,
    MissingSimilarityFileError, InvalidSimilarityFileError, EmptyCatalogError
)
from .similarity_table import SimilarityTable, load_similarity_file
from .key_resolver import resolve_key
from .catalog import ImageDescriptor, ImageCatalog
from .cursor import Side, DualCursor
from .similarity_view import (
    Tier, SimilarityPoint, ChartScale, SimilarityView,
    classify, scale_for_chart, normalize_for_chart, format_score
)
from .dataset import Dataset, load_dataset
from .viewer_session import ViewerSession, ViewState, PanelState
