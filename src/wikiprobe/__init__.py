"""wikiprobe - Wikipedia UI and MediaWiki API consistency checks."""
from wikiprobe.config import load_config
from wikiprobe.core.comparison import compare_sections
from wikiprobe.core.diff import compare_texts, format_diff_results
from wikiprobe.core.normalizer import count_unique_words, get_unique_words, normalize
from wikiprobe.models.config import HarnessConfig
from wikiprobe.models.result import ComparisonResult, DiffResult

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("wikiprobe")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
    "compare_sections",
    "compare_texts",
    "count_unique_words",
    "format_diff_results",
    "get_unique_words",
    "load_config",
    "normalize",
    "ComparisonResult",
    "DiffResult",
    "HarnessConfig",
]
