import logging
import sys
from pathlib import Path

import pytest

# Allow `import lofistart` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from lofistart.model import Bookmark, Dashboard, WidgetLayout  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """The CLI configures the package logger; hand it back to caplog afterwards."""
    yield
    pkg = logging.getLogger("lofistart")
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
    pkg.propagate = True
    pkg.setLevel(logging.NOTSET)


def _bm(bid: str, category=None, *, fav: bool = False) -> Bookmark:
    return Bookmark(id=bid, title=bid.upper(), url=f"https://{bid}.example/", is_favorite=fav, category=category)


@pytest.fixture
def dashboard() -> Dashboard:
    return Dashboard(
        bookmarks=(
            _bm("gh", "Dev", fav=True),
            _bm("a", "Dev"),
            _bm("yt", "Media"),
            _bm("b", "Dev"),
            _bm("mail", "Work", fav=True),
            _bm("c", "Dev"),
            _bm("secret", "Private"),
            _bm("misc"),
        ),
        layout=WidgetLayout(header=("clock",), sidebar=("weather", "todo", "notes")),
        category_order=("Work",),
        widgets={"weather": True, "todo": True, "notes": False},
    )
