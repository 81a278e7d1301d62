from __future__ import annotations

from .model import Bookmark, Dashboard, WidgetLayout

DEFAULT_BOOKMARKS = (
    Bookmark(id="1", title="GitHub", url="https://github.com", is_favorite=True, category="Development"),
    Bookmark(id="2", title="YouTube", url="https://youtube.com", category="Media"),
    Bookmark(id="3", title="Reddit", url="https://reddit.com", category="Social"),
    Bookmark(id="4", title="Gmail", url="https://mail.google.com", is_favorite=True, category="Work"),
    Bookmark(id="ai-1", title="DeepSeek", url="https://chat.deepseek.com", category="AI Tools"),
    Bookmark(id="ai-2", title="Gemini", url="https://gemini.google.com", category="AI Tools"),
    Bookmark(id="ai-3", title="Claude", url="https://claude.ai", category="AI Tools"),
    Bookmark(id="ai-4", title="Grok", url="https://x.com/i/grok", category="AI Tools"),
    Bookmark(id="ai-5", title="Aixploria", url="https://www.aixploria.com", category="AI Tools"),
)

# Every placeable widget starts in the sidebar (disabled) so enabling it later
# keeps its slot.
DEFAULT_LAYOUT = WidgetLayout(
    sidebar=("weather", "pomodoro", "todo", "notes", "crypto", "breathing"),
)

DEFAULT_WIDGETS = {
    "weather": False,
    "pomodoro": False,
    "todo": False,
    "notes": False,
    "crypto": False,
    "breathing": False,
}


def default_dashboard() -> Dashboard:
    return Dashboard(
        bookmarks=DEFAULT_BOOKMARKS,
        layout=DEFAULT_LAYOUT,
        category_order=("AI Tools",),
        widgets=dict(DEFAULT_WIDGETS),
        extra={"username": "Traveler"},
    )
