"""Core modules for turning bookmark exports into browser windows."""

from .models import (
    GROUP_COLORS,
    Bookmark,
    BookmarkFolder,
    PlanOptions,
    TitleTab,
    Link,
    TabGroup,
    WindowPlan,
)
from .console import Colors, setup_logging
from .planner import plan, is_mixed, parse_group_title
from .executor import HostError, WindowingCapability, execute, title_page_url
from .html_parser import BookmarkFileError, parse_bookmarks_html, read_bookmarks_file
from .preview import render_preview, truncate
from .session_host import SessionStoreHost

__all__ = [
    # Models
    "GROUP_COLORS",
    "Bookmark",
    "BookmarkFolder",
    "PlanOptions",
    "TitleTab",
    "Link",
    "TabGroup",
    "WindowPlan",
    # Console
    "Colors",
    "setup_logging",
    # Planner
    "plan",
    "is_mixed",
    "parse_group_title",
    # Executor
    "HostError",
    "WindowingCapability",
    "execute",
    "title_page_url",
    # Parser
    "BookmarkFileError",
    "parse_bookmarks_html",
    "read_bookmarks_file",
    # Preview
    "render_preview",
    "truncate",
    # Session host
    "SessionStoreHost",
]
