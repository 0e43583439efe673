#!/usr/bin/env python3
"""Compile a bookmark tree into an ordered list of window plans."""

import logging
import re
from typing import List, Optional, Tuple

from .models import (
    GROUP_COLORS,
    Bookmark,
    BookmarkFolder,
    Link,
    PlanOptions,
    TabGroup,
    TitleTab,
    WindowPlan,
)

logger = logging.getLogger(__name__)

COLOR_SUFFIX = re.compile(
    r"^(.*)\[(" + "|".join(GROUP_COLORS) + r")\]\s*$", re.IGNORECASE | re.DOTALL
)
COLLAPSED_SUFFIX = re.compile(r"^(.*)\[collapsed\]\s*$", re.IGNORECASE | re.DOTALL)


def is_mixed(folder: BookmarkFolder) -> bool:
    """A folder is mixed when it directly contains another folder."""
    return any(isinstance(child, BookmarkFolder) for child in folder.children)


def parse_group_title(title: str) -> Tuple[str, Optional[str], bool]:
    """
    Strip "[color]" and "[collapsed]" suffixes from a folder title.

    Suffixes may come in any order, e.g. "Work[blue][collapsed]" and
    "Work[collapsed][blue]" both give ("Work", "blue", True).

    Returns:
        Tuple of (title, color or None, collapsed)
    """
    title = title or ""
    color = None
    collapsed = False

    while True:
        match = COLOR_SUFFIX.match(title)
        if match:
            title = match.group(1).strip()
            color = match.group(2).lower()
            continue
        match = COLLAPSED_SUFFIX.match(title)
        if match:
            title = match.group(1).strip()
            collapsed = True
            continue
        break

    return title, color, collapsed


def new_window(title: str, options: PlanOptions, windows: List[WindowPlan]) -> WindowPlan:
    """Create a window plan, register it and return it."""
    title = title or "New Window"
    window = WindowPlan(title=title)
    if options.add_title_tab:
        window.tabs.append(TitleTab(title=title))
    windows.append(window)
    return window


def folder_to_group(folder: BookmarkFolder) -> Optional[TabGroup]:
    """Turn a leaf folder into a tab group, or None when it has no links."""
    links = [
        Link(title=child.title, url=child.url)
        for child in folder.children
        if isinstance(child, Bookmark)
    ]
    if not links:
        return None

    title, color, collapsed = parse_group_title(folder.title)
    return TabGroup(title=title, items=links, color=color, collapsed=collapsed)


def walk_children(
    folder: BookmarkFolder,
    window: WindowPlan,
    force_window: bool,
    options: PlanOptions,
    windows: List[WindowPlan],
):
    """Place the children of a folder, in order, into window plans."""
    for child in folder.children:
        if isinstance(child, Bookmark):
            window.tabs.append(Link(title=child.title, url=child.url))

        elif isinstance(child, BookmarkFolder):
            if force_window or is_mixed(child):
                child_window = new_window(child.title, options, windows)
                walk_children(child, child_window, False, options, windows)
            else:
                group = folder_to_group(child)
                if group is not None:
                    window.tabs.append(group)


def is_vestigial(window: WindowPlan, options: PlanOptions) -> bool:
    """True when the window holds nothing but (at most) its title tab."""
    if len(window.tabs) > options.empty_threshold:
        return False
    if options.add_title_tab:
        return len(window.tabs) == 1 and window.has_title_tab
    return not window.tabs


def plan(root: BookmarkFolder, options: Optional[PlanOptions] = None) -> List[WindowPlan]:
    """
    Build the ordered list of windows for a bookmark tree.

    Links land in the window of their nearest folder that became a window.
    Mixed folders (and, with omit_root, every top-level folder) open their
    own window. Leaf folders become one tab group in the current window.
    """
    options = options or PlanOptions()
    windows: List[WindowPlan] = []

    root_window = new_window(root.title or "Bookmarks", options, windows)
    walk_children(root, root_window, options.omit_root, options, windows)

    if len(windows) > 1 and is_vestigial(root_window, options):
        windows.pop(0)

    if options.omit_empty_windows:
        windows = [w for w in windows if len(w.tabs) > options.empty_threshold]

    logger.debug(f"Planned {len(windows)} windows from '{root.title}'")
    return windows
