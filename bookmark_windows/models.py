#!/usr/bin/env python3
"""Data models for bookmark trees and window plans."""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Union

GROUP_COLORS = ("grey", "blue", "red", "yellow", "green", "pink", "purple", "cyan")


@dataclass
class Bookmark:
    """Represents a single bookmark."""
    title: str
    url: str


@dataclass
class BookmarkFolder:
    """Represents a bookmark folder containing other bookmarks or folders."""
    title: str
    children: List[Union["Bookmark", "BookmarkFolder"]] = field(default_factory=list)


@dataclass
class PlanOptions:
    """Options controlling how a bookmark tree is split into windows."""
    omit_root: bool = False
    add_title_tab: bool = False
    omit_empty_windows: bool = False

    _KEYS = {
        "omitRoot": "omit_root",
        "addTitleTab": "add_title_tab",
        "omitEmptyWindows": "omit_empty_windows",
    }

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "PlanOptions":
        """Build options from a camelCase or snake_case mapping."""
        values = {}
        for key, value in (data or {}).items():
            name = cls._KEYS.get(key, key)
            if name in ("omit_root", "add_title_tab", "omit_empty_windows"):
                values[name] = bool(value)
        return cls(**values)

    @property
    def empty_threshold(self) -> int:
        """Tab count at or below which a window counts as empty."""
        return 1 if self.add_title_tab else 0


@dataclass
class TitleTab:
    """Synthetic marker that names its window."""
    title: str


@dataclass
class Link:
    """A single tab."""
    title: str
    url: str


@dataclass
class TabGroup:
    """A cluster of tabs shown as one visual group."""
    title: str
    items: List[Link] = field(default_factory=list)
    color: Optional[str] = None
    collapsed: bool = False


TabItem = Union[TitleTab, Link, TabGroup]


@dataclass
class WindowPlan:
    """One target window and its ordered content."""
    title: str
    tabs: List[TabItem] = field(default_factory=list)

    @property
    def has_title_tab(self) -> bool:
        return bool(self.tabs) and isinstance(self.tabs[0], TitleTab)

    @property
    def content_count(self) -> int:
        """Number of tab items other than the title tab."""
        return len(self.tabs) - (1 if self.has_title_tab else 0)
