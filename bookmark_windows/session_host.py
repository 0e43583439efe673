#!/usr/bin/env python3
"""
Windowing host that builds Firefox/Zen session-store windows in memory.

The windows can then be appended to a profile's recovery.jsonlz4 so the
browser restores them on next start.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from .executor import HostError
from .models import GROUP_COLORS

logger = logging.getLogger(__name__)

BLANK_URL = "about:blank"


@dataclass
class SessionTab:
    id: int
    window_id: int
    url: str
    group_id: Optional[int] = None


@dataclass
class SessionGroup:
    id: int
    window_id: int
    name: str = ""
    color: str = "grey"
    collapsed: bool = False


@dataclass
class SessionWindow:
    id: int
    tab_ids: List[int] = field(default_factory=list)
    selected_tab: int = 0
    group_ids: List[int] = field(default_factory=list)


class SessionStoreHost:
    """In-memory windowing host producing session-store window records."""

    def __init__(self):
        self.windows: Dict[int, SessionWindow] = {}
        self.tabs: Dict[int, SessionTab] = {}
        self.groups: Dict[int, SessionGroup] = {}
        self.focused_window: Optional[int] = None
        self._last_id = 0
        # Zen-style "timestamp-n" ids keep groups unique across imports
        self._id_prefix = int(datetime.now().timestamp() * 1000)

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def _get_window(self, window_id: int) -> SessionWindow:
        window = self.windows.get(window_id)
        if window is None:
            raise HostError(f"No window with id {window_id}")
        return window

    def _add_tab(self, window: SessionWindow, url: str) -> SessionTab:
        tab = SessionTab(id=self._next_id(), window_id=window.id, url=url)
        self.tabs[tab.id] = tab
        window.tab_ids.append(tab.id)
        return tab

    # ============== Windowing Capability ==============

    async def create_window(self, url: Optional[str] = None, focused: bool = True) -> int:
        window = SessionWindow(id=self._next_id())
        self.windows[window.id] = window

        tab = self._add_tab(window, url or BLANK_URL)
        window.selected_tab = tab.id
        if focused or self.focused_window is None:
            self.focused_window = window.id
        return window.id

    async def create_tab(self, window: int, url: str, active: bool = False) -> int:
        session_window = self._get_window(window)
        tab = self._add_tab(session_window, url)
        if active:
            session_window.selected_tab = tab.id
        return tab.id

    async def query_tabs(self, window: int) -> List[int]:
        return list(self._get_window(window).tab_ids)

    async def group_tabs(self, tabs: Sequence[int]) -> int:
        if not tabs:
            raise HostError("Cannot group an empty list of tabs")

        members = []
        for tab_id in tabs:
            tab = self.tabs.get(tab_id)
            if tab is None:
                raise HostError(f"No tab with id {tab_id}")
            if tab.group_id is not None:
                raise HostError(f"Tab {tab_id} is already in group {tab.group_id}")
            members.append(tab)

        window_ids = {tab.window_id for tab in members}
        if len(window_ids) > 1:
            raise HostError("Cannot group tabs from different windows")

        group = SessionGroup(id=self._next_id(), window_id=window_ids.pop())
        self.groups[group.id] = group
        self.windows[group.window_id].group_ids.append(group.id)
        for tab in members:
            tab.group_id = group.id
        return group.id

    async def update_group(
        self,
        group: int,
        title: str,
        color: Optional[str] = None,
        collapsed: Optional[bool] = None,
    ) -> bool:
        session_group = self.groups.get(group)
        if session_group is None:
            raise HostError(f"No group with id {group}")
        if color is not None and color not in GROUP_COLORS:
            raise HostError(f"Unsupported group color: {color}")

        session_group.name = title
        if color is not None:
            session_group.color = color
        if collapsed is not None:
            session_group.collapsed = collapsed
        return True

    # ============== Session Store Output ==============

    def _group_key(self, group_id: int) -> str:
        return f"{self._id_prefix}-{group_id}"

    def _tab_record(self, tab: SessionTab) -> dict:
        record = {
            "entries": [{"url": tab.url, "title": ""}],
            "index": 1,
            "hidden": False,
            "pinned": False,
            "attributes": {},
        }
        if tab.group_id is not None:
            record["groupId"] = self._group_key(tab.group_id)
        return record

    def _window_record(self, window: SessionWindow) -> dict:
        tabs = [self.tabs[tab_id] for tab_id in window.tab_ids]
        groups = [self.groups[group_id] for group_id in window.group_ids]
        return {
            "tabs": [self._tab_record(tab) for tab in tabs],
            "selected": window.tab_ids.index(window.selected_tab) + 1,
            "groups": [
                {
                    "id": self._group_key(group.id),
                    "name": group.name,
                    "color": group.color,
                    "collapsed": group.collapsed,
                }
                for group in groups
            ],
        }

    def to_session_windows(self) -> List[dict]:
        """Session-store records for every window, in creation order."""
        return [self._window_record(window) for window in self.windows.values()]

    def append_to_session(self, session: dict) -> dict:
        """Add the built windows to a session-store document."""
        records = self.to_session_windows()
        windows = session.setdefault("windows", [])
        existing = len(windows)
        windows.extend(records)

        if self.focused_window is not None:
            position = list(self.windows).index(self.focused_window)
            session["selectedWindow"] = existing + position + 1
        session.setdefault("session", {})["lastUpdate"] = int(datetime.now().timestamp() * 1000)
        logger.info(f"Added {len(records)} windows to session")
        return session
