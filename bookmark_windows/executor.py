#!/usr/bin/env python3
"""Replay window plans against a browser windowing host."""

import html
import logging
from typing import Any, List, Optional, Protocol, Sequence
from urllib.parse import quote

from .models import Link, TabGroup, TitleTab, WindowPlan

logger = logging.getLogger(__name__)


class HostError(Exception):
    """Raised by a windowing host when a call fails."""
    pass


class WindowingCapability(Protocol):
    """Operations a host must offer to materialize window plans."""

    async def create_window(self, url: Optional[str] = None, focused: bool = True) -> Any:
        ...

    async def create_tab(self, window: Any, url: str, active: bool = False) -> Any:
        ...

    async def query_tabs(self, window: Any) -> List[Any]:
        ...

    async def group_tabs(self, tabs: Sequence[Any]) -> Any:
        ...

    async def update_group(
        self,
        group: Any,
        title: str,
        color: Optional[str] = None,
        collapsed: Optional[bool] = None,
    ) -> bool:
        ...


def title_page_url(title: str) -> str:
    """Data URL of a page whose title and heading show the given text."""
    text = html.escape(title or "New Window")
    page = f"<html><head><title>{text}</title></head><body><h1>{text}</h1></body></html>"
    return "data:text/html," + quote(page)


def find_anchor_url(window: WindowPlan) -> Optional[str]:
    """First link URL of a window, looking into the first non-empty group."""
    for item in window.tabs:
        if isinstance(item, Link):
            return item.url
        if isinstance(item, TabGroup) and item.items:
            return item.items[0].url
    return None


class WindowBuilder:
    """Materializes a single window plan on the host."""

    def __init__(self, plan: WindowPlan, host: WindowingCapability):
        self.plan = plan
        self.host = host
        self.window = None
        self.anchor_url: Optional[str] = None
        self.anchor_consumed = False

    async def build(self):
        await self._create_window()

        for item in self.plan.tabs:
            if isinstance(item, TitleTab):
                continue
            if isinstance(item, Link):
                await self._add_link(item)
            elif isinstance(item, TabGroup):
                await self._add_group(item)

    async def _create_window(self):
        if self.plan.has_title_tab:
            url = title_page_url(self.plan.tabs[0].title)
        else:
            self.anchor_url = find_anchor_url(self.plan)
            url = self.anchor_url

        self.window = await self.host.create_window(url=url, focused=True)
        logger.info(f"Opened window '{self.plan.title}'")

    def _takes_anchor(self, link: Link) -> bool:
        """True once, for the first link that matches the anchor URL."""
        if self.anchor_url is None or self.anchor_consumed:
            return False
        if link.url != self.anchor_url:
            return False
        self.anchor_consumed = True
        return True

    async def _add_link(self, link: Link):
        if self._takes_anchor(link):
            logger.debug(f"  Anchor tab: {link.url}")
            return
        await self.host.create_tab(self.window, link.url, active=False)
        logger.debug(f"  Tab: {link.url}")

    async def _add_group(self, group: TabGroup):
        members = []
        for link in group.items:
            if self._takes_anchor(link):
                tabs = await self.host.query_tabs(self.window)
                members.append(tabs[0])
                continue
            members.append(await self.host.create_tab(self.window, link.url, active=False))

        if not members:
            return

        group_id = await self.host.group_tabs(members)

        update = {"title": group.title}
        if group.color:
            update["color"] = group.color
        if group.collapsed:
            update["collapsed"] = True
        await self.host.update_group(group_id, **update)
        logger.debug(f"  Group '{group.title}': {len(members)} tabs")


async def execute(plans: Sequence[WindowPlan], host: WindowingCapability):
    """
    Create every planned window, one after another.

    Host failures are not handled here: the first failing call aborts the
    run and already created windows are left as they are.
    """
    for window_plan in plans:
        await WindowBuilder(window_plan, host).build()

    logger.info(f"Created {len(plans)} windows")
