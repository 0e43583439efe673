#!/usr/bin/env python3
"""Plain-text preview of window plans."""

from typing import List, Sequence

from .models import Link, TabGroup, TitleTab, WindowPlan

INDENT = " " * 5


def truncate(text: str, limit: int = 20, keep: int = 17) -> str:
    """Shorten text longer than limit to its first keep chars plus '...'."""
    if not text:
        return ""
    return text[:keep] + "..." if len(text) > limit else text


def render_window(window: WindowPlan, index: int) -> List[str]:
    """Render one window plan as preview lines."""
    if window.title:
        lines = [f"[window:{window.title}]"]
    else:
        lines = [f"[window: #{index + 1}]"]

    for tab in window.tabs:
        if isinstance(tab, TitleTab):
            lines.append(f'{INDENT}[TITLE TAB: "{tab.title}"]')
        elif isinstance(tab, TabGroup):
            color_info = f" (Color: {tab.color})" if tab.color else ""
            collapsed_info = " (collapsed)" if tab.collapsed else ""
            lines.append(f"{INDENT}[group:{tab.title}]{color_info}{collapsed_info}")
            titles = ", ".join(f'"{truncate(item.title)}"' for item in tab.items)
            lines.append(f"{INDENT * 2}[ {len(tab.items)} tabs ({titles}) ]")
        elif isinstance(tab, Link):
            lines.append(f'{INDENT}[tab "{truncate(tab.title)}"]')

    return lines


def render_preview(plans: Sequence[WindowPlan]) -> str:
    """Render all window plans as indented text."""
    output = []
    for index, window in enumerate(plans):
        output.extend(render_window(window, index))
    return "".join(line + "\n" for line in output)
