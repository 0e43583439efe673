#!/usr/bin/env python3
"""Read Netscape bookmark HTML exports into a bookmark tree."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from .models import Bookmark, BookmarkFolder

logger = logging.getLogger(__name__)

EXPORT_WRAPPER_TITLE = "Bookmarks"


class BookmarkFileError(Exception):
    """Raised when a bookmark file cannot be read."""
    pass


def _owned(tag: Tag, owner_name: str, owner: Tag) -> bool:
    """True when the nearest <owner_name> ancestor of tag is owner."""
    return tag.find_parent(owner_name) is owner


def _nested_list(dt: Tag) -> Optional[Tag]:
    """Find the <DL> holding a folder's children."""
    for dl in dt.find_all("dl"):
        if _owned(dl, "dt", dt):
            return dl

    # Some exporters close <DT> before the list
    sibling = dt.find_next_sibling()
    if sibling is not None and sibling.name == "dl":
        return sibling
    return None


def _parse_list(dl: Tag, parent: BookmarkFolder):
    """Append the folders and links of a <DL> to parent, in order."""
    for dt in dl.find_all("dt"):
        if not _owned(dt, "dl", dl):
            continue

        h3 = next((h for h in dt.find_all("h3") if _owned(h, "dt", dt)), None)
        if h3 is not None:
            folder = BookmarkFolder(title=h3.get_text().strip())
            nested = _nested_list(dt)
            if nested is not None:
                _parse_list(nested, folder)
            parent.children.append(folder)
            continue

        a = next((a for a in dt.find_all("a") if _owned(a, "dt", dt)), None)
        if a is not None:
            parent.children.append(Bookmark(
                title=a.get_text().strip(),
                url=a.get("href", ""),
            ))


def parse_bookmarks_html(content: str) -> BookmarkFolder:
    """
    Parse bookmark export markup into a folder tree.

    Malformed markup gives a partial tree, never an error. When the only
    top-level entry is a folder named "Bookmarks", that folder is returned
    as the root.
    """
    soup = BeautifulSoup(content, "html.parser")
    root = BookmarkFolder(title="ROOT")

    main_list = soup.find("dl")
    if main_list is not None:
        _parse_list(main_list, root)
    else:
        logger.warning("No bookmark list found in document")

    if (
        len(root.children) == 1
        and isinstance(root.children[0], BookmarkFolder)
        and root.children[0].title == EXPORT_WRAPPER_TITLE
    ):
        return root.children[0]

    return root


def read_bookmarks_file(path: Union[str, Path]) -> BookmarkFolder:
    """Read and parse a bookmark HTML file."""
    path = Path(path)
    if not path.exists():
        raise BookmarkFileError(f"Bookmark file not found: {path}")

    logger.info(f"Reading bookmarks from {path}...")
    with path.open("r", encoding="utf-8", errors="replace") as f:
        root = parse_bookmarks_html(f.read())

    bookmarks, folders = count_items(root)
    logger.info(f"Parsed {bookmarks} bookmarks in {folders} folders")
    return root


def count_items(folder: BookmarkFolder) -> Tuple[int, int]:
    """Count bookmarks and sub-folders below a folder."""
    bookmarks, folders = 0, 0
    for item in folder.children:
        if isinstance(item, Bookmark):
            bookmarks += 1
        elif isinstance(item, BookmarkFolder):
            sub_bm, sub_fl = count_items(item)
            bookmarks += sub_bm
            folders += sub_fl + 1
    return bookmarks, folders
