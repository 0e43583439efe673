from bookmark_windows.models import (
    Bookmark,
    BookmarkFolder,
    Link,
    PlanOptions,
    TabGroup,
    TitleTab,
)
from bookmark_windows.planner import is_mixed, parse_group_title, plan


def link(name):
    return Bookmark(title=name, url=f"https://{name.lower()}")


def test_flat_tree_gives_one_window_in_order():
    root = BookmarkFolder("Bookmarks", [link("A"), link("B"), link("C")])

    windows = plan(root, PlanOptions())

    assert len(windows) == 1
    assert windows[0].title == "Bookmarks"
    assert [t.url for t in windows[0].tabs] == ["https://a", "https://b", "https://c"]
    assert all(isinstance(t, Link) for t in windows[0].tabs)


def test_flat_tree_with_title_tab():
    root = BookmarkFolder("Reading", [link("A")])

    windows = plan(root, PlanOptions(add_title_tab=True))

    assert windows[0].tabs[0] == TitleTab("Reading")
    assert windows[0].tabs[1] == Link("A", "https://a")


def test_empty_root_title_defaults_to_bookmarks():
    windows = plan(BookmarkFolder("", [link("A")]))
    assert windows[0].title == "Bookmarks"


def test_is_mixed():
    assert is_mixed(BookmarkFolder("m", [link("A"), BookmarkFolder("sub")]))
    assert not is_mixed(BookmarkFolder("leaf", [link("A")]))
    assert not is_mixed(BookmarkFolder("empty"))


def test_parse_group_title_suffixes_in_any_order():
    assert parse_group_title("Work[blue][collapsed]") == ("Work", "blue", True)
    assert parse_group_title("Work[collapsed][blue]") == ("Work", "blue", True)
    assert parse_group_title("Work [RED] ") == ("Work", "red", False)
    assert parse_group_title("Work") == ("Work", None, False)
    assert parse_group_title("Work[orange]") == ("Work[orange]", None, False)


def test_leaf_folder_becomes_group_with_styling():
    root = BookmarkFolder("Bookmarks", [
        BookmarkFolder("Tools[red][collapsed]", [link("X"), link("Y")]),
    ])

    windows = plan(root, PlanOptions())

    assert len(windows) == 1
    assert windows[0].tabs == [
        TabGroup(
            title="Tools",
            color="red",
            collapsed=True,
            items=[Link("X", "https://x"), Link("Y", "https://y")],
        )
    ]


def test_empty_leaf_folder_contributes_nothing():
    root = BookmarkFolder("Bookmarks", [BookmarkFolder("Empty"), link("A")])

    windows = plan(root)

    assert windows[0].tabs == [Link("A", "https://a")]


def test_mixed_folder_opens_window_and_root_is_pruned():
    root = BookmarkFolder("Bookmarks", [
        BookmarkFolder("Projects", [link("P"), BookmarkFolder("Docs", [link("D")])]),
        BookmarkFolder("Leaf", [link("L")]),
    ])

    windows = plan(root, PlanOptions())

    # root keeps the leaf group so it survives pruning
    assert [w.title for w in windows] == ["Bookmarks", "Projects"]
    assert windows[0].tabs == [TabGroup("Leaf", [Link("L", "https://l")])]
    assert windows[1].tabs == [
        Link("P", "https://p"),
        TabGroup("Docs", [Link("D", "https://d")]),
    ]


def test_root_pruned_when_only_mixed_folders():
    root = BookmarkFolder("Bookmarks", [
        BookmarkFolder("Projects", [BookmarkFolder("Docs", [link("D")])]),
    ])

    windows = plan(root, PlanOptions(add_title_tab=True))

    assert [w.title for w in windows] == ["Projects"]
    assert windows[0].tabs[0] == TitleTab("Projects")


def test_single_empty_window_is_not_pruned():
    windows = plan(BookmarkFolder("Bookmarks"), PlanOptions())

    assert len(windows) == 1
    assert windows[0].tabs == []


def test_all_empty_tree_with_omit_empty_windows():
    windows = plan(BookmarkFolder("Bookmarks"), PlanOptions(omit_empty_windows=True))
    assert windows == []


def test_omit_root_forces_top_level_leaf_folders_into_windows():
    root = BookmarkFolder("Bookmarks", [
        BookmarkFolder("One", [link("A")]),
        BookmarkFolder("Empty"),
        BookmarkFolder("Outer", [BookmarkFolder("Inner", [link("B")])]),
    ])

    windows = plan(root, PlanOptions(omit_root=True))

    assert [w.title for w in windows] == ["One", "Empty", "Outer"]
    assert windows[0].tabs == [Link("A", "https://a")]
    assert windows[1].tabs == []
    # forcing does not reach the second level
    assert windows[2].tabs == [TabGroup("Inner", [Link("B", "https://b")])]


def test_omit_root_keeps_root_links():
    root = BookmarkFolder("Bookmarks", [link("A"), BookmarkFolder("One", [link("B")])])

    windows = plan(root, PlanOptions(omit_root=True))

    assert [w.title for w in windows] == ["Bookmarks", "One"]
    assert windows[0].tabs == [Link("A", "https://a")]


def test_omit_empty_windows_respects_title_tab_threshold():
    root = BookmarkFolder("Bookmarks", [
        BookmarkFolder("One", [link("A")]),
        BookmarkFolder("Empty"),
    ])
    options = PlanOptions(omit_root=True, add_title_tab=True, omit_empty_windows=True)

    windows = plan(root, options)

    assert [w.title for w in windows] == ["One"]
    assert all(len(w.tabs) > 1 for w in windows)


def test_untitled_folder_window_defaults_to_new_window():
    root = BookmarkFolder("Bookmarks", [
        BookmarkFolder("", [BookmarkFolder("Sub", [link("A")])]),
    ])

    windows = plan(root, PlanOptions(add_title_tab=True))

    assert windows[0].title == "New Window"
    assert windows[0].tabs[0] == TitleTab("New Window")


def test_plan_does_not_modify_tree():
    inner = BookmarkFolder("Tools[red]", [link("X")])
    root = BookmarkFolder("Bookmarks", [inner])

    plan(root, PlanOptions(add_title_tab=True))

    assert inner.title == "Tools[red]"
    assert root.children == [inner]


def test_options_from_dict_accepts_camel_case():
    options = PlanOptions.from_dict({"omitRoot": True, "addTitleTab": 1, "unknown": True})

    assert options == PlanOptions(omit_root=True, add_title_tab=True)
    assert options.empty_threshold == 1
    assert PlanOptions.from_dict(None) == PlanOptions()
