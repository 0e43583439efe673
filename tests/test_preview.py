from bookmark_windows.models import Link, TabGroup, TitleTab, WindowPlan
from bookmark_windows.preview import render_preview, truncate


def test_truncate():
    assert truncate("") == ""
    assert truncate(None) == ""
    assert truncate("exactly twenty chars") == "exactly twenty chars"
    assert truncate("a title longer than twenty") == "a title longer th..."


def test_render_group_with_count_and_truncated_titles():
    group = TabGroup(
        "Tools",
        [
            Link("Short", "https://a"),
            Link("A rather long page title", "https://b"),
            Link("Third", "https://c"),
        ],
        color="red",
        collapsed=True,
    )

    text = render_preview([WindowPlan("Work", [TitleTab("Work"), group, Link("Loose", "https://d")])])

    assert text == (
        "[window:Work]\n"
        '     [TITLE TAB: "Work"]\n'
        "     [group:Tools] (Color: red) (collapsed)\n"
        '          [ 3 tabs ("Short", "A rather long pag...", "Third") ]\n'
        '     [tab "Loose"]\n'
    )


def test_untitled_window_uses_position():
    text = render_preview([WindowPlan("A", []), WindowPlan("", [Link("x", "https://x")])])

    assert text.splitlines() == ["[window:A]", "[window: #2]", '     [tab "x"]']


def test_empty_plan_renders_nothing():
    assert render_preview([]) == ""
