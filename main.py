#!/usr/bin/env python3
"""
Bookmark Windows Tool

Preview or open a bookmark HTML export as browser windows, tabs and tab
groups in Zen Browser.
"""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from bookmark_windows import (
    BookmarkFileError,
    Colors,
    HostError,
    PlanOptions,
    SessionStoreHost,
    WindowPlan,
    execute,
    plan,
    read_bookmarks_file,
    render_preview,
    setup_logging,
)
from bookmark_windows import zen_profile


def ask_yes_no(question: str, default: bool = False) -> bool:
    """Ask a yes/no question, Enter keeps the default."""
    hint = "Y/n" if default else "y/N"
    answer = input(f"{question} ({hint}): ").strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes")


def ask_options() -> PlanOptions:
    """Collect planning options from the user."""
    print()
    return PlanOptions(
        omit_root=ask_yes_no("Open every top-level folder as its own window?"),
        add_title_tab=ask_yes_no("Add a title tab naming each window?"),
        omit_empty_windows=ask_yes_no("Skip windows without tabs?"),
    )


def load_plans() -> Optional[List[WindowPlan]]:
    """Ask for a bookmark file and options, return the window plans."""
    file_input = input("\nBookmark HTML file: ").strip().strip("'\"")
    if not file_input:
        print(f"{Colors.RED}No file given.{Colors.RESET}")
        return None

    try:
        root = read_bookmarks_file(Path(file_input).expanduser())
    except BookmarkFileError as e:
        print(f"\n{Colors.RED}Error:{Colors.RESET} {e}")
        return None

    return plan(root, ask_options())


def wait_for_zen_closed():
    """Check if Zen is running and wait for user to close it."""
    while zen_profile.is_zen_running():
        print(f"\n{Colors.RED}Zen Browser is currently running!{Colors.RESET}")
        print("Please close Zen Browser and press Enter to continue...")
        input()
    print(f"{Colors.GREEN}Zen Browser is closed.{Colors.RESET}")


def get_profile() -> Optional[Path]:
    """Find the Zen profile or tell the user it is missing."""
    profile_path = zen_profile.find_zen_profile()
    if not profile_path:
        print(f"{Colors.RED}Zen profile not found.{Colors.RESET}")
    return profile_path


def format_timestamp(ts: str) -> str:
    """YYYYMMDD_HHMMSS[-N] -> YYYY-MM-DD HH:MM:SS[ #N]"""
    stamp, _, counter = ts.partition("-")
    text = f"{stamp[:4]}-{stamp[4:6]}-{stamp[6:8]} {stamp[9:11]}:{stamp[11:13]}:{stamp[13:15]}"
    return f"{text} #{counter}" if counter else text


def print_header():
    """Print application header."""
    print()
    print("=" * 60)
    print(f"{Colors.BOLD}Bookmark Windows Tool{Colors.RESET}")
    print("=" * 60)


def print_menu():
    """Print main menu."""
    print()
    print("Choose an option:")
    print()
    print(f"  {Colors.CYAN}1{Colors.RESET}. Preview windows for a bookmark file")
    print(f"  {Colors.CYAN}2{Colors.RESET}. Open bookmark file in Zen Browser")
    print()
    print(f"  {Colors.YELLOW}3{Colors.RESET}. Restore Zen from backup")
    print()
    print(f"  {Colors.GREY}0{Colors.RESET}. Exit")
    print()


def preview_bookmarks():
    """Show the windows a bookmark file would open."""
    print()
    print("-" * 60)
    print("Preview")
    print("-" * 60)

    plans = load_plans()
    if plans is None:
        return

    print()
    if not plans:
        print(f"{Colors.YELLOW}Nothing to open.{Colors.RESET}")
        return
    print(render_preview(plans), end="")


def process_bookmarks():
    """Open a bookmark file as windows in Zen Browser."""
    print()
    print("-" * 60)
    print("Open in Zen Browser")
    print("-" * 60)

    profile_path = get_profile()
    if not profile_path:
        return

    plans = load_plans()
    if plans is None:
        return
    if not plans:
        print(f"{Colors.YELLOW}Nothing to open.{Colors.RESET}")
        return

    wait_for_zen_closed()

    host = SessionStoreHost()
    try:
        asyncio.run(execute(plans, host))
        timestamp = zen_profile.write_windows_to_profile(profile_path, host)
    except (HostError, FileNotFoundError, ValueError) as e:
        print(f"\n{Colors.RED}Error:{Colors.RESET} {e}")
        return

    print(f"\n{Colors.GREEN}Added {len(plans)} windows!{Colors.RESET}")
    print(f"Backup taken: {format_timestamp(timestamp)}")
    print("Now open Zen Browser to see the new windows.")
    sys.exit(0)


def restore_backup_menu():
    """Restore Zen session files from backup."""
    print()
    print("-" * 60)
    print("Restore from Backup")
    print("-" * 60)

    profile_path = get_profile()
    if not profile_path:
        return

    timestamps = zen_profile.get_backup_timestamps(profile_path)
    if not timestamps:
        print(f"\n{Colors.YELLOW}No backups found.{Colors.RESET}")
        return

    print(f"\nAvailable backups ({len(timestamps)}):")
    for i, ts in enumerate(timestamps, 1):
        marker = f"{Colors.GREEN}(latest){Colors.RESET}" if i == 1 else ""
        print(f"  {Colors.CYAN}{i}{Colors.RESET}. {format_timestamp(ts)} {marker}")

    print()
    choice = input("Select backup number (Enter for latest): ").strip()

    if choice == "":
        selected_ts = timestamps[0]
    else:
        try:
            idx = int(choice) - 1
        except ValueError:
            print(f"{Colors.RED}Invalid input.{Colors.RESET}")
            return
        if not 0 <= idx < len(timestamps):
            print(f"{Colors.RED}Invalid number.{Colors.RESET}")
            return
        selected_ts = timestamps[idx]

    wait_for_zen_closed()

    print(f"\nRestoring from backup {selected_ts}...")
    if zen_profile.restore_from_backup(profile_path, selected_ts):
        print(f"\n{Colors.GREEN}Restore completed!{Colors.RESET}")
        print("You can now open Zen Browser.")
        sys.exit(0)
    else:
        print(f"\n{Colors.RED}Restore failed.{Colors.RESET}")


def main():
    """Main entry point."""
    setup_logging(verbose="-v" in sys.argv[1:])
    print_header()

    while True:
        print_menu()

        choice = input("Select option: ").strip()

        if choice == "1":
            preview_bookmarks()
        elif choice == "2":
            process_bookmarks()
        elif choice == "3":
            restore_backup_menu()
        elif choice == "0" or choice.lower() == "q":
            print("\nBye!")
            sys.exit(0)
        else:
            print(f"\n{Colors.RED}Invalid option.{Colors.RESET}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(0)
