"""Command-line front door for pathtree.

Reads newline-delimited paths, builds the tree, applies expand/select state
from options, then prints the visible rows or the raw node map.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .constants import FLATTENED_PREFIX
from .file_tree_model import ReservedPathError
from .runtime import FileTree, FileTreeOptions, FileTreeStateConfig
from .runtime import config as app_config
from .tree_pane import TreeRow


def read_paths(source: str | None) -> list[str]:
    """Read non-empty stripped lines from ``source`` or stdin when ``None``/``-``."""
    if source is None or source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        text = path.read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def format_row(row: TreeRow) -> str:
    if row.is_folder:
        marker = "- " if row.is_expanded else "+ "
    else:
        marker = "  "
    suffix = " *" if row.is_selected else ""
    return f"{'  ' * row.depth}{marker}{row.name}{suffix}"


def all_folder_paths(file_tree: FileTree) -> list[str]:
    return [
        path
        for path in file_tree.path_to_id
        if not path.startswith(FLATTENED_PREFIX) and file_tree.data[path].is_folder
    ]


def main() -> None:
    """Parse CLI arguments and print the resulting tree.

    Flattening and the root name default to the persisted config values when
    not given; ``--save-defaults`` stores the given ones first.
    """
    parser = argparse.ArgumentParser(description="Print a file tree built from a list of paths.")
    parser.add_argument("paths_file", nargs="?", default=None, help="File with one path per line. Defaults to stdin.")
    parser.add_argument(
        "--flatten",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Collapse single-child directory chains into one row.",
    )
    parser.add_argument(
        "--root-name",
        default=None,
        help="Display name of the root node. Rows start below the root, so only --json output shows it.",
    )
    parser.add_argument("--expand", action="append", default=[], metavar="PATH", help="Expand PATH and its ancestors.")
    parser.add_argument("--expand-all", action="store_true", help="Expand every directory.")
    parser.add_argument("--select", action="append", default=[], metavar="PATH", help="Mark PATH as selected.")
    parser.add_argument("--json", action="store_true", help="Print the node map as JSON instead of rows.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given --flatten/--no-flatten and --root-name values as defaults for later runs.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.save_defaults:
        if args.flatten is not None:
            app_config.save_flatten_empty_directories(args.flatten)
        if args.root_name is not None:
            app_config.save_root_name(args.root_name)

    paths = read_paths(args.paths_file)
    flatten = args.flatten if args.flatten is not None else app_config.load_flatten_empty_directories()
    options = FileTreeOptions.from_config(paths, flatten_empty_directories=flatten)
    if args.root_name is not None:
        options.root_name = args.root_name
    try:
        file_tree = FileTree(
            options,
            FileTreeStateConfig(default_expanded_items=args.expand, default_selected_items=args.select),
        )
    except ReservedPathError as exc:
        raise SystemExit(str(exc)) from exc

    if args.expand_all:
        file_tree.set_expanded_items(all_folder_paths(file_tree))

    if args.json:
        data = {node_id: node.to_dict() for node_id, node in file_tree.data.items()}
        sys.stdout.write(json.dumps(data, indent=2) + "\n")
        return

    for row in file_tree.get_items():
        sys.stdout.write(format_row(row) + "\n")


if __name__ == "__main__":
    main()
