#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
main.py - Command line entry point for Zeka

Runs the Zeka commands from a terminal:

    zeka note | reference | sketch      create a new object
    zeka follow FILE OFFSET             open the link at OFFSET in FILE
    zeka link                           pick an object and print a link to it
    zeka list                           list every object in the repository
    zeka links FILE                     list and resolve every link in FILE
"""

import argparse
import logging
import sys
from typing import List, Optional

from .commands import ConsoleEditor, run_command
from .core.catalog import list_objects
from .core.config import Config, require_repository
from .core.errors import ZekaError
from .linking.grammar import find_links, format_link
from .linking.resolver import resolve

# Subcommands running a registered command, and the command they run
EDITOR_COMMANDS = {
    "note": "create_note",
    "reference": "create_reference",
    "sketch": "create_sketch",
    "follow": "follow_link",
    "link": "create_link",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="zeka", description="Manage a Zeka (Zettelkasten) repository")

    parser.add_argument("--repository", type=str, help="Path to the Zeka repository")
    parser.add_argument("--config", type=str, help="Path to a YAML configuration file")
    parser.add_argument("--editor", type=str, help="Command used to open files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("note", help="Create a note")
    subparsers.add_parser("reference", help="Create a reference (book, paper, movie, ...)")
    subparsers.add_parser("sketch", help="Create a sketch")

    follow = subparsers.add_parser("follow", help="Open the object linked at a position in a file")
    follow.add_argument("file", help="File containing the link")
    follow.add_argument("offset", type=int, help="Character offset of the link in the file")

    subparsers.add_parser("link", help="Pick an object and print a link to it")
    subparsers.add_parser("list", help="List the objects in the repository")

    links = subparsers.add_parser("links", help="List and resolve the links in a file")
    links.add_argument("file", help="File to read links from")

    return parser


def read_document(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def list_catalog(repo_root: str) -> int:
    """Print every object in the repository. Returns the exit status."""
    for entry in list_objects(repo_root):
        line = f"{entry.source_type.value:<10} {entry.id}  {entry.label}"
        if entry.description:
            line += f"  ({entry.description})"
        print(line)
    return 0


def list_links(repo_root: str, path: str) -> int:
    """
    Print every link in a file and the file it resolves to.

    Returns:
        0 if every link resolved, 1 otherwise
    """
    status = 0
    for link in find_links(read_document(path)):
        text = format_link(link.type, link.id, link.extra)
        try:
            print(f"{text} -> {resolve(repo_root, link)}")
        except ZekaError as e:
            print(f"{text} -> {e}")
            status = 1
    return status


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Zeka command line tool.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit status
    """
    args = build_parser().parse_args(argv)

    try:
        config = Config(config_file=args.config, args=args)
    except ZekaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config["verbose"] else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command in EDITOR_COMMANDS:
        document, offset = "", 0
        if args.command == "follow":
            try:
                document, offset = read_document(args.file), args.offset
            except OSError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1

        editor = ConsoleEditor(config["editor"] or "", document, offset)
        run_command(EDITOR_COMMANDS[args.command], config, editor)
        return 1 if editor.errors else 0

    try:
        repo_root = require_repository(config.repository())
        if args.command == "list":
            return list_catalog(repo_root)
        return list_links(repo_root, args.file)
    except (ZekaError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
