"""CLI entry point for paperstore."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from paperstore.commands import DataCommands
from paperstore.config import StoreSettings, resolve_store_root
from paperstore.storage import DataFileStore, StoreError

logger = logging.getLogger(__name__)


def build_commands(root: Optional[str] = None) -> DataCommands:
    """Build the command layer over the configured store root.

    Args:
        root: Explicit store root; falls back to PAPERSTORE_ settings
    """
    store_root = Path(root) if root else resolve_store_root(StoreSettings())
    return DataCommands(DataFileStore(store_root))


def serve(root: Optional[str], transport: str = "stdio") -> None:
    """Start MCP server for a store root.

    Args:
        root: Explicit store root, or None for the configured default
        transport: Transport protocol (stdio or sse)
    """
    # Import here to avoid loading MCP unless needed
    from paperstore.server import create_mcp_server

    from typing import cast, Literal

    store_root = Path(root) if root else resolve_store_root(StoreSettings())
    logger.info(f"Serving {store_root} via {transport}")
    mcp = create_mcp_server(store_root)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def run_command(args: argparse.Namespace) -> None:
    """Dispatch a store subcommand, printing its result."""
    commands = build_commands(args.root)

    if args.command == "copy":
        print(commands.copy_file_to_data(args.source))
    elif args.command == "ingest":
        print(commands.copy_html_with_images(args.source))
    elif args.command == "import":
        print(commands.import_document(args.source))
    elif args.command == "read":
        if args.binary:
            print(commands.read_data_file_binary(args.name))
        else:
            sys.stdout.write(commands.read_data_file(args.name))
    elif args.command == "write":
        content = args.content if args.content is not None else sys.stdin.read()
        commands.write_data_file(args.name, content)
    elif args.command == "ls":
        for name in commands.list_data_files():
            print(name)
    elif args.command == "exists":
        found = commands.check_data_file_exists(args.name)
        print("true" if found else "false")
        if not found:
            sys.exit(1)
    elif args.command == "rm":
        commands.delete_data_file(args.name)
    elif args.command == "root":
        print(commands.get_data_dir_path())


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="paperstore",
        description="paperstore - sandboxed data store for a document reader",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Store root directory (default: PAPERSTORE_DATA_DIR or platform data dir)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every copied and skipped asset",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # copy command
    copy_parser = subparsers.add_parser(
        "copy",
        help="Copy a file into the store under its own name",
    )
    copy_parser.add_argument("source", help="Path of the file to copy")

    # ingest command
    ingest_parser = subparsers.add_parser(
        "ingest",
        help="Copy an HTML file along with its local images",
    )
    ingest_parser.add_argument("source", help="Path of the HTML file")

    # import command
    import_parser = subparsers.add_parser(
        "import",
        help="Copy a document, choosing the ingester by file type",
    )
    import_parser.add_argument("source", help="Path of the document")

    # read command
    read_parser = subparsers.add_parser(
        "read",
        help="Print a stored file",
    )
    read_parser.add_argument("name", help="Name relative to the store root")
    read_parser.add_argument(
        "--binary",
        action="store_true",
        help="Print the file base64-encoded",
    )

    # write command
    write_parser = subparsers.add_parser(
        "write",
        help="Write text to a stored file",
    )
    write_parser.add_argument("name", help="Name relative to the store root")
    write_parser.add_argument(
        "content",
        nargs="?",
        default=None,
        help="Text to write (default: read from stdin)",
    )

    # ls command
    subparsers.add_parser(
        "ls",
        help="List every stored file",
    )

    # exists command
    exists_parser = subparsers.add_parser(
        "exists",
        help="Check whether a stored file exists",
    )
    exists_parser.add_argument("name", help="Name relative to the store root")

    # rm command
    rm_parser = subparsers.add_parser(
        "rm",
        help="Delete a stored file",
    )
    rm_parser.add_argument("name", help="Name relative to the store root")

    # root command
    subparsers.add_parser(
        "root",
        help="Print the store root path",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for the store",
    )
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "serve":
        serve(args.root, args.transport)
        return

    try:
        run_command(args)
    except StoreError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
