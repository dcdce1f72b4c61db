"""Command-line interface for go links.

Usage:
    golinks --shortcut <name> --url <url> [--description <desc>]
    golinks --list
    golinks --stats
    golinks --delete --shortcut <name>
    golinks --server [--host HOST] [--port PORT]
    golinks <shortcut>
"""

import argparse
import logging
import sys
import webbrowser

import uvicorn

from golinks import config, management, resolver
from golinks.errors import GoLinksError, StorageUnavailable
from golinks.main import create_app
from golinks.schemas import Link
from golinks.store import LinkStore

logger = logging.getLogger(__name__)

EXAMPLES = """
Examples:
  golinks --shortcut gh --url https://github.com --description "GitHub homepage"
  golinks --list
  golinks --delete --shortcut gh
  golinks --stats
  golinks --server
  golinks gh                                        Open the 'gh' shortcut
"""

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="golinks",
        description="Go Links CLI",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("target", nargs="?", help="Shortcut to open in the browser")
    parser.add_argument("-s", "--shortcut", help="Shortcut name")
    parser.add_argument("-u", "--url", help="Destination URL")
    parser.add_argument("--desc", "--description", dest="description", help="Optional description")
    parser.add_argument("-l", "--list", action="store_true", help="List all links")
    parser.add_argument("-d", "--delete", action="store_true", help="Delete the link given by --shortcut")
    parser.add_argument("--stats", action="store_true", help="Show statistics")
    parser.add_argument("--server", action="store_true", help="Start the web server")
    parser.add_argument("--host", default=None, help="Server bind address")
    parser.add_argument("--port", type=int, default=None, help="Server port")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser

def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."

def format_table(links: list[Link]) -> str:
    if not links:
        return "No links found."

    headers = ["Shortcut", "URL", "Description", "Clicks", "Created"]
    rows = [
        [
            link.shortcut,
            _truncate(link.url, 50),
            _truncate(link.description, 30) if link.description else "-",
            str(link.click_count),
            link.created_at.date().isoformat(),
        ]
        for link in links
    ]
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(len(headers))]

    def fmt(row: list[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row))

    lines = [fmt(headers), "-|-".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)

def format_stats(links: list[Link]) -> str:
    stats = management.compute_stats(links)
    most = stats.most_clicked
    most_text = f"{most.shortcut} ({most.click_count} clicks)" if most else "None"
    return "\n".join([
        "Statistics:",
        f"  Total Links: {stats.total_links}",
        f"  Total Clicks: {stats.total_clicks}",
        f"  Most Clicked: {most_text}",
    ])

def run_server(store: LinkStore, host: str, port: int, verbose: bool = False) -> None:
    logger.info("Starting go links server on %s:%s", host, port)
    logger.info("Management interface available at http://localhost:%s/_", port)
    uvicorn.run(create_app(store), host=host, port=port, log_level="debug" if verbose else "info")

def open_shortcut(store: LinkStore, shortcut: str) -> int:
    target = resolver.resolve(store, shortcut)
    if not target:
        print(f"✗ Shortcut not found: {shortcut}")
        return 1
    print(f"Opening: {target.url}")
    try:
        if not webbrowser.open(target.url):
            raise webbrowser.Error("no runnable browser found")
    except webbrowser.Error as exc:
        print(f"✗ Failed to open browser: {exc}")
        print(f"URL: {target.url}")
    return 0

def run(args: argparse.Namespace, store: LinkStore, parser: argparse.ArgumentParser) -> int:
    if args.server:
        run_server(
            store,
            args.host if args.host is not None else config.get_server_host(),
            args.port if args.port is not None else config.get_server_port(),
            verbose=args.verbose,
        )
        return 0

    if args.list:
        print(format_table(management.list_links(store)))
        return 0

    if args.stats:
        print(format_stats(management.list_links(store)))
        return 0

    if args.delete:
        if not args.shortcut:
            print("✗ --delete requires --shortcut")
            return 1
        if management.delete_link(store, args.shortcut):
            print(f"✓ Deleted link: {args.shortcut}")
            return 0
        print(f"✗ Link not found: {args.shortcut}")
        return 1

    if args.shortcut and args.url:
        try:
            management.add_link(store, args.shortcut, args.url, args.description)
        except GoLinksError as exc:
            print(f"✗ Error adding link: {exc}")
            return 1
        desc = f" ({args.description})" if args.description else ""
        print(f"✓ Added link: {args.shortcut} -> {args.url}{desc}")
        return 0

    if args.target:
        return open_shortcut(store, args.target)

    print("Invalid arguments. Use --help for usage information.")
    parser.print_help()
    return 1

def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging("DEBUG" if args.verbose else None)

    store = LinkStore(config.get_db_path(), timeout=config.get_db_timeout())
    try:
        store.init()
    except StorageUnavailable as exc:
        print(f"✗ Cannot open link database: {exc}")
        return 1

    try:
        return run(args, store, parser)
    finally:
        store.close()

if __name__ == "__main__":
    sys.exit(main())
