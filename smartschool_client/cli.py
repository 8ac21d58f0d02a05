"""
Command-line interface for the Smartschool client.

    python -m smartschool_client --url https://myschool.smartschool.be --user jdoe recent
"""

import argparse
import getpass
import os
import sys
from pathlib import Path
from uuid import UUID

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

from smartschool_client import mydoc
from smartschool_client.auth import login
from smartschool_client.errors import SmartschoolError
from smartschool_client.logging_setup import _COLORLOG_AVAILABLE, log, setup_logging
from smartschool_client.network import build_transport

DEFAULT_URL = os.environ.get("SMARTSCHOOL_URL", "")
DEFAULT_USER = os.environ.get("SMARTSCHOOL_USER", "")
DEFAULT_PASSWORD = os.environ.get("SMARTSCHOOL_PASSWORD", "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartschool-client",
        description="Browse and download your Smartschool documents.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "URL, user and password can also be provided via the SMARTSCHOOL_URL,\n"
            "SMARTSCHOOL_USER and SMARTSCHOOL_PASSWORD env vars.  If the password\n"
            "is not supplied you will be prompted for it."
        ),
    )
    parser.add_argument(
        "--url", default=DEFAULT_URL,
        help="Platform URL, e.g. https://myschool.smartschool.be",
    )
    parser.add_argument("--user", default=DEFAULT_USER, help="Login name")
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Password (overrides SMARTSCHOOL_PASSWORD env var)",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("recent", help="List recently modified files")

    ls = sub.add_parser("ls", help="List a folder (default: the root folder)")
    ls.add_argument(
        "folder", nargs="?", default=mydoc.ROOT_FOLDER,
        help="Folder UUID, 'favourites' or 'trashed'",
    )

    dl = sub.add_parser("download", help="Download one file")
    dl.add_argument("file_id", type=UUID)
    dl.add_argument("-o", "--output", type=Path, help="Destination path (default: file name)")

    dlf = sub.add_parser("download-folder", help="Download every file of a folder")
    dlf.add_argument("folder", help="Folder UUID, 'favourites' or 'trashed'")
    dlf.add_argument("-o", "--output", type=Path, default=Path("."), help="Destination directory")
    return parser


def _cmd_recent(session, args) -> None:
    files = mydoc.get_recent_files(session)
    if not files:
        print("No recently modified files...")
    for f in files:
        print(f"{f.date_changed:%Y-%m-%d %H:%M}  {f.id}  {f.name}")


def _cmd_ls(session, args) -> None:
    files, folders = mydoc.get_folder_contents(session, args.folder)
    for folder in folders:
        print(f"d  {folder.id}  {folder.name}/")
    for f in files:
        print(f"-  {f.id}  {f.name}  ({f.current_revision.file_size} bytes)")


def _cmd_download(session, args) -> int:
    output = args.output
    if output is None:
        revisions = mydoc.get_file_revisions(session, args.file_id)
        if not revisions:
            log.error("File %s has no revisions to name the download after; pass -o PATH",
                      args.file_id)
            return 1
        output = Path(max(revisions, key=lambda r: r.date).file_name)
    content = mydoc.download_file(session, args.file_id)
    output.write_bytes(content)
    log.info("Saved %s (%d bytes)", output, len(content))


def _cmd_download_folder(session, args) -> None:
    files, _ = mydoc.get_folder_contents(session, args.folder)
    args.output.mkdir(parents=True, exist_ok=True)
    iterable = _tqdm(files, unit="file") if _TQDM_AVAILABLE else files
    for f in iterable:
        target = args.output / f.current_revision.file_name
        target.write_bytes(mydoc.download_file(session, f.id))
        log.debug("Saved %s", target)
    log.info("Downloaded %d file(s) to %s", len(files), args.output)


_COMMANDS = {
    "recent": _cmd_recent,
    "ls": _cmd_ls,
    "download": _cmd_download,
    "download-folder": _cmd_download_folder,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    if not _COLORLOG_AVAILABLE:
        log.debug("Tip: install colorlog for colored output   (pip install colorlog)")

    if not args.url or not args.user:
        log.error("Both --url and --user are required (or SMARTSCHOOL_URL / SMARTSCHOOL_USER)")
        return 2
    if not args.password:
        args.password = getpass.getpass("Smartschool password: ")

    try:
        with login(
            args.url, args.user, args.password,
            transport=build_transport(verify_ssl=args.verify_ssl),
        ) as session:
            code = _COMMANDS[args.command](session, args)
    except SmartschoolError as exc:
        log.error("%s: %s", type(exc).__name__, exc.message)
        return 1
    return code or 0


if __name__ == "__main__":
    sys.exit(main())
