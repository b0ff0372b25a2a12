import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QEventLoop

from src.core.scan_session import ScanSessionController, ScanStatus
from src.ui.controllers.scan_controller import ScanController
from src.ui.exporting import export_occurrences_csv, export_occurrences_json
from src.utils.i18n import strings


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="chinese-scan",
        description="Headless scan runner for Chinese Text Scanner",
    )
    p.add_argument("path", help="Code directory to scan")
    p.add_argument("--exclude", default="", help="Comma-separated exclusions, e.g. node_modules,dist")
    p.add_argument("--lang", choices=["en", "zh"], default="en")

    p.add_argument("--output-json", default="")
    p.add_argument("--output-csv", default="")
    p.add_argument("--quiet", action="store_true", help="Only print the summary line")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _print_grouped(controller: ScanSessionController) -> None:
    for view in controller.projection():
        print(f"{view.file_path} ({view.occurrence_count})")
        for occ in view.occurrences or ():
            print(f"  {occ.line}:{occ.column}  {occ.text}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    strings.set_language(args.lang)

    path = str(args.path or "").strip()
    if not path:
        print(strings.tr("err_no_directory"), file=sys.stderr)
        return 2
    path = os.path.abspath(path)
    if not os.path.isdir(path):
        print(f"Path is not a directory: {path}", file=sys.stderr)
        return 2

    app = QCoreApplication.instance() or QCoreApplication([])
    loop = QEventLoop()

    launcher = ScanController()
    controller = ScanSessionController(launcher, scan_path=path, exclude_patterns=args.exclude or "")

    def on_progress(_value: int, msg: str) -> None:
        if args.quiet:
            return
        print(f"... {msg}", file=sys.stderr)

    def on_session_changed(session) -> None:
        if not session.is_running:
            loop.quit()

    if hasattr(launcher, "progress_updated"):
        launcher.progress_updated.connect(on_progress)
    controller.session_changed.connect(on_session_changed)

    if not controller.start_scan():
        print(controller.display_error() or strings.tr("err_no_directory"), file=sys.stderr)
        return 2
    # A launcher may report synchronously; only spin the loop while still running.
    if controller.session.is_running:
        loop.exec()

    session = controller.session
    if session.status is ScanStatus.FAILED:
        print(session.error_message, file=sys.stderr)
        return 1

    if not args.quiet:
        _print_grouped(controller)
    summary = strings.tr("lbl_summary").format(occurrences=len(session.results), files=len(session.grouping))
    print(summary)

    if args.output_json:
        out_json = os.path.abspath(args.output_json)
        count = export_occurrences_json(
            occurrences=session.results, out_path=out_json, path=path, exclude=session.exclude_patterns
        )
        print(f"Saved JSON: {out_json} (occurrences={count})")

    if args.output_csv:
        out_csv = os.path.abspath(args.output_csv)
        rows = export_occurrences_csv(occurrences=session.results, out_path=out_csv)
        print(f"Saved CSV: {out_csv} (rows={rows})")

    # Keep app reference alive until end of function.
    _ = app
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
