import sys
import logging
import argparse
from typing import List, Optional

from atomlab import constants as C
from atomlab.catalog import load_catalog
from atomlab.entities import EntityKind
from atomlab.info import describe_entity
from atomlab.lab_session import LabSession
from atomlab.locales import LANGUAGES
from atomlab.validation import CatalogError

logger = logging.getLogger("atomlab")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render atoms, molecules and reaction animations.")
    parser.add_argument("--list", action="store_true", help="List catalog entries and exit")
    parser.add_argument("--catalog", type=str, default=None, help="Custom catalog JSON file")
    parser.add_argument("--entity", type=str, default=None, help="Id of the element, molecule or reaction to show")
    parser.add_argument("--level", type=float, default=C.DEFAULT_LEVEL, help=f"Thermal slider level ({C.LEVEL_MIN:g}-{C.LEVEL_MAX:g})")
    parser.add_argument("--paused", action="store_true", help="Render the static snapshot")
    parser.add_argument("--time", type=float, default=0.0, help="Presentation time of the PNG frame")
    parser.add_argument("--language", type=str, default=C.DEFAULT_LANGUAGE,
                        help="Interface language (" + ", ".join(LANGUAGES) + ")")
    parser.add_argument("--export-png", type=str, default=None, help="Path to export a PNG frame")
    parser.add_argument("--export-gif", type=str, default=None, help="Path to export an animated GIF")
    parser.add_argument("--frames", type=int, default=48, help="Number of GIF frames")
    parser.add_argument("--fps", type=int, default=12, help="GIF frames per second")
    parser.add_argument("--log-level", type=str, default=C.LOGGING_LEVEL, help="Logging level")
    return parser


def print_listing(session: LabSession) -> None:
    for kind in EntityKind:
        for entity in session.catalog.by_kind(kind):
            print(f"{kind.value:<9} {entity.id:<15} {entity.name}")


def print_summary(session: LabSession, now: float) -> None:
    frame = session.evaluate(now)
    if frame.entity is None:
        print("Nothing selected.")
        return
    sheet = describe_entity(frame.entity, session.translate)
    print(f"{sheet.title} ({sheet.headline})")
    print(frame.status_text)
    if frame.phase is not None:
        print(f"phase: {frame.phase.value}")
    print(f"-- {sheet.section} --")
    for label, value in sheet.rows:
        print(f"  {label}: {value}")


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(asctime)s [%(levelname)s] %(message)s")

    try:
        catalog = load_catalog(args.catalog) if args.catalog else None
    except (OSError, ValueError) as e:
        # CatalogError is a ValueError, and so are JSON syntax errors
        logger.error(f"Failed to load catalog {args.catalog}: {e}")
        if isinstance(e, CatalogError):
            for problem in e.problems:
                logger.error(f"  {problem}")
        return 1

    session = LabSession(catalog=catalog, language=args.language, level=args.level,
                         animated=not args.paused)

    if args.list:
        print_listing(session)
        return 0

    if args.entity and not session.select(args.entity):
        print(f"[ERROR] Unknown entity '{args.entity}'. Use --list to see the catalog.")
        return 2

    print_summary(session, args.time)

    if args.export_png or args.export_gif:
        # matplotlib is only needed for exports
        from visual.export_tools import export_animation_gif, save_frame_png

        if args.export_png:
            save_frame_png(session, args.export_png, now=args.time)
            print(f"[INFO] Frame exported to {args.export_png}")
        if args.export_gif:
            try:
                export_animation_gif(session, args.export_gif, n_frames=args.frames, fps=args.fps, start=args.time)
                print(f"[INFO] GIF exported to {args.export_gif}")
            except (RuntimeError, ValueError) as e:
                print(f"[WARN] GIF export failed: {e}")
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
