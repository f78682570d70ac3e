from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .config import config_sha256, load_config
from .dry_run import run_dry_run
from .engine import classify_posts
from .errors import ConfigError, ExportError, FeedError
from .export_excel import export_classified_workbook
from .feed import load_posts
from .run_log import RunLogger
from .search import search_written
from .summary import format_summary, summarize


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="activity_posts")

    subparsers = parser.add_subparsers(dest="command", required=True)

    dry = subparsers.add_parser(
        "dry-run",
        help="Classify the built-in sample feed as a smoke check.",
    )
    dry.add_argument(
        "--config",
        help="Path to YAML config file (defaults apply when omitted).",
    )
    dry.set_defaults(_handler=_cmd_dry_run)

    run = subparsers.add_parser(
        "classify",
        help="Classify a feed file, write a run log and workbook, print a summary.",
    )
    run.add_argument(
        "--input",
        required=True,
        help="Feed file: JSON array, {'posts': [...]} object, or .jsonl.",
    )
    run.add_argument(
        "--out",
        required=True,
        help="Output directory for the run log and workbook.",
    )
    run.add_argument(
        "--config",
        help="Path to YAML config file (defaults apply when omitted).",
    )
    run.set_defaults(_handler=_cmd_classify)

    search = subparsers.add_parser(
        "search",
        help="Search user-written posts and print matching table rows.",
    )
    search.add_argument("--input", required=True, help="Feed file to search.")
    search.add_argument("--query", required=True, help="Case-insensitive search text.")
    search.add_argument(
        "--config",
        help="Path to YAML config file (defaults apply when omitted).",
    )
    search.set_defaults(_handler=_cmd_search)

    return parser


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


def _cmd_dry_run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    result = run_dry_run(cfg)

    print(f"post_count={result.post_count}")
    for category, n in sorted(result.category_counts.items()):
        print(f"{category}={n}")
    print(f"written_count={result.written_count}")
    print("example_record=")
    print(json.dumps(result.example_record, indent=2, ensure_ascii=False, sort_keys=True))

    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    log_path = out_dir / "run.log"
    with RunLogger.open(log_path, overwrite=True, command="classify") as log:
        log.info(
            "classify_command_started",
            input_path=str(args.input),
            config_path=str(args.config) if args.config else None,
            out_dir=str(out_dir),
        )

        try:
            cfg = load_config(args.config)
            log.info("config_loaded", config_hash=config_sha256(cfg))

            loaded = load_posts(args.input, feed=cfg.feed)
            log.info("feed_loaded", posts=len(loaded.posts), skipped=loaded.skipped)
            if loaded.skipped:
                log.warning("feed_items_skipped", skipped=loaded.skipped)

            records = classify_posts(loaded.posts, max_workers=cfg.batch.max_workers)
            summary = summarize(records, top_n=cfg.report.top_n)

            log.info(
                "posts_classified",
                posts=summary.total,
                categories=summary.category_counts,
                written_completed=summary.written_completed_count,
                distinct_activities=summary.distinct_activity_count,
            )
            if summary.invalid_time_count:
                log.warning("invalid_timestamps", count=summary.invalid_time_count)

            xlsx_path: Path | None = None
            if cfg.export.excel:
                xlsx_path = out_dir / cfg.export.filename
                log.info("export_excel_started", path=str(xlsx_path))
                export_classified_workbook(
                    records,
                    summary,
                    xlsx_path,
                    config=cfg,
                    source=str(args.input),
                )
                log.info("export_excel_completed", path=str(xlsx_path))

            print(format_summary(summary, percent_decimals=cfg.report.percent_decimals))
            if xlsx_path is not None:
                print(f"workbook={xlsx_path}")
            print(f"run_log={log_path}")

            log.info("classify_command_completed", posts=summary.total)
            return 0
        except Exception as e:
            log.exception("classify_command_failed", exc=e)
            raise


def _cmd_search(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    loaded = load_posts(args.input, feed=cfg.feed)
    records = classify_posts(loaded.posts, max_workers=cfg.batch.max_workers)

    result = search_written(records, args.query)
    print(f"search_count={result.count}")
    print(f"search_text={result.query}")
    for row in result.rows:
        print(row)

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        handler = getattr(args, "_handler")
        return int(handler(args))
    except ConfigError as e:
        _eprint(str(e))
        return 2
    except (FeedError, ExportError) as e:
        _eprint(str(e))
        return 3
    except KeyboardInterrupt:
        _eprint("Interrupted")
        return 130
    except Exception as e:
        _eprint(f"Unexpected error: {e}")
        return 1
