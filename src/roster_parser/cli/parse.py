"""CLI entrypoint for parsing roster markup files."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path

from jsonschema import ValidationError

from roster_parser import RosterParser
from roster_parser.export import document_to_dict, to_bbcode, to_csv, to_markdown
from roster_parser.parser.engine import DEFAULT_TITLE
from roster_parser.schemas import validate_output

FORMAT_EXTENSIONS = {"json": "json", "csv": "csv", "markdown": "md", "bbcode": "txt"}


def _render(document, fmt: str) -> str:
    if fmt == "csv":
        return to_csv(document.records)
    if fmt == "markdown":
        return to_markdown(document.records)
    if fmt == "bbcode":
        return to_bbcode(document)
    return json.dumps(document_to_dict(document), ensure_ascii=False, indent=2) + "\n"


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse forum roster markup to grouped records")
    parser.add_argument("--input", "-i", required=True, help="Path to roster text file, or - for stdin")
    parser.add_argument("--out", "-o", help="Path to output file (default: out/<format>/<name>.<ext>)")
    parser.add_argument("--out-dir", default="out", help="Base output directory (default: out)")
    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(FORMAT_EXTENSIONS),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--title", help="Fallback title when the markup carries no date (default: file name)")
    parser.add_argument("--day", help="Fallback roster day as YYYY-MM-DD (default: today)")
    parser.add_argument(
        "--report",
        "-r",
        nargs="?",
        const=True,
        default=True,
        help="Path to parse report JSON file (default: out/report/<name>_report.json)",
    )
    parser.add_argument("--no-report", action="store_true", help="Disable parse report generation")
    parser.add_argument(
        "--keep-order",
        action="store_true",
        help="Keep roster order inside groups instead of sorting by start time",
    )
    parser.add_argument(
        "--check-schema",
        action="store_true",
        help="Validate the JSON payload against the output schema before writing",
    )

    args = parser.parse_args()

    from_stdin = args.input == "-"
    input_path = Path(args.input)
    base_name = "roster" if from_stdin else input_path.stem
    out_dir = Path(args.out_dir)

    if args.out:
        output_path = Path(args.out)
    else:
        output_path = out_dir / args.format / f"{base_name}.{FORMAT_EXTENSIONS[args.format]}"

    if args.no_report:
        report_path = None
    elif args.report is True:
        report_path = out_dir / "report" / f"{base_name}_report.json"
    elif args.report:
        report_path = Path(args.report)
    else:
        report_path = None

    try:
        fallback_day = date.fromisoformat(args.day) if args.day else date.today()
    except ValueError:
        print(f"Error: Invalid --day (expected YYYY-MM-DD): {args.day}", file=sys.stderr)
        raise SystemExit(1)

    if from_stdin:
        raw = sys.stdin.read()
    else:
        if not input_path.exists():
            print(f"Error: Input file not found: {input_path}", file=sys.stderr)
            raise SystemExit(1)
        with open(input_path, "r", encoding="utf-8") as f:
            raw = f.read()

    roster_parser = RosterParser(
        source="<stdin>" if from_stdin else str(input_path),
        sort_by_start=not args.keep_order,
    )
    document = roster_parser.parse(
        raw,
        fallback_title=args.title or (DEFAULT_TITLE if from_stdin else base_name),
        fallback_day=fallback_day,
    )

    if args.check_schema:
        try:
            validate_output(document_to_dict(document))
        except ValidationError as e:
            print(f"Error: Output does not match schema: {e.message}", file=sys.stderr)
            raise SystemExit(1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(_render(document, args.format))

    print(f"Parsed {len(document.records)} records in {len(document.groups)} groups -> {output_path}")

    if report_path:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(asdict(roster_parser.report), f, ensure_ascii=False, indent=2)

        status = "CLEAN" if roster_parser.report.is_clean() else "ISSUES FOUND"
        print(f"Report: {status} -> {report_path}")

    print(f"\n{document.title}" + (f" ({document.date_note})" if document.date_note else ""))
    for group in document.groups:
        print(f"  {group.key}: {len(group)}")


if __name__ == "__main__":
    main()
