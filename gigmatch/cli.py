"""Command-line entry point for one-off gig matching."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from gigmatch import __version__
from gigmatch.config import load_settings
from gigmatch.errors import GigMatchError
from gigmatch.log import get_logger

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gigmatch", description="Rank gig postings against a free-text request")
    p.add_argument("text", help="What you are looking for, e.g. 'React frontend developer under 500000'")
    p.add_argument("--skills", help="Comma or space separated skills, or 'any'")
    p.add_argument("--experience", help="Experience level, e.g. Senior, Mid-Level, Junior")
    p.add_argument("--location", help="Preferred location, e.g. Remote")
    p.add_argument("--job-type", help="Job type, e.g. Full-time")
    p.add_argument("--salary", help="Salary constraint text, e.g. 'between 500000 to 900000'")
    p.add_argument("--source", choices=["sample", "file", "api"], help="Override the configured job source")
    p.add_argument("--jobs-file", help="YAML/JSON file of postings (implies --source file)")
    p.add_argument("--api-url", help="Marketplace backend base URL (implies --source api)")
    p.add_argument("--report", action="store_true", help="Also write a Markdown report under reports/")
    p.add_argument("--json", action="store_true", help="Print the full response payload as JSON")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    payload = {
        "textDescription": args.text,
        "skills": args.skills,
        "experienceLevel": args.experience,
        "location": args.location,
        "jobType": args.job_type,
        "salaryRange": args.salary,
    }

    from gigmatch.matcher import run

    try:
        settings = load_settings()
        if args.jobs_file:
            settings.source, settings.jobs_file = "file", Path(args.jobs_file)
        elif args.api_url:
            settings.source, settings.api_url = "api", args.api_url.rstrip("/")
        elif args.source:
            settings.source = args.source
        result = run(payload, settings=settings, write_report=args.report)
    except GigMatchError as exc:
        log.error("Match failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    response = result["response"]
    if args.json:
        print(json.dumps(response, indent=2, ensure_ascii=False))
    else:
        print(response["message"])
        for job in response["matchedJobs"]:
            print(f"  {job['matchPercentage']:>3}%  {job['title']}  —  {job['whyGoodFit']}")
    if result["report_path"]:
        print(f"Report: {result['report_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
