"""Command-line entry point for Resume Insight.

Examples:
  resume-insight analyze resume.pdf
  resume-insight analyze resume.docx --heuristic-only
  resume-insight suggest resume.pdf
  resume-insight compare resume.pdf --job-file posting.txt

Output: JSON for analyze/compare, plain text for suggest.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from resume_insight.analysis.generative import GenerativeAnalyzer
from resume_insight.cv_pipeline.pipeline import build_pipeline, run_analysis_pipeline
from resume_insight.cv_pipeline.text_extractor import extract_text, resolve_media_type
from resume_insight.errors import ExtractionError, GenerativeServiceError
from resume_insight.generation.generation_service import get_text_generator
from resume_insight.schemas.analysis import Failed


def _run(coro):
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _read_resume_text(path: Path) -> str:
    return extract_text(path.read_bytes(), resolve_media_type("", path.name), path.name)


def _require_generative() -> GenerativeAnalyzer:
    generator = get_text_generator()
    if generator is None:
        raise GenerativeServiceError("OPENAI_API_KEY is not set. Add it to your .env file.")
    return GenerativeAnalyzer(generator)


def cmd_analyze(args: argparse.Namespace) -> int:
    path = Path(args.file)
    outcome = run_analysis_pipeline(
        path.read_bytes(),
        path.name,
        pipeline=build_pipeline(use_generative=not args.heuristic_only),
    )
    if isinstance(outcome, Failed):
        print(f"Analysis failed: {outcome.reason}", file=sys.stderr)
        return 1
    print(outcome.analysis.model_dump_json(indent=2, exclude_none=True))
    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    text = _read_resume_text(Path(args.file))
    print(_run(_require_generative().suggest_improvements(text)))
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    text = _read_resume_text(Path(args.file))
    job_description = Path(args.job_file).read_text(encoding="utf-8")
    comparison = _run(_require_generative().compare_to_job(text, job_description))
    print(json.dumps(comparison.model_dump(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resume-insight", description="Analyze resumes (PDF/DOCX)")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Extract and analyze a resume, print the analysis as JSON")
    analyze.add_argument("file", help="Resume file (.pdf or .docx)")
    analyze.add_argument("--heuristic-only", action="store_true", help="Skip the generative service")
    analyze.set_defaults(func=cmd_analyze)

    suggest = sub.add_parser("suggest", help="Ask the generative service for improvement suggestions")
    suggest.add_argument("file", help="Resume file (.pdf or .docx)")
    suggest.set_defaults(func=cmd_suggest)

    compare = sub.add_parser("compare", help="Compare a resume against a job description")
    compare.add_argument("file", help="Resume file (.pdf or .docx)")
    compare.add_argument("--job-file", required=True, help="Text file with the job description")
    compare.set_defaults(func=cmd_compare)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ExtractionError, GenerativeServiceError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
