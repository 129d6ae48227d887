"""Batch entry point for the matching core.

Usage:
    python -m funding_matcher.main classify programs.json
    python -m funding_matcher.main match organization.json programs.json

Input files hold program records (a list, or a single object) and one
organization record, with the platform's camelCase keys. Results are printed
to stdout as JSON; logs go to stderr.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .classifier import ClassifierRules, classify, classify_extended, load_rule_tables
from .config import load_config
from .models import FundingProgram, Organization
from .relevance import relevance
from .semantic import semantic_match

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)]
)
logger = logging.getLogger(__name__)


def _read_json(path: str) -> Any:
    with open(Path(path), "r", encoding="utf-8") as f:
        return json.load(f)


def _read_programs(path: str) -> list[FundingProgram]:
    data = _read_json(path)
    records = data if isinstance(data, list) else [data]
    programs = []
    for index, record in enumerate(records):
        try:
            programs.append(FundingProgram.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping program #{index}: {e}")
    return programs


def run_classify(programs: list[FundingProgram], rules: ClassifierRules) -> list[dict]:
    """Classify every program; output keeps input order."""
    results = []
    for program in programs:
        result = classify_extended(program.title, program.description, program.ministry, rules)
        results.append({"id": program.id, "title": program.title, **result.model_dump(mode="json")})
    logger.info(f"Classified {len(results)} programs (rules: {rules.version})")
    return results


def run_match(
    organization: Organization,
    programs: list[FundingProgram],
    rules: ClassifierRules,
) -> list[dict]:
    """Score an organization against every program.

    Programs without a persisted category are classified first. Sorted by
    semantic score, then industry relevance, both descending.
    """
    rows = []
    for program in programs:
        if not program.category:
            category = classify(program.title, program.description, program.ministry, rules).industry
            program = program.model_copy(update={"category": category.value})

        semantic = semantic_match(organization, program)
        rows.append({
            "id": program.id,
            "title": program.title,
            "category": program.category,
            "relevance": relevance(organization.industry_sector, program.category),
            "semantic": semantic.model_dump(mode="json"),
        })

    rows.sort(key=lambda row: (row["semantic"]["score"], row["relevance"]), reverse=True)
    blocked = sum(1 for row in rows if row["semantic"]["is_hard_filter"])
    logger.info(f"Matched {organization.name or organization.id} against {len(rows)} programs ({blocked} hard-filtered)")
    return rows


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Classify funding programs and match organizations.")
    sub = ap.add_subparsers(dest="command", required=True)

    classify_cmd = sub.add_parser("classify", help="classify programs into industries")
    classify_cmd.add_argument("programs", help="JSON file with program records")

    match_cmd = sub.add_parser("match", help="score an organization against programs")
    match_cmd.add_argument("organization", help="JSON file with one organization record")
    match_cmd.add_argument("programs", help="JSON file with program records")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        logging.getLogger().setLevel(config.log_level)
        rules = load_rule_tables(config.rule_tables_path)
        programs = _read_programs(args.programs)
        if args.command == "classify":
            output = run_classify(programs, rules)
        else:
            organization = Organization.model_validate(_read_json(args.organization))
            output = run_match(organization, programs, rules)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
        logger.error(f"Cannot run {args.command}: {e}")
        return 1

    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
