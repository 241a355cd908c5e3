"""
Command-Line Interface for the Graduation Audit System.

    gradaudit check <enrollments.json>
    gradaudit plan <enrollments.json>
    gradaudit recommend <enrollments.json>
    gradaudit summary <enrollments.json>
    gradaudit audit <enrollments.json>

Common options:
    --data-dir DIR|URL   Where catalog.json and requirements.json live
    --non-native         Audit a non-native speaker (language track B)
    --json               Print machine-readable JSON instead of tables
    -v / --verbose       Log loading and skipped records

Exit codes: 0 when the verdict is positive, 1 when it is not,
2 when the input could not be read.
"""

import argparse
import json
import logging
from dataclasses import asdict, is_dataclass
from enum import Enum

import requests

from .advisor import GraduationAdvisor
from .config import DATA_DIR
from .data import CatalogError, CatalogLoader

logger = logging.getLogger(__name__)


def _to_jsonable(value):
    """Convert engine dataclasses into plain JSON-compatible values."""
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def _summary_dict(summary) -> dict:
    data = _to_jsonable(summary)
    # `all` is derived, so asdict() leaves it out
    data["total"]["all"] = summary.total.all
    return data


def _print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _cmd_check(advisor: GraduationAdvisor, enrollments, args) -> int:
    result = advisor.check(enrollments)
    if args.json:
        data = _to_jsonable(result)
        data["summary"] = _summary_dict(result.summary)
        _print_json(data)
    else:
        advisor.display.print_learner_info(advisor.is_native_speaker)
        advisor.display.print_check_result(result)
    return 0 if result.can_graduate else 1


def _cmd_plan(advisor: GraduationAdvisor, enrollments, args) -> int:
    validation = advisor.validate_plan(enrollments)
    if args.json:
        data = _to_jsonable(validation)
        data.pop("check", None)
        data["can_graduate"] = validation.check.can_graduate
        _print_json(data)
    else:
        advisor.display.print_plan_validation(validation)
    return 0 if validation.is_valid else 1


def _cmd_recommend(advisor: GraduationAdvisor, enrollments, args) -> int:
    recommendations = advisor.recommend_by_category(enrollments)
    if args.json:
        _print_json(_to_jsonable(recommendations))
    else:
        advisor.display.print_recommendations(recommendations)
    return 0


def _cmd_summary(advisor: GraduationAdvisor, enrollments, args) -> int:
    summary = advisor.summarize(enrollments)
    if args.json:
        _print_json(_summary_dict(summary))
    else:
        advisor.display.print_credit_summary(summary)
    return 0


def _cmd_audit(advisor: GraduationAdvisor, enrollments, args) -> int:
    if args.json:
        result = advisor.audit(enrollments)
        check = _to_jsonable(result["check"])
        check.pop("summary", None)
        plan = _to_jsonable(result["plan"])
        plan.pop("check", None)
        _print_json({
            "summary": _summary_dict(result["summary"]),
            "check": check,
            "plan": plan,
            "recommendations": _to_jsonable(result["recommendations"]),
        })
    else:
        result = advisor.show_audit(enrollments)
    return 0 if result["check"].can_graduate else 1


COMMANDS = {
    "check": (_cmd_check, "Check graduation requirements"),
    "plan": (_cmd_plan, "Validate yearly credit load of the plan"),
    "recommend": (_cmd_recommend, "Suggest courses for under-filled categories"),
    "summary": (_cmd_summary, "Show credit totals per subcategory"),
    "audit": (_cmd_audit, "Run every report in sequence"),
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser with sub-commands."""
    parser = argparse.ArgumentParser(
        prog="gradaudit", description="Graduation requirement audit"
    )
    parser.add_argument("--data-dir", default=str(DATA_DIR),
                        help="Directory or http(s) URL holding catalog.json and requirements.json")
    parser.add_argument("--non-native", action="store_true",
                        help="Audit a non-native speaker (foreign language track B)")
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in COMMANDS.items():
        p = sub.add_parser(name, help=help_text)
        p.add_argument("enrollments", type=str, help="Enrollment JSON file")

    return parser


def main(argv=None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handler, _ = COMMANDS[args.command]
    try:
        advisor = GraduationAdvisor(
            loader=CatalogLoader(args.data_dir),
            is_native_speaker=not args.non_native,
        )
        enrollments = advisor.load_enrollments(args.enrollments)
        code = handler(advisor, enrollments, args)
    except (CatalogError, FileNotFoundError, json.JSONDecodeError,
            UnicodeDecodeError, requests.RequestException) as exc:
        logger.debug("Input error", exc_info=True)
        print(f"Error: {exc}")
        raise SystemExit(2)

    raise SystemExit(code)
