import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from quiz_admin.logging_setup import setup_console_logging
from quiz_admin.models.content import dump_content
from quiz_admin.models.questions import QuestionForm
from quiz_admin.services.content_service import text_to_blocks
from quiz_admin.services.question_service import validate_question_form
from quiz_admin.utils import json_dump, read_json_file

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate question JSON files before import"
    )
    parser.add_argument("files", type=Path, nargs="+", help="Question JSON files")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of plain text",
    )
    return parser.parse_args(argv)


def load_question(path: Path) -> QuestionForm:
    """Load a question file.

    A file may hold structured ``question_content`` blocks or the legacy
    plain ``question_text``/``question_text_hi`` pair.
    """
    raw = read_json_file(path, None)
    if raw is None:
        raise ValueError("file not found")
    if not isinstance(raw, dict):
        raise ValueError("expected a JSON object")
    data = dict(raw)
    if "question_content" not in data and "question_text" in data:
        data["question_content"] = dump_content(
            text_to_blocks(data.pop("question_text"), data.pop("question_text_hi", ""))
        )
    return QuestionForm.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging()

    report: dict[str, dict[str, str]] = {}
    status = EXIT_OK
    for path in args.files:
        try:
            question = load_question(path)
        except (OSError, ValueError, ValidationError) as exc:
            log.error("Cannot read %s: %s", path, exc)
            return EXIT_UNREADABLE
        errors = validate_question_form(question)
        report[str(path)] = errors
        if errors:
            status = EXIT_INVALID

    if args.json:
        print(json_dump(report))
    else:
        for name, errors in report.items():
            if not errors:
                print(f"{name}: OK")
                continue
            for field, message in errors.items():
                print(f"{name}: {field}: {message}")
    return status


if __name__ == "__main__":
    sys.exit(main())
