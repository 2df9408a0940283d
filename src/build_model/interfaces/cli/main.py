import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

import colorlog
import pandas as pd
from tqdm import tqdm

from build_model import __version__ as _PACKAGE_VERSION
from build_model.core.enums import ValidationLevel, ValidationMode

# Validation level choices for argparse - includes the STRICT alias
LEVEL_CHOICES = list(ValidationLevel.__members__.keys())

MODE_CHOICES = [m.value for m in ValidationMode] + ["both"]

DESCRIPTOR_SUFFIXES = (".yaml", ".yml", ".json")

# Reports written by --report/--report-json are named <stem>_<mode>_validation.<ext>
REPORT_STEM_SUFFIXES = tuple(f"_{m.value}_validation" for m in ValidationMode)


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _collect_descriptors(paths: List[str]) -> List[Path]:
    """Expand directories into the descriptor files below them.

    Reports from earlier runs that sit next to the descriptors are skipped.
    """
    descriptors: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = sorted(
                p
                for p in path.rglob("*")
                if p.is_file()
                and p.suffix in DESCRIPTOR_SUFFIXES
                and not p.stem.endswith(REPORT_STEM_SUFFIXES)
            )
            if not found:
                logging.warning("No descriptors found under %s", path)
            descriptors.extend(found)
        else:
            descriptors.append(path)
    return descriptors


def _selected_modes(mode: str) -> List[ValidationMode]:
    if mode == "both":
        return [ValidationMode.RAW, ValidationMode.EFFECTIVE]
    return [ValidationMode(mode)]


def _report_path(option, descriptor: Path, mode: ValidationMode, suffix: str) -> Path:
    """Resolve where a per-descriptor report goes.

    ``True`` means next to the descriptor; any other value is a directory.
    """
    name = f"{descriptor.stem}_{mode.value}_validation.{suffix}"
    if option is True:
        return descriptor.parent / name
    report_dir = Path(option)
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir / name


def _write_csv_report(rows: List[Dict[str, str]], path: Path) -> None:
    df = pd.DataFrame(rows, columns=["descriptor", "mode", "level", "severity", "message"])
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, encoding="utf-8")


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate one or more project descriptors.

    Each descriptor is validated independently. Missing or unreadable
    descriptors emit warnings/errors and are skipped; the command succeeds
    if at least one descriptor was validated and none had errors.

    Returns:
        0 if all validations passed without errors
        1 if no descriptors were validated
        2 if any validation errors were found
    """
    from build_model.ingestion.descriptor import load_model
    from build_model.validation.registry import (
        print_report,
        validate_effective,
        validate_raw,
    )

    try:
        level = ValidationLevel[str(getattr(args, "level", None) or "STRICT").upper()]
    except KeyError:
        logging.error(
            "Unknown validation level: '%s'. Valid levels: %s",
            args.level,
            ", ".join(LEVEL_CHOICES),
        )
        return 2

    mode_arg = getattr(args, "mode", None) or ValidationMode.EFFECTIVE.value
    if mode_arg not in MODE_CHOICES:
        logging.error("Unknown mode: '%s'. Valid modes: %s", mode_arg, ", ".join(MODE_CHOICES))
        return 2
    modes = _selected_modes(mode_arg)

    descriptors = _collect_descriptors(list(getattr(args, "descriptors", None) or []))
    if not descriptors:
        logging.error("No descriptors given")
        return 2

    report_md = getattr(args, "report", False)
    report_json = getattr(args, "report_json", False)
    report_csv = getattr(args, "report_csv", None)

    # Track results for end-of-run summary
    validation_results: List[dict] = []
    csv_rows: List[Dict[str, str]] = []
    total_errors = 0
    successful_validations = 0

    for descriptor in tqdm(
        descriptors,
        desc=f"{'Validating descriptors':<31}",
        unit="files",
        disable=len(descriptors) < 2,
    ):
        logging.info("Validating %s...", descriptor)

        try:
            model = load_model(descriptor)
        except FileNotFoundError as e:
            logging.warning("Descriptor not found: %s", e)
            validation_results.append(
                {"descriptor": str(descriptor), "status": "MISSING", "errors": 0,
                 "warnings": 0, "reason": str(e)}
            )
            continue
        except (ValueError, OSError) as e:
            logging.error("Error reading %s: %s", descriptor, e)
            validation_results.append(
                {"descriptor": str(descriptor), "status": "ERROR", "errors": 0,
                 "warnings": 0, "reason": str(e)}
            )
            continue

        error_count = 0
        warning_count = 0
        for mode in modes:
            if mode == ValidationMode.RAW:
                result = validate_raw(model, level)
            else:
                result = validate_effective(model.with_defaults(), level)

            error_count += result.get_error_count()
            warning_count += result.get_warning_count()

            print(f"{descriptor}:")
            print_report(result)
            print()

            for severity, messages in (("error", result.errors), ("warning", result.warnings)):
                for msg in messages:
                    csv_rows.append(
                        {
                            "descriptor": str(descriptor),
                            "mode": mode.value,
                            "level": level.name,
                            "severity": severity,
                            "message": msg,
                        }
                    )

            if report_md:
                report_path = _report_path(report_md, descriptor, mode, "md")
                with open(report_path, "w", encoding="utf-8") as f:
                    f.write(result.to_markdown(title=descriptor.name))
                logging.info("Markdown report saved: %s", report_path)

            if report_json:
                report_path = _report_path(report_json, descriptor, mode, "json")
                with open(report_path, "w", encoding="utf-8") as f:
                    f.write(result.to_json())
                logging.info("JSON report saved: %s", report_path)

        if error_count:
            total_errors += error_count
            logging.warning(
                "Validation failed for %s: %d errors, %d warnings",
                descriptor,
                error_count,
                warning_count,
            )
        else:
            logging.info("Validation passed for %s", descriptor)

        successful_validations += 1
        validation_results.append(
            {
                "descriptor": str(descriptor),
                "status": "FAIL" if error_count else "OK",
                "errors": error_count,
                "warnings": warning_count,
            }
        )

    if report_csv:
        csv_path = Path(report_csv)
        _write_csv_report(csv_rows, csv_path)
        logging.info("CSV findings saved: %s", csv_path)

    # Print summary if multiple descriptors
    if len(descriptors) > 1 and validation_results:
        logging.info("Validation Summary:")
        for entry in validation_results:
            if entry["status"] == "OK":
                logging.info("%s: PASSED", entry["descriptor"])
            elif entry["status"] == "FAIL":
                logging.info(
                    "%s: FAILED (%d errors, %d warnings)",
                    entry["descriptor"],
                    entry["errors"],
                    entry["warnings"],
                )
            else:
                logging.info(
                    "%s: %s (%s)",
                    entry["descriptor"],
                    entry["status"],
                    entry.get("reason", ""),
                )

    if successful_validations == 0:
        logging.error("No descriptors were validated.")
        return 1

    if total_errors > 0:
        logging.error("Validation found %d errors across all descriptors.", total_errors)
        return 2

    return 0


def cmd_rules(args: argparse.Namespace) -> int:
    """Print the severity of every rule at a validation level."""
    from build_model.validation.config import get_rule_ids, get_severity

    try:
        level = ValidationLevel[str(getattr(args, "level", None) or "STRICT").upper()]
    except KeyError:
        logging.error("Unknown validation level: '%s'", args.level)
        return 2

    print(f"Rules at level {level.name}:")
    for rule_id in get_rule_ids():
        print(f"  {rule_id:<30} {get_severity(rule_id, level)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="build-model",
        description=f"Build Model Tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate project descriptors")
    p_validate.add_argument(
        "descriptors",
        nargs="+",
        help="Descriptor files (YAML/JSON) or directories to search for them.",
    )
    p_validate.add_argument(
        "--level",
        default="STRICT",
        type=str.upper,
        choices=LEVEL_CHOICES,
        help="Validation level (case insensitive). Defaults to STRICT.",
    )
    p_validate.add_argument(
        "--mode",
        default=ValidationMode.EFFECTIVE.value,
        type=str.lower,
        choices=MODE_CHOICES,
        help="Validate the raw descriptor, the effective one (with super-model defaults), or both.",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate Markdown report (one per descriptor and mode). Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate JSON report (one per descriptor and mode). Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-csv",
        default=None,
        help="Write all findings of the run to a single CSV file.",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_rules = sub.add_parser("rules", help="List validation rules and their severity")
    p_rules.add_argument(
        "--level",
        default="STRICT",
        type=str.upper,
        choices=LEVEL_CHOICES,
        help="Validation level (case insensitive). Defaults to STRICT.",
    )
    p_rules.set_defaults(func=cmd_rules)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
