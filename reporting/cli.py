#!/usr/bin/env python3
"""
CLI for generating Sale Options Comparison PDFs.

Usage:
    python -m reporting.cli sample
    python -m reporting.cli generate <property_json>

Examples:
    # Generate sample report for testing
    python -m reporting.cli sample

    # Generate from JSON property file
    python -m reporting.cli generate properties/75201.json
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from core import (
    ConditionTier,
    InvalidInput,
    PropertyAnalyzer,
    PropertyDescription,
    RenderFailure,
    StructureCategory,
)
from utils.config import Config

from .comparison_report import ComparisonReportGenerator, report_filename


def create_sample_property() -> PropertyDescription:
    """Sample property used by the `sample` command."""
    return PropertyDescription(
        zip_code="75201",
        property_type=StructureCategory.SINGLE_FAMILY,
        square_feet=2000,
        bedrooms=3,
        bathrooms=2.0,
        condition=ConditionTier.GOOD,
        mortgage_balance=450000,
        address="123 Sample Street, Dallas, TX",
    )


def parse_property_from_json(data: dict) -> PropertyDescription:
    """
    Parse a JSON dictionary into a PropertyDescription.

    Args:
        data: Dictionary containing property data

    Returns:
        PropertyDescription ready for analysis

    Raises:
        KeyError: If a required field is missing
        InvalidInput: If a field is out of range or an enum value is unknown
    """
    property_type = StructureCategory.from_string(data["property_type"])
    condition = ConditionTier.from_string(data.get("condition", "good"))

    errors = []
    if property_type is None:
        errors.append(f"unknown property_type: {data['property_type']}")
    if condition is None:
        errors.append(f"unknown condition: {data.get('condition')}")
    if data.get("mortgage_balance") is None:
        errors.append("mortgage_balance is required to compare sale options")
    if errors:
        raise InvalidInput(errors)

    return PropertyDescription(
        zip_code=str(data["zip_code"]),
        property_type=property_type,
        square_feet=int(data["square_feet"]),
        bedrooms=int(data["bedrooms"]),
        bathrooms=float(data["bathrooms"]),
        condition=condition,
        mortgage_balance=float(data["mortgage_balance"]),
        address=data.get("address", ""),
    )


def write_report(description: PropertyDescription, output_dir: Optional[Path] = None) -> Path:
    """Analyze a property and write its comparison PDF. Returns the path."""
    config = Config.load()
    analysis = PropertyAnalyzer().analyze(description)
    generated_at = datetime.now()

    output_dir = Path(output_dir or config.reports_dir)
    output_path = output_dir / report_filename(generated_at)

    generator = ComparisonReportGenerator(config)
    return generator.generate_to_file(
        output_path,
        analysis.valuation,
        description,
        analysis.comparison,
        generated_at,
    )


def cmd_sample(args):
    """Generate a sample comparison report for testing."""
    print("Generating sample Sale Options Comparison...")

    filepath = write_report(create_sample_property(), args.output_dir)

    print(f"Report generated: {filepath}")
    return 0


def cmd_generate(args):
    """Generate a report from a JSON property file."""
    input_path = Path(args.property_file)

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    print(f"Loading property from: {input_path}")

    try:
        with open(input_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1

    try:
        description = parse_property_from_json(data)
        filepath = write_report(description, args.output_dir)
    except (KeyError, ValueError) as e:
        print(f"Error: Invalid property data: {e}", file=sys.stderr)
        return 1
    except RenderFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Report generated: {filepath}")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sale Options Comparison Report Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m reporting.cli sample
    python -m reporting.cli generate properties/75201.json

Output:
    Reports are saved to: $REPORTS_DIR/sale-options-comparison-<timestamp>.pdf
        """,
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to write the PDF to (default: $REPORTS_DIR)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Sample command
    sample_parser = subparsers.add_parser(
        "sample",
        help="Generate a sample report",
    )
    sample_parser.set_defaults(func=cmd_sample)

    # Generate command
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a report from a JSON property file",
    )
    gen_parser.add_argument(
        "property_file",
        help="Path to JSON property file",
    )
    gen_parser.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
