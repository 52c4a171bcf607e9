#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""CLI entry point for validating workflow files."""

import argparse
import json
import sys
from pathlib import Path
from typing import List

from . import validate_files
from ..config import validator_config
from ..exceptions import ValidationError, WorkflowValidatorError
from ..file_io.source_location import SourceLocation, format_source
from ..models.parsing.yaml_parser import DocumentLoadError, yaml_parser
from ..utils.output_format import OutputFormat
from ..validator import get_default_validator


WORKFLOW_EXTENSIONS = ['.yml', '.yaml', '.json']


def find_yaml_files(paths: List[str]) -> List[Path]:
    """Find all workflow files in given paths."""
    yaml_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if path.suffix in WORKFLOW_EXTENSIONS:
                yaml_files.append(path)
            else:
                print(f"Warning: File does not match workflow file pattern: {path}", file=sys.stderr)
        elif path.is_dir():
            # JSON files are only picked up when named explicitly
            for ext in ('.yml', '.yaml'):
                yaml_files.extend(path.rglob(f'*{ext}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(yaml_files))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='workflow-validate',
        description='Validate workflow YAML files against the schema of their declared version',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to validate (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=OutputFormat.get_all_formats(),
        default=validator_config.output_format,
        help='Output format (default: %(default)s)',
    )
    parser.add_argument(
        '--context',
        metavar='FILE',
        help='YAML file with known step_types and registries to check references against',
    )
    parser.add_argument(
        '--stop-on-first-error',
        action='store_true',
        help='Report only the most relevant error of each file',
    )
    parser.add_argument(
        '--ignore-warnings',
        action='store_true',
        help='Do not report warnings',
    )
    parser.add_argument(
        '--print-schemas',
        metavar='VERSION',
        help='Print the JSON Schemas used for VERSION and exit',
    )
    parser.add_argument(
        '--list-versions',
        action='store_true',
        help='List the supported schema versions and exit',
    )
    parser.add_argument(
        '--log-level',
        default=validator_config.log_level,
        help='Logging level (default: %(default)s)',
    )
    return parser


def _print_results(results, output_format: str) -> None:
    if output_format == OutputFormat.JSON:
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif output_format == OutputFormat.GITHUB_ACTIONS:
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for label, entries in (('ERROR', result.errors), ('WARNING', result.warnings)):
                    for entry in entries:
                        loc = SourceLocation(
                            file_path=result.file_path,
                            yaml_path=entry.get('yaml_path'),
                            line=entry.get('line'),
                        )
                        print(f"  {label}: {entry['message']}{format_source(loc)}")
                        if entry.get('actionItems'):
                            print(f"    -> {entry['actionItems']}")


def main(argv: List[str] = None) -> None:
    """Main entry point for the validator CLI."""
    args = build_parser().parse_args(argv)

    validator_config.log_level = args.log_level
    validator_config.set_logging()
    validator = get_default_validator()

    if args.list_versions:
        for version in validator.registry.supported_versions():
            print(version)
        sys.exit(0)

    if args.print_schemas is not None:
        try:
            schemas = validator.get_json_schemas(args.print_schemas)
        except ValidationError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(schemas, indent=2))
        sys.exit(0)

    context = None
    if args.context:
        try:
            context = yaml_parser.load_document(args.context).data
        except DocumentLoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if not isinstance(context, dict):
            print(f"Error: Context file must contain a mapping: {args.context}", file=sys.stderr)
            sys.exit(1)

    if not args.paths:
        args.paths = ['.']

    yaml_files = find_yaml_files(args.paths)

    if not yaml_files:
        print("No workflow files found.", file=sys.stderr)
        sys.exit(1)

    options = {
        'stop_on_first_error': args.stop_on_first_error,
        'ignore_warnings': args.ignore_warnings,
    }
    try:
        results = validate_files(yaml_files, validator=validator, context=context, options=options)
    except WorkflowValidatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    _print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == OutputFormat.HUMAN:
        print("Validation succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
