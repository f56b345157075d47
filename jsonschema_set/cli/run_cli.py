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

"""CLI entry point for checking schema sets and validating documents."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from ..api import id_for
from ..cache import default_cache
from ..config import ValidatorConfig
from ..dispatch import compiles, validate
from ..exceptions import SchemaSetError
from ..file_io.document_loader import load_documents, load_document
from .report import CheckResult, format_human, format_json, overall_exit_code

logger = logging.getLogger(__name__)


def _target_id(args: argparse.Namespace, schemas: List[Any], config: ValidatorConfig) -> str:
    if args.id:
        return args.id
    return id_for(schemas[0] if schemas else None, config.default_id)


def run_check(args: argparse.Namespace, config: ValidatorConfig) -> List[CheckResult]:
    """Check that the schema set given on the command line compiles."""
    first = Path(args.schemas[0])
    try:
        schemas = load_documents(args.schemas)
    except SchemaSetError as e:
        result = CheckResult(first, args.id or "")
        result.set_error(e)
        return [result]

    target = _target_id(args, schemas, config)
    logger.debug("Checking schema set %s for target %s", args.schemas, target)
    result = CheckResult(first, target)
    try:
        result.set_verdict(compiles(target, schemas, config=config))
    except SchemaSetError as e:
        result.set_error(e)
    return [result]


def run_validate(args: argparse.Namespace, config: ValidatorConfig) -> List[CheckResult]:
    """Validate every instance file against the schema set."""
    try:
        schemas = load_documents(args.schema)
    except SchemaSetError as e:
        result = CheckResult(Path(args.schema[0]), args.id or "")
        result.set_error(e)
        return [result]

    target = _target_id(args, schemas, config)
    cache = default_cache(config)

    results = []
    for instance_path in args.instances:
        result = CheckResult(Path(instance_path), target)
        logger.debug("Validating %s against %s", instance_path, target)
        try:
            instance = load_document(instance_path)
            if cache is not None:
                verdict = cache.validate(target, schemas, instance)
            else:
                verdict = validate(target, schemas, instance, config=config)
            result.set_verdict(verdict)
        except SchemaSetError as e:
            result.set_error(e)
        results.append(result)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='jsonschema-set',
        description='Compile JSON Schema sets and validate documents against them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: JSONSCHEMA_SET_LOG_LEVEL or INFO)',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    check = subparsers.add_parser('check', help='Check that a schema set compiles')
    check.add_argument('--id', default=None, help="Target schema identifier (default: first schema's $id)")
    check.add_argument('schemas', nargs='+', help='Schema files (JSON or YAML), in registration order')

    val = subparsers.add_parser('validate', help='Validate instance files against a schema set')
    val.add_argument('--id', default=None, help="Target schema identifier (default: first schema's $id)")
    val.add_argument(
        '--schema',
        action='append',
        required=True,
        help='Schema file (JSON or YAML); repeat to register several, in order',
    )
    val.add_argument('instances', nargs='+', help='Instance files (JSON or YAML)')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the jsonschema-set CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ValidatorConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    if args.format == 'json':
        # stdout carries the report only
        config.print_level = 'DEBUG'
    config.set_logging()

    if args.command == 'check':
        results = run_check(args, config)
    else:
        results = run_validate(args, config)

    if args.format == 'json':
        print(json.dumps(format_json(results), indent=2))
    else:
        print(format_human(results))

    sys.exit(overall_exit_code(results))


if __name__ == '__main__':
    main()
