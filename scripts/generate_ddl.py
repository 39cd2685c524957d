#!/usr/bin/env python
# ============================================================================
# DDL GENERATION SCRIPT
# ============================================================================
# PURPOSE: Print PostgreSQL DDL for a model using ModelToSQL
# USAGE:
#   python scripts/generate_ddl.py                              # Example users table
#   python scripts/generate_ddl.py --model pgschema.models.examples:Role
#   python scripts/generate_ddl.py --validate                   # Report errors only
#   python scripts/generate_ddl.py --pydantic                   # Row model source
# ============================================================================

import argparse
import importlib
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pgschema.config import get_defaults
from pgschema.exceptions import SchemaError, TableNameNotSetError
from pgschema.logging import configure_logging, get_logger
from pgschema.schema import ModelToSQL, PydanticModelGenerator

logger = get_logger("generate_ddl")

DEFAULT_MODEL = "pgschema.models.examples:User"


def load_model(target: str):
    """Instantiate `module.path:ClassName`."""
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise SystemExit(f"--model must look like module.path:ClassName, got {target!r}")

    module = importlib.import_module(module_name)
    try:
        model_class = getattr(module, class_name)
    except AttributeError:
        raise SystemExit(f"{module_name} has no attribute {class_name}") from None
    return model_class()


def main():
    parser = argparse.ArgumentParser(
        description="Generate PostgreSQL DDL from a model definition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_ddl.py                                    # users table
  python scripts/generate_ddl.py --model pgschema.models.examples:Role
  python scripts/generate_ddl.py --validate                         # Validation report
  python scripts/generate_ddl.py --pydantic                         # Pydantic row model

Environment Variables:
  PGSCHEMA_INDEX_SUFFIX   Suffix for derived index names (default: idx)
  PGSCHEMA_VALIDATE       Validate before generating (default: true)
  PGSCHEMA_LOG_LEVEL      Log level (default: INFO)
  LOG_FORMAT              Set to "json" for structured logs
        """
    )
    parser.add_argument(
        "--model",
        type=str,
        default=DEFAULT_MODEL,
        help=f"Model to generate, as module:Class (default: {DEFAULT_MODEL})"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the model and print errors without generating"
    )
    parser.add_argument(
        "--pydantic",
        action="store_true",
        help="Print the pydantic row model instead of DDL"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    args = parser.parse_args()

    log_defaults = get_defaults().logging
    configure_logging(
        level="DEBUG" if args.verbose else log_defaults.level,
        json_output=args.json_logs or log_defaults.json_output,
    )

    model = load_model(args.model)
    generator = ModelToSQL()

    try:
        if args.validate:
            report = generator.validate(model)
            if report.valid:
                print(f"Model for table {report.table} is valid")
                return 0
            print(f"Model for table {report.table} has {len(report.errors)} errors:")
            for error in report.errors:
                print(f"  - {error}")
            return 1

        if args.pydantic:
            print(PydanticModelGenerator().generate_source(model), end="")
            return 0

        for stmt in generator.generate_all(model):
            print(stmt)
    except TableNameNotSetError as e:
        logger.error(str(e))
        return 2
    except SchemaError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
