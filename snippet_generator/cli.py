#!/usr/bin/env python3
"""Command-line interface for the repository/service snippet generator."""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from snippet_generator.constants import SNIPPET_KEYS, SnippetKind
from snippet_generator.errors import OutputConflictError, TemplateRenderingError, ValidationError
from snippet_generator.generator.template_engine import (
    GeneratedSnippets,
    SnippetCodeGenerator,
    SnippetTemplateEngine,
)
from snippet_generator.utils.file_utils import ensure_directory, write_files_to_disk

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_VALIDATION_ERROR = 1
EXIT_TEMPLATE_ERROR = 2
EXIT_GENERATION_ERROR = 3
EXIT_OUTPUT_CONFLICT = 4

PROMPT = "Enter the entity name: "


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate C# repository and service snippets for an entity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s CampaignAttribute
  %(prog)s Ref_Product Category --output ./snippets
  %(prog)s Product --snippet repository_interface --snippet service_interface
        """,
    )
    parser.add_argument(
        "entity_names",
        nargs="*",
        help="Entity names to generate snippets for (prompted for when omitted)",
        metavar="ENTITY_NAME",
    )
    parser.add_argument(
        "--snippet",
        "-s",
        action="append",
        choices=SNIPPET_KEYS,
        help="Only generate the given snippet (repeatable, default: all four)",
        dest="snippets",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write one .cs file per snippet into this directory instead of printing",
        dest="output_dir",
    )
    parser.add_argument(
        "--template-dir",
        "-t",
        type=Path,
        help="Custom template directory (optional)",
        dest="template_dir",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parsed_args = parser.parse_args(args)

    if parsed_args.template_dir is not None and not parsed_args.template_dir.is_dir():
        parser.error(f"Template directory not found: {parsed_args.template_dir}")

    return parsed_args


def configure_logging(*, verbose: bool) -> None:
    """Route library log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def prompt_entity_name() -> str:
    """Ask for a single entity name on stdin."""
    try:
        return input(PROMPT)
    except EOFError:
        return ""


def print_snippets(snippets: GeneratedSnippets, kinds: list[SnippetKind]) -> None:
    """Print the selected snippets under their headings."""
    for kind in kinds:
        print(f"\nGenerated {kind.title} Snippet:")
        print(snippets.get(kind), end="")


def print_generation_summary(*, files: dict[Path, str], output_dir: Path) -> None:
    """Print summary of generated files."""
    print(f"Generated {len(files)} files:")
    for file_path in sorted(files.keys()):
        print(f"  {file_path}")
    print(f"\nSnippets written to {output_dir}")


def generate_snippets(
    *,
    entity_names: list[str],
    kinds: list[SnippetKind],
    output_dir: Path | None,
    template_dir: Path | None,
    verbose: bool,
) -> None:
    """Generate snippets for every entity and print or write them."""
    generator = SnippetCodeGenerator(SnippetTemplateEngine(template_dir))

    if output_dir is None:
        for snippets in generator.generate_batch(entity_names):
            print_snippets(snippets, kinds)
        return

    files = generator.generate_files(entity_names, output_dir, kinds)
    ensure_directory(output_dir)
    write_files_to_disk(files)

    if verbose:
        print_generation_summary(files=files, output_dir=output_dir)
    else:
        print(f"Snippets written to {output_dir}")


def main(args: list[str] | None = None) -> int:
    """Generate repository and service snippets for the given entity names."""
    parsed_args = parse_command_line_args(args)
    configure_logging(verbose=parsed_args.verbose)

    entity_names = parsed_args.entity_names or [prompt_entity_name()]
    kinds = [SnippetKind.from_key(key) for key in dict.fromkeys(parsed_args.snippets or SNIPPET_KEYS)]

    try:
        generate_snippets(
            entity_names=entity_names,
            kinds=kinds,
            output_dir=parsed_args.output_dir,
            template_dir=parsed_args.template_dir,
            verbose=parsed_args.verbose,
        )
        return EXIT_SUCCESS

    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except TemplateRenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TEMPLATE_ERROR
    except OutputConflictError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_OUTPUT_CONFLICT
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
