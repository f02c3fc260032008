#!/usr/bin/env python3
"""
vue-attrs - command-line interface.

Answers attribute questions about Vue components described in a YAML
catalog, following local mixins, global mixins and extends:
- attrs: List attributes a component accepts
- resolve: Resolve one attribute name
- locals: List local sub-components
- graph: Export the composition graph
- parse: Explain how an attribute name is parsed

Usage:
    vueattrs attrs base-input                      # Template spellings (default)
    vueattrs attrs base-input --script             # Script spellings
    vueattrs attrs base-input --public             # Props only
    vueattrs resolve base-input ":model-value"     # Resolve one name
    vueattrs locals base-input                     # Local sub-components
    vueattrs graph base-input --format dot         # Graphviz output
    vueattrs parse "@submit.prevent"               # Grammar diagnostics
    vueattrs --catalog other.yaml attrs my-comp    # Explicit catalog
"""

import argparse
import logging
import sys
from pathlib import Path

from vueattrs import __version__
from vueattrs.commands.attrs import AttrsCommand


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="vueattrs",
        description="vue-attrs - resolve Vue component attributes across mixins and extends",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s attrs base-input                  List template spellings of all attributes
  %(prog)s attrs base-input --script         List script (camelCase) spellings
  %(prog)s resolve base-input ":value.sync"  Resolve one attribute
  %(prog)s locals base-input                 Local sub-components, nearest first
  %(prog)s graph base-input --format dot     Composition graph for Graphviz
  %(prog)s parse "@click.stop"               Show prefix, base and modifier

Configuration is read from .vueattrs/config.yaml in the project root.
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--catalog",
        type=str,
        help="Component catalog YAML (default: catalog.path from config)"
    )
    parser.add_argument(
        "--repo",
        type=str,
        help="Project root (default: nearest directory containing .vueattrs/)"
    )
    parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["json", "yaml"],
        dest="output_format",
        help="Output format (default: output.format from config, else json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ----- vueattrs attrs <component> -----
    attrs_parser = subparsers.add_parser(
        "attrs",
        help="List attributes a component accepts"
    )
    attrs_parser.add_argument("component", help="Component name in the catalog")
    attrs_parser.add_argument(
        "--public",
        action="store_true",
        default=None,
        help="Only public attributes (props)"
    )
    attrs_parser.add_argument(
        "--script",
        action="store_false",
        dest="xml_context",
        default=None,
        help="Script spellings (camelCase) instead of template spellings"
    )

    # ----- vueattrs resolve <component> <attr> -----
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve one attribute name on a component"
    )
    resolve_parser.add_argument("component", help="Component name in the catalog")
    resolve_parser.add_argument("attribute", help="Attribute as written in the template")
    resolve_parser.add_argument(
        "--public",
        action="store_true",
        default=None,
        help="Only public attributes (props)"
    )

    # ----- vueattrs locals <component> -----
    locals_parser = subparsers.add_parser(
        "locals",
        help="List local sub-components visible from a component"
    )
    locals_parser.add_argument("component", help="Component name in the catalog")

    # ----- vueattrs graph [component] -----
    graph_parser = subparsers.add_parser(
        "graph",
        help="Export the composition graph"
    )
    graph_parser.add_argument(
        "component",
        nargs="?",
        help="Root component (omit to show global mixins only)"
    )
    graph_parser.add_argument(
        "--format",
        type=str,
        choices=["json", "dot"],
        dest="graph_format",
        default="json",
        help="Graph format (default: json)"
    )

    # ----- vueattrs parse <attr> -----
    parse_parser = subparsers.add_parser(
        "parse",
        help="Show how an attribute name is parsed"
    )
    parse_parser.add_argument("attribute", help="Attribute as written in the template")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    cmd = AttrsCommand(
        repo_root=Path(args.repo) if args.repo else None,
        catalog_path=Path(args.catalog) if args.catalog else None,
        output_format=args.output_format,
    )

    if args.command == "attrs":
        return cmd.attrs(args.component, only_public=args.public, xml_context=args.xml_context)

    elif args.command == "resolve":
        return cmd.resolve(args.component, args.attribute, only_public=args.public)

    elif args.command == "locals":
        return cmd.local_components(args.component)

    elif args.command == "graph":
        return cmd.graph(args.component, format=args.graph_format)

    elif args.command == "parse":
        return cmd.parse(args.attribute)

    parser.print_help()
    return 0


def cli() -> int:
    """Console script entry point."""
    return main()


if __name__ == "__main__":
    sys.exit(cli())
