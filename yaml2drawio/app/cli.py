#!/usr/bin/env python3
"""
CLI entrypoint for yaml2drawio.

Usage:
  yaml2drawio -i diagram.yaml [-o diagram.drawio] [flags]

Flags:
  -t, --templates DIR   templates directory
  -v, --validate        apply templates and providers, skip generation
  --list-providers
  --verbose
  --version
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from yaml2drawio import __version__
from yaml2drawio.app.config import GeneratorConfig
from yaml2drawio.app.loader import load_document
from yaml2drawio.errors import DiagramError
from yaml2drawio.gen.drawio import DrawioGenerator, DrawioWriter
from yaml2drawio.providers import ProviderRegistry, register_builtin_providers
from yaml2drawio.templates import TemplateProcessor, TemplateStore
from yaml2drawio.utils.logging_config import configure_logging, level_for

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaml2drawio",
        description="Convert YAML diagram definitions to draw.io XML.",
    )
    parser.add_argument("-i", "--input", help="input YAML or JSON diagram file")
    parser.add_argument("-o", "--output", help="output file (default: input with .drawio extension)")
    parser.add_argument("-t", "--templates", help="templates directory")
    parser.add_argument("-v", "--validate", action="store_true", help="only validate the input")
    parser.add_argument("--version", action="store_true", help="show version information")
    parser.add_argument("--list-providers", action="store_true", help="list providers and their resources")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def default_output(input_path: str, extension: str = ".drawio") -> str:
    return str(Path(input_path).with_suffix(extension))


def list_providers(registry: ProviderRegistry) -> None:
    print("Available providers")
    for name in registry.list():
        provider = registry.get(name)
        kind = "builtin" if registry.is_builtin(name) else "registry"
        print(f"  {name} {provider.version} ({kind})")
        for definition in provider.resources():
            print(f"    {name}-{definition.type}: {definition.description}")


def run(input_path: str, output_path: str, config: GeneratorConfig, registry: ProviderRegistry) -> None:
    document = load_document(input_path)

    store = TemplateStore(config.templates_dir or "")
    store.load()
    if len(store):
        logger.debug("Loaded %d templates: %s", len(store), ", ".join(store.list_templates()))

    processor = TemplateProcessor(store, registry)
    processor.process_document(document)

    if config.validate_only:
        print("YAML configuration is valid")
        return

    result = DrawioGenerator(config).generate(document)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    DrawioWriter(config.output).write(result, output_path)
    print(f"Successfully converted {input_path} to {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level_for(args.verbose))

    registry = ProviderRegistry()
    try:
        register_builtin_providers(registry)
    except DiagramError as e:
        print(f"Error: failed to initialize providers: {e}", file=sys.stderr)
        return 1

    if args.version:
        print(f"yaml2drawio v{__version__}")
        return 0

    if args.list_providers:
        list_providers(registry)
        return 0

    if not args.input:
        print("Error: input file is required", file=sys.stderr)
        return 1

    config = GeneratorConfig(
        templates_dir=args.templates,
        validate_only=args.validate,
        verbose=args.verbose,
    )
    output = args.output or default_output(args.input, config.output.extension)

    try:
        run(args.input, output, config, registry)
    except DiagramError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
