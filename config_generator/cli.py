"""
JSON configuration to Helm chart scaffold

Usage:
    config-generator generate --input config.json --output helm
    config-generator generate --input config.json --output helm --dry-run
    config-generator serve --port 8080 --output helm

Arguments (generate):
    --input: Path to the JSON configuration file
    --output: Output directory for the generated chart (will not overwrite if exists)
    --force: Force overwrite if output directory exists
    --dry-run: Show what would be generated without creating files
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import logger
from .chart_emitter import ChartEmitter
from .errors import ConfigGeneratorError
from .output_sink import ChartDirectorySink, MemorySink
from .payload_decoder import read_payload_file
from .settings import Settings, get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="config-generator",
        description="Generate Helm chart scaffolds from JSON configuration"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a chart from a JSON file")
    generate.add_argument(
        "--input",
        required=True,
        help="Path to the JSON configuration file (e.g., config.json)",
    )
    generate.add_argument(
        "--output",
        help="Output directory for the generated Helm chart (default: helm)",
    )
    generate.add_argument(
        "--chart-name",
        help="Chart name written to Chart.yaml and the values.yaml header",
    )
    generate.add_argument(
        "--force",
        action="store_true",
        help="Force overwrite if output directory exists",
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run mode - show what would be generated without creating files",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", help="Interface to bind (default: 0.0.0.0)")
    serve.add_argument("--port", type=int, help="Port to listen on (default: 8080)")
    serve.add_argument("--output", help="Output directory for generated charts (default: helm)")
    serve.add_argument("--chart-name", help="Chart name written to Chart.yaml")

    return parser


def apply_overrides(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command-line flags on top of environment settings

    Raises:
        ConfigurationError: If a flag value is invalid
    """
    return settings.override(
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        output_dir=Path(args.output) if args.output else None,
        chart_name=args.chart_name,
    )


def run_generate(args: argparse.Namespace, settings: Settings) -> int:
    input_file = Path(args.input).resolve()
    output_dir = settings.output_dir.resolve()

    if output_dir.exists() and not args.force and not args.dry_run:
        logger.log_error(f"Output directory already exists: {output_dir}")
        logger.log_error("Use --force to overwrite or choose a different output directory")
        return 1

    print("JSON Configuration to Helm Chart Generator")
    print("=" * 60)
    print(f"Input file: {input_file}")
    print(f"Output directory: {output_dir}")
    print(f"Dry run: {args.dry_run}")
    print("=" * 60)
    print()

    try:
        print("[1/2] Reading configuration...")
        configs = read_payload_file(input_file)
        print(f"  ✓ Loaded {len(configs)} top-level keys")
        print()

        print("[2/2] Generating chart...")
        sink = MemorySink() if args.dry_run else ChartDirectorySink(output_dir)
        emitter = ChartEmitter(sink, chart_metadata=settings.chart_metadata)
        result = emitter.emit(configs)

        if args.dry_run:
            print("  (Dry run mode - not creating files)")
            for destination in result.destinations:
                print(f"  Would generate {destination}")
        else:
            for destination in result.destinations:
                print(f"  ✓ {sink.path_for(destination)}")
            for destination in result.removed:
                print(f"  ✗ removed stale {sink.path_for(destination)}")
        print()
    except (ConfigGeneratorError, FileNotFoundError) as e:
        logger.log_error(f"Generation failed: {e}")
        return 1

    print("=" * 60)
    print("✓ Generation completed successfully!")
    if result.skipped:
        print(f"  Skipped keys: {', '.join(result.skipped)}")
    if not args.dry_run:
        print(f"\nNext steps:")
        print(f"  1. Review generated templates: {output_dir}/templates/")
        print(f"  2. Review values.yaml: {output_dir}/values.yaml")
        print(f"  3. Test the chart: helm template {settings.chart_name} {output_dir}")
    return 0


def run_serve(args: argparse.Namespace, settings: Settings) -> int:
    # imported here so 'generate' works without the web stack loaded
    from .server import serve

    serve(settings)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_overrides(args, get_settings())
    except ConfigGeneratorError as e:
        logger.log_error(f"{e.kind}: {e}")
        return 1

    if args.command == "generate":
        return run_generate(args, settings)
    return run_serve(args, settings)


if __name__ == "__main__":
    sys.exit(main())
