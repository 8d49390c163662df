import argparse
import json
import sys
from importlib import metadata
from pathlib import Path

from poco2csla.config import Poco2CslaConfig, load_config, save_config
from poco2csla.core.generator import GenerationOrchestrator
from poco2csla.core.variants import ALL_TOKEN, tokens
from poco2csla.exceptions import Poco2CslaError
from poco2csla.utils.logging_utils import get_logger, setup_from_config

logger = get_logger(__name__)


def get_version() -> str:
    """Version of the installed distribution, read once at startup."""
    try:
        return metadata.version("poco2csla")
    except metadata.PackageNotFoundError:
        from poco2csla import __version__

        return __version__


def existing_file(value: str) -> Path:
    """argparse type for the input file."""
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError("File does not exist")
    return path


def variant_token(value: str) -> str:
    """argparse type for --type; accepts tokens case-insensitively."""
    for token in tokens():
        if token.lower() == value.lower():
            return token
    raise argparse.ArgumentTypeError(
        f"invalid choice: '{value}' (choose from {', '.join(tokens())})"
    )


def namespace_name(value: str) -> str:
    """argparse type for --namespace; an empty namespace is not a valid C# namespace."""
    if not value.strip():
        raise argparse.ArgumentTypeError("namespace must not be empty")
    return value


def build_parser(version: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poco2csla",
        description=f"poco2csla v{version}",
    )
    parser.add_argument("--version", action="version", version=f"poco2csla {version}")

    parser.add_argument(
        "input_file", type=existing_file, help="The file that contains the POCO class."
    )
    parser.add_argument(
        "-d",
        "--dest",
        "--d",
        dest="dest",
        help="The directory that will contain the CSLA class(es).",
    )
    parser.add_argument(
        "-t",
        "--type",
        "--t",
        dest="types",
        type=variant_token,
        nargs="+",
        action="extend",
        metavar="TYPE",
        help=f"The type(s) of CSLA object(s) to generate: {', '.join(tokens())} (default: {ALL_TOKEN})",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        type=namespace_name,
        help="Namespace of the generated class(es) (default: inferred or the POCO's namespace)",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument(
        "--save-config",
        metavar="PATH",
        help="Write the effective configuration to a YAML file before generating",
    )
    parser.add_argument("--json", action="store_true", help="Output results in JSON format")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging (DEBUG level)"
    )
    return parser


def main(argv: list[str] | None = None, version: str | None = None) -> int:
    parser = build_parser(version or get_version())
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else Poco2CslaConfig()
    except Poco2CslaError as e:
        parser.exit(2, f"{parser.prog}: error: {e}\n")

    setup_from_config(config.logging, verbose=args.verbose)

    requested = args.types or [ALL_TOKEN]

    try:
        if args.save_config:
            save_config(config, args.save_config)
            logger.info(f"Saved configuration to {args.save_config}")

        orchestrator = GenerationOrchestrator(config=config)
        result = orchestrator.generate(
            str(args.input_file),
            explicit_destination=args.dest,
            requested_variants=requested,
            explicit_namespace=args.namespace,
        )
    except Poco2CslaError as e:
        if args.json:
            print(json.dumps({"status": "error", "error": str(e)}))
        else:
            logger.error(f"Error generating CSLA classes: {e}")
        return 1

    if args.json:
        output = {
            "status": "success",
            "class_name": result.class_name,
            "namespace": result.namespace,
            "destination": result.destination,
            "files": result.written_files,
        }
        print(json.dumps(output, indent=2))
    else:
        for path in result.written_files:
            print(path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
