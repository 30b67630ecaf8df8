"""CLI entry point for navoiy-deployer."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="navoiy-deployer",
        description=(
            "Publish the Navoiy-Terra corpus to GitHub: expand the PLT layer, "
            "render the Terra assets, upload the corpus and update the central README"
        ),
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory containing navoiy-deploy.yml (default: current directory)",
    )
    parser.add_argument(
        "--corpus-path",
        type=Path,
        default=None,
        help="Corpus directory to expand and upload (overrides config)",
    )
    parser.add_argument(
        "--branch",
        default=None,
        help="Branch to write to (overrides config, default: main)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate local files and show what would be pushed, without calling GitHub",
    )
    parser.add_argument(
        "--skip-readme",
        action="store_true",
        help="Do not update the central repository README",
    )
    parser.add_argument(
        "--generate-config",
        action="store_true",
        help="Write a default navoiy-deploy.yml to the project root and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate_config:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root, settings.config_file))

    # Import here to keep --help and --version fast
    from .cli.deploy import run_deploy
    from .cli.output import error
    from .services import ConfigService

    config_service = ConfigService(settings.project_root, settings.config_file)
    config = config_service.get_config()
    if config_service.has_config_error:
        error(config_service.config_error or "Invalid configuration")
        raise SystemExit(1)

    if args.branch:
        config.github.branch = args.branch
    corpus_path = args.corpus_path or config_service.corpus_path

    raise SystemExit(
        run_deploy(config, corpus_path, dry_run=args.dry_run, skip_readme=args.skip_readme)
    )


if __name__ == "__main__":
    main()
