#!/usr/bin/env python3
"""
duplifind CLI — Command line interface for duplicate file detection.
Finds groups of files with byte-identical content; never modifies or deletes anything.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with its dependencies:", file=sys.stderr)
    print("   pip install duplifind", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from duplifind import __version__
from duplifind.core.models import DeduplicationParams, DuplicateGroup
from duplifind.commands import DeduplicationCommand
from duplifind.reporting import ConsoleReporter
from duplifind.aliases import FILTER_HELP_TEXT, WORKERS_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.reporter: ConsoleReporter = ConsoleReporter()

        # Fix encoding for Windows consoles; undecodable file names are escaped, not fatal
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="duplifind",
            description="duplifind — find files with identical content in a directory tree",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--root-folder", "-r",
            required=True,
            type=str,
            metavar="FOLDER_PATH",
            dest="root_folder",
            help="Root folder to search recursively"
        )

        # Filtering options
        parser.add_argument(
            "--file-filter", "-f",
            default=None,
            type=str,
            metavar="FILENAME_PATTERN",
            dest="file_filter",
            help=FILTER_HELP_TEXT
        )

        # Performance options
        parser.add_argument(
            "--workers", "-w",
            default=1,
            type=int,
            metavar="N",
            help=WORKERS_HELP_TEXT
        )
        parser.add_argument(
            "--no-quick-check",
            action="store_false",
            dest="quick_check",
            help="Skip the quick check of the first 64KB and hash every same-size file in full"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress, debug logging and detailed statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")
        if args.workers < 1:
            self.error_exit(f"Number of workers must be at least 1, got {args.workers}")
        if not args.root_folder:
            self.error_exit("Root folder cannot be empty")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams.from_cli_values(
                root_dir=args.root_folder,
                pattern=args.file_filter,
                workers=args.workers,
                quick_check=args.quick_check,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_deduplication(self, params: DeduplicationParams) -> List[DuplicateGroup]:
        """Execute the scan and hash pipeline."""
        command = DeduplicationCommand(reporter=self.reporter)

        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except OSError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print(f"Scanned {len(command.get_files())} candidate files", file=sys.stderr)
            print(stats.print_summary(), file=sys.stderr)

        return groups

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args: Optional[List[str]] = None) -> None:
        """Main entry point with conditional output behavior."""
        parsed = self.parse_args(args)
        self.verbose = parsed.verbose
        self.quiet = parsed.quiet
        self.reporter = ConsoleReporter(quiet=self.quiet)

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(parsed)
        params = self.create_params(parsed)

        self.reporter.describe_search(params.root_dir, params.file_filter)
        if params.workers > 1 and not self.quiet:
            print(f"Hashing with {params.workers} worker threads", file=sys.stderr)

        groups = self.run_deduplication(params)
        self.reporter.render(groups)

        # Show completion time
        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
