#!/usr/bin/env python3
"""
latestonly CLI — keep the newest copy of every file content in a directory.
Deletion is permanent: redundant files are removed, not moved to trash.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from latestonly.config import load_config, DEFAULT_CONFIG_FILE
from latestonly.commands import DeduplicationCommand
from latestonly.core.models import DeduplicationParams, ReconcileResult, HashAlgorithm
from latestonly.core.exceptions import LatestOnlyError

EPILOG_TEXT = (
    "Configuration file (JSON, or TOML for *.toml):\n"
    '  {"directory": "/path/to/dir", "hash_logic": "SHA256"}\n'
    f"  hash_logic: one of {', '.join(a.value for a in HashAlgorithm)} (default: MD5)\n"
    "  directory : defaults to the current directory\n\n"
    "Survivors are recorded in results.json inside the scanned directory."
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="latestonly",
            description="latestonly — delete duplicate files, keeping the most recently modified copy",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "config",
            nargs="?",
            default=DEFAULT_CONFIG_FILE,
            type=str,
            help=f"Configuration file. Default: {DEFAULT_CONFIG_FILE} in the current directory"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and detailed statistics"
        )

        return parser.parse_args(args)

    def load_params(self, config_path: str) -> DeduplicationParams:
        try:
            return load_config(config_path)
        except LatestOnlyError as e:
            self.error_exit(f"Configuration error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_deduplication(self, params: DeduplicationParams) -> ReconcileResult:
        """Execute the deduplication workflow."""
        command = DeduplicationCommand()
        if self.verbose:
            print(f"Hashing with {params.algorithm.value}...")

        try:
            result = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except LatestOnlyError as e:
            self.error_exit(f"Deduplication failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print("\nDeduplication Statistics:")
            print(result.stats.print_summary())
        return result

    def output_results(self, result: ReconcileResult) -> None:
        """Print deleted files and a one-line summary."""
        if self.quiet:
            return

        for path in result.deletion_set:
            print(f"   [DEL]  {path}")

        if not result.deletion_set:
            print("No duplicate files found.")
        else:
            print(f"✅ Deleted {len(result.deletion_set)} duplicate file(s).")
        print(f"{len(result.index)} distinct file(s) recorded in the index.")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger("latestonly").setLevel(logging.DEBUG)

        params = self.load_params(args.config)

        if not self.quiet:
            print(f"Scanning directory: {params.directory}")

        result = self.run_deduplication(params)
        self.output_results(result)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
