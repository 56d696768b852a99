"""Command-line argument parsing for dirr.

This module defines the command-line interface for dirr,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirr import __version__
from dirr.exceptions import ConfigurationError
from dirr.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirr.exclusion_rules.name_rules import NameExclusionRules


def create_exclusion_action(
    name_rules: NameExclusionRules, pattern_rules: GitIgnoreExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusion options into rule objects.

    ``-x/--exclude`` adds a directory name to ``name_rules``; ``-i/--ignore`` adds a
    pattern and ``-I/--ignore-file`` loads a pattern file into ``pattern_rules``.
    Patterns keep the order they appear in on the command line. The raw values are
    also collected on the namespace under the option's ``dest``.

    Args:
        name_rules: The exclusion set to update.
        pattern_rules: The gitignore-style rules to update.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-x", "--exclude"):
                name_rules.add_rule(str(values))
            elif option_string in ("-i", "--ignore"):
                pattern_rules.add_rule(str(values))
            else:  # -I/--ignore-file
                try:
                    pattern_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    raise argparse.ArgumentError(self, str(e))

            collected = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, collected + [values])

    return ExclusionRulesAction


def create_parser(
    name_rules: NameExclusionRules, pattern_rules: GitIgnoreExclusionRules
) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        name_rules: The exclusion set to update during parsing.
        pattern_rules: The gitignore-style rules to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirr's options.
    """
    description = """
    dirr: print a directory as a tree.

    Walks a directory depth-first and prints every file and subdirectory on its own
    line, indented under its parent with |-- and |   guides. Entries are listed in
    name order, so the output for an unchanged directory is always the same.

    Directories can be left out by exact name (-x) or with gitignore-style patterns
    (-i, -I). Excluded directories are neither shown nor descended into.
    """

    epilog = """
    Examples:
      # Print the current directory
      dirr

      # Skip version control and dependency directories
      dirr -x .git -x node_modules /path/to/project

      # Skip anything matching gitignore-style patterns
      dirr -i "*.pyc" -i "build/" /path/to/project
      dirr -I .gitignore /path/to/project

      # Show sizes and modification ages
      dirr -m /path/to/project

      # Draw a guide in every column
      dirr -g /path/to/project

      # Stop at the first unreadable directory instead of skipping it
      dirr -P fail /path/to/project

      # Print directory/file counts after the tree
      dirr -s stdout /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dirr",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirr {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(name_rules, pattern_rules)

    parser.add_argument(
        "directory",
        nargs="?",
        default=Path("."),
        type=Path,
        help="The directory to print (default: the current directory).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        type=str,
        metavar="NAME",
        action=ExclusionAction,
        help=(
            "Name of a directory to leave out, matched exactly against directory names at any depth "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern for files and directories to leave out, e.g. '*.log' or 'build/' "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-I",
        "--ignore-file",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File of gitignore-style patterns, such as a .gitignore (can be specified multiple times).",
    )
    parser.add_argument(
        "-m",
        "--meta",
        action="store_true",
        help="Show the size and modification age of each entry.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolic links to directories. By default symlinks are listed but not followed.",
    )
    parser.add_argument(
        "-g",
        "--continuous-guides",
        action="store_true",
        help="Draw a |   guide in every indentation column, even below the last entry of a directory.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["warn", "ignore", "fail"],
        default="warn",
        help="How to handle directories that cannot be read (default: warn).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stdout", "stderr"],
        help="Print directory, file and symlink counts. Valid destinations: stdout, stderr",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ConfigurationError: If any arguments fail validation.
    """
    for name in args.exclude or []:
        if not name or "/" in name or "\\" in name:
            raise ConfigurationError(f"Invalid exclusion name {name!r}: expected a bare directory name")
    if args.output is not None and args.output.is_dir():
        raise ConfigurationError(f"Output path is a directory: {args.output}")
