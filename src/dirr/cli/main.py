"""Command-line interface for dirr.

This module provides the command-line entry point: it parses arguments, walks the
requested directory, reports skipped subtrees and writes the rendered tree.

Key Features:
    - Directory tree visualization with |-- and |   guides
    - Exclusion of directories by exact name (-x)
    - Gitignore-style pattern exclusions (-i, -I)
    - Size and modification age annotations (-m)
    - Symlink following with loop detection (-L)
    - Unreadable directory handling (warn/ignore/fail)
    - Output redirection and summary counts

Error Reporting:
    Warnings about skipped directories and all error messages go to stderr, so
    the tree on stdout stays intact. The tree is built completely before any
    of it is written: when the root cannot be read, stdout stays empty.

Exit Codes:
    0: Successful completion (skipped subtrees included)
    1: Unreadable root, unreadable subtree with -P fail, or other runtime error
    2: Command-line syntax or configuration error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g. piping into `head`)

Example:
    # Print the current directory
    $ dirr

    # Skip some directories
    $ dirr -x .git -x node_modules /path/to/project
"""

import os
import sys
from typing import Mapping

from dirr.cli.argparser import create_parser, validate_args
from dirr.cli.safe_writer import SafeWriter
from dirr.exceptions import ConfigurationError, FilesystemError
from dirr.exclusion_rules.composite_rules import CompositeExclusionRules
from dirr.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirr.exclusion_rules.name_rules import NameExclusionRules
from dirr.file_system_tree.file_system_tree import FileSystemTree
from dirr.file_system_tree.unreadable_action import UnreadableAction


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping with ``directories``, ``files`` and ``symlinks`` counts.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Symlinks: {counts['symlinks']}",
        ]
    )


def silence_stdout() -> None:
    """Point stdout at the null device so shutdown does not report the broken pipe again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main() -> None:
    """Main entry point for the dirr command-line interface.

    Exit codes:
        0: Successful completion
        1: Unreadable root or other runtime error
        2: Command-line syntax or configuration error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        # Rule objects are populated by the parser's exclusion action
        name_rules = NameExclusionRules()
        pattern_rules = GitIgnoreExclusionRules()

        parser = create_parser(name_rules, pattern_rules)
        args = parser.parse_args()

        validate_args(args)

        unreadable_action = {
            "warn": UnreadableAction.SKIP,
            "ignore": UnreadableAction.SKIP,
            "fail": UnreadableAction.RAISE,
        }[args.permission_action]

        tree = FileSystemTree(
            args.directory,
            exclusion_rules=CompositeExclusionRules([name_rules, pattern_rules]),
            unreadable_action=unreadable_action,
            follow_symlinks=args.follow_symlinks,
            collect_metadata=args.meta,
        )

        # Build the whole tree before writing anything
        tree.get_tree()

        if args.permission_action == "warn":
            for error in tree.errors:
                print(f"Warning: {error}", file=sys.stderr)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            for line in tree.stream_tree_representation(
                show_meta=args.meta, continuous_guides=args.continuous_guides
            ):
                safe_writer.write_line(line)

            if args.summary:
                counts = {
                    "directories": tree.get_directory_count(),
                    "files": tree.get_file_count(),
                    "symlinks": tree.get_symlink_count(),
                }
                count_output_str = format_counts(counts)

                if args.summary == "stdout":
                    safe_writer.write("\n" + count_output_str + "\n")
                else:
                    print(count_output_str, file=sys.stderr)

    except BrokenPipeError:
        silence_stdout()
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except ConfigurationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(2)
    except FilesystemError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
