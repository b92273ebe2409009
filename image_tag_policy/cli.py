#!/usr/bin/env python3

"""
Image Tag Selection Script

Selects the newest image tags matching a tag pattern.
Configuration comes from the environment, candidate tags from the
command line as ``TAG`` or ``TAG@ISO-8601-TIMESTAMP``.

Environment:
    TAG_PATTERN: Pattern to match, e.g. ``semver:~1.2`` (default ``glob:*``)
    STRICT_PATTERN: Reject invalid patterns instead of matching permissively
    POLICY_FILE: Manifest whose annotations hold per-container patterns
    CONTAINER: Container whose pattern to use from POLICY_FILE
    ANNOTATION_PREFIX: Annotation namespace (default ``fluxcd.io/``)
    LOG_LEVEL: Logging level (default ``INFO``)
"""

import os
import sys

from .environment import EnvironmentConfig
from .images import filter_and_sort
from .pattern import new_pattern
from .policy_loader import invalid_patterns, load_policy_file
from .utils import parse_image_arg, parse_log_level, setup_logging


def main(argv=None):
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        setup_logging(parse_log_level(config.log_level))

        # Step 3: Resolve the pattern
        pattern = new_pattern(config.tag_pattern)
        if config.policy_file:
            patterns = load_policy_file(config.policy_file, config.annotation_prefix)
            invalid = invalid_patterns(patterns)
            if config.strict and invalid:
                for name in invalid:
                    print(f"Error: Invalid tag pattern for container '{name}': '{patterns[name]}'")
                sys.exit(1)
            if config.container:
                if config.container not in patterns:
                    print(f"Error: No tag pattern for container '{config.container}' in {config.policy_file}")
                    sys.exit(1)
                pattern = patterns[config.container]

        print(f"Tag pattern: {pattern}")
        if not pattern.valid():
            print("Warning: pattern is not valid, every semver tag will match")

        # Step 4: Rank candidates
        try:
            images = [parse_image_arg(arg) for arg in argv]
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        ranked = filter_and_sort(images, pattern)

        if not ranked:
            print("No matching tags")
            return

        print(f"Matching tags ({len(ranked)}), newest first:")
        for image in ranked:
            print(f"  - {image.tag}")
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
