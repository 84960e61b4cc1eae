#!/usr/bin/env python

# e2e_tests/main.py

import argparse

from components.config import load_configuration
from components.pre_flight import verify_aws_connectivity
from components.runner import SmokeTestRunner


def main():
    """Main entry point for the smoke test script."""
    parser = argparse.ArgumentParser(
        description="End-to-end smoke test for the Bucket Lister Lambda function.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("-c", "--config", help="Path to a JSON configuration file.")
    parser.add_argument(
        "-f", "--lambda-function-name", help="Name or ARN of the deployed function."
    )
    parser.add_argument("--aws-region", help="AWS region of the deployed function.")
    parser.add_argument(
        "--compare-with-account",
        action="store_true",
        default=None,
        help="Also call ListBuckets directly and require an exact match.",
    )
    parser.add_argument(
        "--timeout-seconds", type=int, help="Client read timeout for the invocation."
    )
    parser.add_argument("--report-file", help="Write a JUnit XML report to this path.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output, including full exception tracebacks.",
    )

    args = parser.parse_args()

    # 1. Load the configuration object first.
    config = load_configuration(args)

    # 2. Run the pre-flight check. This function will exit the script on failure.
    session = verify_aws_connectivity(config)

    # 3. If the check passes, we can safely run the smoke test.
    runner = SmokeTestRunner(config, session=session)
    exit(runner.run())


if __name__ == "__main__":
    main()
