import argparse
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Config:
    """Configuration for the E2E smoke test runner."""

    lambda_function_name: str
    description: str = "Bucket Lister Smoke Test"
    aws_region: Optional[str] = None
    compare_with_account: bool = False
    timeout_seconds: int = 60
    report_file: Optional[str] = None
    verbose: bool = False
    raw_config: Dict[str, Any] = field(default_factory=dict, repr=False)


def load_configuration(args: argparse.Namespace) -> Config:
    """Loads configuration from file and overrides with CLI arguments."""
    config_data = {}
    if args.config:
        try:
            with open(args.config) as f:
                config_data = json.load(f)
        except FileNotFoundError as e:
            raise FileNotFoundError(
                f"Error: Configuration file '{args.config}' not found."
            ) from e

    description = config_data.pop("description", "Bucket Lister Smoke Test")
    cli_args = {
        key: value
        for key, value in vars(args).items()
        if value is not None and key != "config"
    }
    config_data.update(cli_args)
    raw_config = config_data.copy()
    config_data["description"] = description

    if not config_data.get("lambda_function_name"):
        raise ValueError("The --lambda-function-name option is required.")

    return Config(raw_config=raw_config, **config_data)
