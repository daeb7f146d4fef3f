"""Command-line entry point for fabric8-kube."""

import argparse
import json
import logging
import sys
from typing import Any

import yaml
from kubernetes.client import ApiException  # type: ignore[import-untyped]
from pydantic import ValidationError

from fabric8_kube import __version__
from fabric8_kube.client import KubeClient
from fabric8_kube.config import KubeClientConfig, LogLevel
from fabric8_kube.utils.errors import Fabric8Error


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fabric8-kube",
        description="Inspect fabric8 environments and their quotas on OpenShift",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Connection options
    parser.add_argument(
        "--cluster-url",
        default=None,
        help="Cluster API URL (default: FABRIC8_KUBE_CLUSTER_URL)",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Bearer token (default: FABRIC8_KUBE_BEARER_TOKEN)",
    )
    parser.add_argument(
        "--namespace",
        default=None,
        help="User namespace holding fabric8-environments (default: FABRIC8_KUBE_USER_NAMESPACE)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification",
    )

    # Output
    parser.add_argument(
        "--output",
        "-o",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("environments", help="List all environments with their quotas")
    env_parser = subparsers.add_parser("environment", help="Show the quota of one environment")
    env_parser.add_argument("name", help="Environment name")
    space_parser = subparsers.add_parser("space", help="List the applications of a space")
    space_parser.add_argument("space_id", help="Space identifier")
    subparsers.add_parser("endpoints", help="Show the cluster API and metrics URLs")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> KubeClientConfig:
    """Build config from args, falling back to environment/defaults."""
    config_kwargs: dict[str, Any] = {}

    if args.cluster_url:
        config_kwargs["cluster_url"] = args.cluster_url

    if args.token:
        config_kwargs["bearer_token"] = args.token

    if args.namespace:
        config_kwargs["user_namespace"] = args.namespace

    if args.insecure:
        config_kwargs["verify_ssl"] = False

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    return KubeClientConfig(**config_kwargs)


def render(result: Any, output: str) -> str:
    """Render a model, or a list of models, as JSON or YAML."""
    if isinstance(result, list):
        data: Any = [item.model_dump(mode="json") for item in result]
    else:
        data = result.model_dump(mode="json")
    if output == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2)


def run_command(client: Any, args: argparse.Namespace) -> Any:
    """Dispatch a sub-command to the client."""
    if args.command == "environments":
        return client.get_environments()
    if args.command == "environment":
        return client.get_environment(args.name)
    if args.command == "space":
        return client.get_space(args.space_id)
    return client.endpoints


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as e:
        setup_logging(LogLevel.INFO)
        logging.getLogger(__name__).error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    try:
        client = KubeClient(config)
        result = run_command(client, args)
    except (Fabric8Error, ApiException) as e:
        logger.error(str(e))
        return 1

    print(render(result, args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
