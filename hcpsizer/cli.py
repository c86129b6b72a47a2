"""Command-line entry point for the HCP sizer."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from hcpsizer.constants.defaults import OUTPUT_FORMAT_DEFAULT
from hcpsizer.constants.enums import OutputFormat
from hcpsizer.constants.values import APP_DESCRIPTION, APP_NAME, STYLE_WARNING
from hcpsizer.console import SizingInputCollector, SizingPresenter
from hcpsizer.controllers.cluster.controller import (
    ClusterConnectionError,
    ClusterController,
    ClusterDiscoveryError,
)
from hcpsizer.models.core.node_info import DiscoveryResult
from hcpsizer.models.state import AppSettings, ConfigError, ConfigManager
from hcpsizer.sizing import HCPSizingCalculator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument(
        "--discover",
        action="store_true",
        help="Read worker node capacity from the current cluster instead of prompting for it",
    )
    parser.add_argument("--context", help="kubectl context to use with --discover")
    parser.add_argument("--kubeconfig", help="kubeconfig file to use with --discover")
    parser.add_argument(
        "--config",
        help="Settings file (default: $HCP_SIZER_CONFIG or ~/.config/hcp-sizer/settings.yaml)",
    )
    parser.add_argument(
        "--output",
        choices=[fmt.value for fmt in OutputFormat],
        default=OUTPUT_FORMAT_DEFAULT,
        help="Result format",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a settings file with the default values and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(level: str, console: Console) -> None:
    """Route log records through rich on the given (stderr) console."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _build_controller(settings: AppSettings, args: argparse.Namespace) -> ClusterController:
    return ClusterController(
        context=args.context or settings.kube_context or None,
        kubeconfig=args.kubeconfig or settings.kubeconfig or None,
        label_selector=settings.node_label_selector,
        default_max_pods=settings.default_max_pods,
    )


def run(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    err_console: Console | None = None,
    stream: TextIO | None = None,
) -> int:
    """Run one sizing session and return the process exit status."""
    args = build_parser().parse_args(argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)
    output_format = OutputFormat(args.output)

    if args.init_config:
        try:
            ConfigManager.reset(args.config)
        except ConfigError as e:
            err_console.print(f"Failed to save settings: {e}", style=STYLE_WARNING, markup=False)
            return 1
        console.print(
            f"Wrote default settings to {ConfigManager.config_path(args.config)}", markup=False
        )
        return 0

    try:
        settings = ConfigManager.load(args.config)
    except ConfigError as e:
        err_console.print(f"Failed to load settings: {e}", style=STYLE_WARNING, markup=False)
        return 1

    configure_logging("DEBUG" if args.verbose else settings.log_level, err_console)

    # Keep stdout clean for machine-readable output.
    interactive_console = err_console if output_format is OutputFormat.JSON else console
    presenter = SizingPresenter(console)

    discovery: DiscoveryResult | None = None
    if args.discover:
        controller = _build_controller(settings, args)
        try:
            discovery = asyncio.run(controller.connect_and_discover())
        except ClusterConnectionError as e:
            err_console.print(
                f"Failed to initialize Kubernetes client: {e}",
                style=STYLE_WARNING,
                markup=False,
            )
            return 1
        except ClusterDiscoveryError as e:
            err_console.print(
                f"Failed to fetch data from Kubernetes cluster: {e}",
                style=STYLE_WARNING,
                markup=False,
            )
            return 1
        except KeyboardInterrupt:
            err_console.print("Discovery aborted", style=STYLE_WARNING)
            return 1
        SizingPresenter(interactive_console).render_discovery(discovery)

    collector = SizingInputCollector(interactive_console, stream=stream)
    try:
        request = collector.collect(discovery)
    except (KeyboardInterrupt, EOFError):
        err_console.print("Prompt failed: input aborted", style=STYLE_WARNING)
        return 1

    constants = settings.effective_sizing_constants()
    logger.debug("Sizing constants: %s", constants.model_dump())
    calculator = HCPSizingCalculator(constants)
    result = calculator.compute(
        request.node,
        request.workload,
        planned_pod_count=request.planned_pod_count,
        node_count=request.node_count,
    )

    if output_format is OutputFormat.JSON:
        presenter.render_json(result, discovery)
    else:
        presenter.render_result(result)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
