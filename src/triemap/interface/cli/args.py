from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface of the demo harness and translates the
parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from triemap.domain.config import BACKEND_NAMES, DEMO_NAMES, FORMAT_NAMES, SCALE_NAMES
from triemap.infra.logging.config import DEFAULT_LOG_FILE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the triemap demo harness.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="triemap-demo",
        description="Run trie-map demonstrations: traversal, feature flags, "
                    "limit aggregation, reduction and a two-dimensional map.",
    )

    # --- Demo Selection ---
    p.add_argument(
        "-d", "--demo",
        choices=DEMO_NAMES,
        default=None,
        help="Demo to run (default: traversal).",
    )
    p.add_argument(
        "--backend",
        choices=BACKEND_NAMES,
        default=None,
        help="Key mapping backend of the trees built by the demo.",
    )

    # --- Rendering ---
    p.add_argument(
        "-f", "--format",
        dest="render_format",
        choices=FORMAT_NAMES,
        default=None,
        help="Text shape used when trees are rendered.",
    )
    p.add_argument(
        "--data-tag",
        dest="data_tag",
        default=None,
        help="Label of the data member in rendered nodes.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Render the trees built by the demo.",
    )

    # --- Reduction Demo ---
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the reduction demo.",
    )
    p.add_argument(
        "--size",
        dest="scale",
        choices=SCALE_NAMES,
        default=None,
        help="Size of the organization generated by the reduction demo.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration overrides.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore --config and start from the built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=DEFAULT_LOG_FILE,
        default=None,
        help=f"Also write logs to this rotating file (default name: {DEFAULT_LOG_FILE}).",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the demo result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None and do not override anything.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "demo": args.demo,
        "backend": args.backend,
        "render_format": args.render_format,
        "data_tag": args.data_tag,
        "seed": args.seed,
        "scale": args.scale,
    }

    if args.verbose:
        overrides["verbose"] = True

    return overrides
