from __future__ import annotations

"""
Demo Runner.

Resolves a demo by name, normalizes the configuration it runs with and hands
back its DemoResult.
"""

import logging
from types import ModuleType
from typing import Any, Dict, Optional

from triemap.demos import aggregation, feature_flags, geo_org, reduction, traversal
from triemap.domain.demo_models import DemoResult
from triemap.domain.validator import validate_config

logger = logging.getLogger(__name__)

DEMOS: Dict[str, ModuleType] = {
    traversal.DEMO_NAME: traversal,
    feature_flags.DEMO_NAME: feature_flags,
    aggregation.DEMO_NAME: aggregation,
    reduction.DEMO_NAME: reduction,
    geo_org.DEMO_NAME: geo_org,
}


def run_demo(config: Optional[Dict[str, Any]]) -> DemoResult:
    """
    Run the demo selected by the configuration.

    Args:
        config: Raw or partial configuration; missing keys take defaults.

    Returns:
        DemoResult: Outcome reported by the demo.
    """
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    name = cfg["demo"]
    logger.info(f"Running demo '{name}' (backend={cfg['backend']}, format={cfg['render_format']})")
    result = DEMOS[name].run(cfg)
    logger.debug(f"Demo '{name}' finished (ok={result.ok})")
    return result
