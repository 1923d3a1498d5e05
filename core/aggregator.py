"""
Aggregator - Runs every line check concurrently and merges the results.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Sequence

from core.line_checker import LineChecker, FAILURE_TEMPLATE
from models.check_result import CheckResult
from models.line_config import LineConfig
from models.line_status import LineStatus, UNKNOWN


class Aggregator:
    """Fan-out/fan-in over LineChecker."""

    def __init__(self, checker: LineChecker):
        self.checker = checker
        self.logger = logging.getLogger('Aggregator')

    async def run(self, configs: Sequence[LineConfig]) -> CheckResult:
        """
        Check all lines concurrently.

        Args:
            configs: Lines in configuration order

        Returns:
            CheckResult with lines in configuration order
        """
        checked_at = datetime.now(timezone.utc)
        self.logger.info(f"Checking {len(configs)} lines...")

        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.checker.check, config) for config in configs),
            return_exceptions=True,
        )

        lines = []
        for config, outcome in zip(configs, outcomes):
            if isinstance(outcome, BaseException):
                self.logger.error(f"Check crashed for {config.name}: {outcome!r}")
                outcome = LineStatus(
                    line=config.name,
                    operator=config.operator,
                    status=UNKNOWN,
                    message=FAILURE_TEMPLATE.format(error=outcome),
                )
            lines.append(outcome)

        return CheckResult(lines=lines, checked_at=checked_at)

    def check_all(self, configs: Sequence[LineConfig]) -> CheckResult:
        """Synchronous wrapper around run()."""
        return asyncio.run(self.run(configs))
