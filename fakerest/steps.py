"""Step-by-step log narration for live API scenarios."""
import logging
import time

logger = logging.getLogger(__name__)

BANNER = "═" * 59
RULE = "─" * 61


class StepLogger:
    """Logs the section, numbered steps and outcome of one test scenario."""

    def __init__(self, name: str):
        self.name = name

    def start_class(self):
        logger.info(BANNER)
        logger.info(f"Starting Test Class: {self.name}")
        logger.info(BANNER)
        logger.info(f"Test execution timestamp: {int(time.time() * 1000)}")

    def end_class(self):
        logger.info(BANNER)
        logger.info(f"Completed Test Class: {self.name}")
        logger.info(BANNER)

    def section(self, title: str):
        logger.info(RULE)
        logger.info(f"TEST: {self.name} - {title}")
        logger.info(RULE)

    def step(self, number: int, description: str):
        logger.info(f"Step {number}: {description}")

    def success(self, message: str):
        logger.info(f"✓ SUCCESS: {message}")

    def failure(self, message: str):
        logger.error(f"✗ FAILURE: {message}")

    def info(self, message: str):
        logger.info(f"ℹ INFO: {message}")
