"""
Logger Configuration Module

Handles logging setup for newsletter runs.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from strands.telemetry import StrandsTelemetry

# Load environment variables from .env file
load_dotenv()

# Initialize Strands telemetry for logging
strands_telemetry = StrandsTelemetry()
if "OTEL_EXPORTER_OTLP_ENDPOINT" in os.environ:
    strands_telemetry.setup_otlp_exporter()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def create_logger(log_dir: str = "logs") -> logging.Logger:
    # Create logs directory if it doesn't exist
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    # Configure strands logger to write to file
    strands_logger = logging.getLogger("strands")
    strands_logger.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(
        Path(log_dir) / "strands_agents.log", encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    strands_logger.addHandler(file_handler)

    # Run log shared by the newsletter logger and the package modules
    run_handler = logging.FileHandler(
        Path(log_dir) / "newsletter_runs.log", encoding="utf-8"
    )
    run_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s | %(message)s"))

    package_logger = logging.getLogger("newsletter_orchestrator")
    package_logger.setLevel(logging.INFO)
    package_logger.addHandler(run_handler)

    newsletter_logger = logging.getLogger("newsletter")
    newsletter_logger.setLevel(logging.INFO)
    newsletter_logger.addHandler(run_handler)
    newsletter_logger.addHandler(console_handler)

    return newsletter_logger


newsletter_logger: logging.Logger | None = None


def setup_logging(log_dir: str = "logs") -> logging.Logger:
    global newsletter_logger
    if newsletter_logger is None:
        newsletter_logger = create_logger(log_dir)
    return newsletter_logger
