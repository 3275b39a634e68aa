"""
Configuration management for the list benchmark.
Loads settings from environment variables and .env file.
"""

import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def parse_sizes(raw: str) -> List[int]:
    """Parse a comma-separated list of operation counts."""
    return [int(part) for part in raw.split(",") if part.strip()]


class Config:
    """Central configuration management."""

    # ==========================================================================
    # Benchmark Settings
    # ==========================================================================
    DEFAULT_SIZES: List[int] = parse_sizes(os.getenv("DEFAULT_SIZES", "1000,5000,10000,20000"))
    DETAIL_SIZE: int = int(os.getenv("DETAIL_SIZE", "10000"))

    # Differences below this many nanoseconds are reported as a tie
    TIE_TOLERANCE_NS: int = int(os.getenv("TIE_TOLERANCE_NS", "1000"))
    RANDOM_SEED: int = int(os.getenv("RANDOM_SEED", "42"))

    # Seconds to sleep between operation counts
    PAUSE_BETWEEN_RUNS: float = float(os.getenv("PAUSE_BETWEEN_RUNS", "0.5"))

    # ==========================================================================
    # Sequence Variants
    # ==========================================================================
    VARIANT_A: str = os.getenv("VARIANT_A", "list")
    VARIANT_B: str = os.getenv("VARIANT_B", "deque")
