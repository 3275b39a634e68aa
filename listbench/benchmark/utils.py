"""
Utility functions for benchmark module.
Separated to avoid circular imports.
"""

import platform
import socket
import time
from typing import Dict


def get_machine_info() -> Dict[str, str]:
    """
    Get machine information for report context.

    Returns:
        Dictionary with machine details including:
        - hostname: Machine hostname
        - platform: OS platform info
        - machine: CPU architecture
        - python: Interpreter implementation and version
        - timer: Clock behind perf_counter_ns and its resolution
    """
    clock = time.get_clock_info("perf_counter")
    return {
        "hostname": socket.gethostname(),
        "platform": f"{platform.system()} {platform.release()}",
        "machine": platform.machine() or "unknown",
        "python": f"{platform.python_implementation()} {platform.python_version()}",
        "timer": f"{clock.implementation} ({clock.resolution:.0e}s)",
    }
