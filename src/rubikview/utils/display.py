"""
User-friendly display utilities for rubikview.
"""

import time
from typing import Any, Dict, List, Optional
from datetime import datetime


class StatusDisplay:
    """Handles status display for different operations."""

    @staticmethod
    def print_header(title: str, width: int = 60):
        """Print a formatted header."""
        print("\n" + "=" * width)
        print(f"{title:^{width}}")
        print("=" * width)

    @staticmethod
    def print_section(title: str, width: int = 60):
        """Print a section header."""
        print(f"\n📋 {title}")
        print("-" * width)

    @staticmethod
    def print_config(config_dict: Dict[str, Any], title: str = "Configuration"):
        """Print configuration in a nice format."""
        StatusDisplay.print_section(title)
        for section, values in config_dict.items():
            if isinstance(values, dict):
                print(f"  [{section}]")
                for key, value in values.items():
                    print(f"    {key:<24} : {value}")
            else:
                print(f"  {section:<26} : {values}")

    @staticmethod
    def print_status(message: str, status: str = "info"):
        """Print a status message with appropriate emoji."""
        icons = {
            "info": "ℹ️",
            "success": "✅",
            "warning": "⚠️",
            "error": "❌",
            "processing": "🔄"
        }
        icon = icons.get(status, "ℹ️")
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"{icon} [{timestamp}] {message}")

    @staticmethod
    def print_table(rows: List[List[str]], headers: List[str]):
        """Print rows as a left-aligned plain text table."""
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(str(cell)))
        print("  " + "  ".join(f"{h:<{widths[i]}}" for i, h in enumerate(headers)))
        print("  " + "  ".join("-" * w for w in widths))
        for row in rows:
            print("  " + "  ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(row)))

    @staticmethod
    def print_separator(char: str = "-", length: int = 60):
        """Print a separator line."""
        print(char * length)


class LiveLogger:
    """Live logging with real-time updates."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.move_times: Dict[int, float] = {}

    def log_move_start(self, move_number: int, description: str):
        """Log the start of a turn."""
        if self.verbose:
            StatusDisplay.print_status(f"Turn {move_number}: {description}", "processing")
            self.move_times[move_number] = time.time()

    def log_move_end(self, move_number: int, result: str, success: bool = True):
        """Log the end of a turn."""
        started = self.move_times.pop(move_number, None)
        if self.verbose:
            elapsed = time.time() - started if started is not None else 0.0
            status = "success" if success else "error"
            StatusDisplay.print_status(
                f"Turn {move_number} completed: {result} ({elapsed:.2f}s)",
                status
            )

    def log_result(self, message: str, success: bool = True):
        """Log a result."""
        if self.verbose:
            status = "success" if success else "error"
            StatusDisplay.print_status(message, status)

    def log_info(self, message: str):
        """Log an info message."""
        if self.verbose:
            StatusDisplay.print_status(message, "info")

    def log_warning(self, message: str):
        """Log a warning message. Warnings are shown even when not verbose."""
        StatusDisplay.print_status(message, "warning")

    def log_error(self, message: str):
        """Log an error message."""
        StatusDisplay.print_status(message, "error")


_default_logger: Optional[LiveLogger] = None


def get_logger() -> LiveLogger:
    """Process-wide logger used when a component is not given one."""
    global _default_logger
    if _default_logger is None:
        _default_logger = LiveLogger(verbose=False)
    return _default_logger
