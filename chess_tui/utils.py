import logging
import os
import platform

logger = logging.getLogger(__name__)

MIN_COLUMNS = 60
MIN_ROWS = 16


def check_terminal_support(term):
    """
    Log warnings about terminal features the board relies on.

    Returns:
        List of warning strings, empty when everything looks fine
    """
    warnings = []

    if term.width < MIN_COLUMNS or term.height < MIN_ROWS:
        warnings.append(f"Terminal size ({term.width}x{term.height}) may be too small. "
                        f"Recommended: {MIN_COLUMNS}x{MIN_ROWS} or larger.")

    if term.number_of_colors < 256:
        warnings.append(f"Terminal ({term.kind}) reports {term.number_of_colors} colors; "
                        "board themes will be approximated.")

    for warning in warnings:
        logger.warning(warning)
    return warnings


def get_platform_info():
    """Get information about the platform."""
    return {
        'system': platform.system(),
        'release': platform.release(),
        'python_version': platform.python_version(),
        'terminal': os.environ.get('TERM', 'unknown'),
    }
