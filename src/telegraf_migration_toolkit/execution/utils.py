"""
Execution utility functions.

This module contains utility functions used by execution operations.
"""

from tqdm import tqdm


def create_progress_bar(total: int, desc: str = "Processing", unit: str = "files", disable: bool = False):
    """Create a tqdm progress bar with consistent styling.

    Args:
        total: Total number of items to process
        desc: Description for the progress bar
        unit: Unit of measurement (files, sections, etc.)
        disable: Whether to disable the progress bar (for debug output)

    Returns:
        tqdm progress bar instance
    """
    return tqdm(
        total=total,
        desc=desc,
        unit=unit,
        disable=disable,
        bar_format='{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}, {rate_fmt}]',
        colour='green',
        ncols=120
    )
