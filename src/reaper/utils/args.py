"""Argument parsing utilities for reaper."""

import argparse
import ast
from typing import List


def string_to_list(s: str) -> List:
    """Convert string input to a list using ast.literal_eval.

    Args:
        s: String representation of a list (e.g., "[1, 2, 3]")

    Returns:
        Parsed list

    Raises:
        argparse.ArgumentTypeError: If input is not a valid list
    """
    try:
        result = ast.literal_eval(s)
    except (ValueError, SyntaxError):
        raise argparse.ArgumentTypeError("Input must be a valid list.")
    if not isinstance(result, list):
        raise argparse.ArgumentTypeError("Input must be a valid list.")
    return result


def is_all_ints(lst: List) -> bool:
    """Check that a flat list contains only integers (bools excluded)."""
    return all(isinstance(item, int) and not isinstance(item, bool) for item in lst)


def string_to_tokens(s: str) -> List[int]:
    """Parse a list of ring tokens written as integer literals.

    Args:
        s: String representation of the tokens (e.g., "[0, 42, -7]")

    Returns:
        Tokens sorted in ring order

    Raises:
        argparse.ArgumentTypeError: If input is not a non-empty list of ints
    """
    tokens = string_to_list(s)
    if not tokens:
        raise argparse.ArgumentTypeError("Token list must not be empty.")
    if not is_all_ints(tokens):
        raise argparse.ArgumentTypeError("Tokens must be integers.")
    return sorted(tokens)
