"""
Input helpers for the Longhorn Network CLI.
"""

from __future__ import annotations


def input_int_in_range(prompt: str, min_val: int, max_val: int) -> int:
    """Keep asking until the user enters an integer in [min_val, max_val]."""
    while True:
        s = input(prompt).strip()
        try:
            val = int(s)
        except ValueError:
            print("Invalid input. Please enter an integer.")
            continue
        if min_val <= val <= max_val:
            return val
        print(f"Please enter an integer between {min_val} and {max_val}.")


def input_text(prompt: str, default: str = "") -> str:
    """Read a line; blank input returns `default`."""
    s = input(prompt).strip()
    return s if s else default
