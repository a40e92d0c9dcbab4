"""
Student data loading for the Longhorn Network.
"""

from .students_file import parse_students, parse_student_lines, parse_student_row, load_population

__all__ = ["parse_students", "parse_student_lines", "parse_student_row", "load_population"]
