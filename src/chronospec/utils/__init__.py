"""
chronospec utilities package
"""

from .io_utils import read_spec_file, read_spec_lines

__all__ = ["read_spec_file", "read_spec_lines"]
