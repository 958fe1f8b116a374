"""
Core value objects describing columns and key roles.
"""

from .columns import ColumnDescriptor, KeyContext, LogicalType

__all__ = ["ColumnDescriptor", "KeyContext", "LogicalType"]
