"""Output writers for threaded collections."""

from thread_keys.writers.base_writer import BaseWriter
from thread_keys.writers.json_writer import JsonWriter
from thread_keys.writers.tree_writer import TreeWriter

__all__ = ['BaseWriter', 'JsonWriter', 'TreeWriter']
