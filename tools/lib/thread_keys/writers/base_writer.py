"""Abstract base for thread writers.

This module defines BaseWriter, the abstract interface for serializing
threaded collections to different formats.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List


class BaseWriter(ABC):
    """Abstract base for threaded collection serialization."""

    def write(
        self,
        items: List[Any],
        output_path: Path,
        **options
    ) -> None:
        """Writes items to file in specific format.

        Args:
            items: Records to serialize, in output order.
            output_path: Output file path.
            **options: Format-specific options.

        Raises:
            IOError: If write fails.
        """
        content = self.write_to_string(items, **options)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open('w', encoding='utf-8') as f:
            f.write(content)

    @abstractmethod
    def write_to_string(self, items: List[Any], **options) -> str:
        """Serializes items to string.

        Args:
            items: Records to serialize, in output order.
            **options: Format-specific options.

        Returns:
            Serialized string representation.
        """
