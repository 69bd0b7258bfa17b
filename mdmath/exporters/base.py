"""base exporter interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from mdmath.core.models import Document


class Exporter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for document exporters."""

    @abstractmethod
    def export(
        self,
        document: Document,
        destination: Path,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """
        Export a document to the destination.

        Args:
            document: The document to export
            destination: Directory to write the export into
            dry_run: If True, don't actually write anything
            overwrite: If True, replace an existing output file

        Returns:
            Path written (or that would be written), None if skipped
        """
        ...  # pylint: disable=unnecessary-ellipsis
