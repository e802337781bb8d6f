"""Writes rendered artifacts to the output directory."""

import logging
import os
import tempfile
from pathlib import Path

from ..errors import ArtifactWriteError
from ..models.artifact import OutputArtifact

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Stores artifacts as UTF-8 files, replacing any previous version."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def write(self, artifact: OutputArtifact) -> Path:
        """
        Write an artifact to disk.

        The content goes to a temporary file in the same directory first and
        is then renamed over the target, so readers never see a partial file.

        Args:
            artifact: The artifact to write

        Returns:
            Path of the written file
        """
        path = self.path_for(artifact)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                    f.write(artifact.content)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ArtifactWriteError(f"Could not write {path}: {e}") from e

        logger.debug("Wrote %s (%d bytes)", path, artifact.size_bytes)
        return path

    def path_for(self, artifact: OutputArtifact) -> Path:
        return self.output_dir / artifact.file_name
