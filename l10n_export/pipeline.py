"""Export pipeline: read collections, pair languages, render and write artifacts."""

import asyncio
import logging
from typing import Dict, List, Optional

from .config import Config, Platform
from .emitters import Emitter, get_emitter
from .models.artifact import OutputArtifact
from .models.documents import CollectionExport, FlatEntry
from .processing.flattener import flatten
from .processing.matcher import assert_same_shape, select_by_language
from .storage.artifact_writer import ArtifactWriter
from .storage.document_store import DocumentStore

logger = logging.getLogger(__name__)


class ExportPipeline:
    """Runs one export for the platform selected in the config."""

    def __init__(
        self,
        config: Config,
        store: DocumentStore,
        writer: Optional[ArtifactWriter] = None,
        emitter: Optional[Emitter] = None,
    ):
        self.config = config
        self.platform = config.target_platform
        self.store = store
        self.writer = writer or ArtifactWriter(config.output_dir)
        self.emitter = emitter or get_emitter(
            self.platform,
            **self._emitter_options(),
        )

    async def run(self, dry_run: bool = False) -> List[OutputArtifact]:
        """
        Export every collection and write one artifact per language.

        Nothing is written unless all collections were read and validated.

        Args:
            dry_run: Render the artifacts without writing them

        Returns:
            The rendered artifacts, in language order
        """
        entries = await self.collect()
        artifacts = self.render(entries)

        if dry_run:
            logger.info("Dry run, %d artifacts not written", len(artifacts))
            return artifacts

        for artifact in artifacts:
            self.writer.write(artifact)
        return artifacts

    async def collect(self) -> Dict[str, List[FlatEntry]]:
        """Read all collections concurrently and return flattened entries per language code."""
        exports = await self.collect_collections()

        merged: Dict[str, List[FlatEntry]] = {lang.code: [] for lang in self.config.languages}
        for export in exports:
            for code, items in merged.items():
                items.extend(export.entries_for(code))
        return merged

    async def collect_collections(self) -> List[CollectionExport]:
        """Process every collection; results follow the store's collection order."""
        names = await self.store.list_collection_names()
        logger.info("Exporting %d collections for %s", len(names), self.platform.value)

        tasks = [asyncio.ensure_future(self.process_collection(name)) for name in names]
        # Barrier: nothing is merged until every collection has been processed
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            # The first failure aborts the run; stop the reads still in flight
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def process_collection(self, name: str) -> CollectionExport:
        """Read one collection, pair its language documents and flatten them."""
        documents = await self.store.fetch_documents(name)
        if not documents:
            logger.debug("Collection %r is empty, skipped", name)
            return CollectionExport(name=name)

        source, *others = [
            select_by_language(name, documents, lang.code) for lang in self.config.languages
        ]
        for other in others:
            assert_same_shape(source, other)

        export = CollectionExport(name=name)
        for doc in [source, *others]:
            export.entries[doc.lang] = flatten(name, doc)
        logger.debug("Collection %r: %d keys", name, len(export.entries[source.lang]))
        return export

    def render(self, entries: Dict[str, List[FlatEntry]]) -> List[OutputArtifact]:
        artifacts = []
        for lang in self.config.languages:
            items = entries.get(lang.code, [])
            artifacts.append(
                OutputArtifact(
                    platform=self.platform,
                    language=lang.label,
                    file_name=self.emitter.file_name(lang.label),
                    content=self.emitter.render(items),
                    entry_count=len(items),
                )
            )
        return artifacts

    def _emitter_options(self) -> dict:
        if self.platform is Platform.IOS:
            return {"app_name": self.config.app_name, "generator_url": self.config.generator_url}
        return {}
