"""Tests for the export pipeline."""

import json

import pytest

from l10n_export.emitters import IosStringsEmitter
from l10n_export.errors import MissingLanguageField, NoMatchingDocument, ShapeMismatch, StoreError
from l10n_export.pipeline import ExportPipeline
from l10n_export.storage.artifact_writer import ArtifactWriter


@pytest.mark.asyncio
async def test_greeting_exported_to_json(make_config, make_store, greeting_collections):
    config = make_config("web")
    pipeline = ExportPipeline(config, make_store(greeting_collections))

    artifacts = await pipeline.run()

    assert [a.file_name for a in artifacts] == ["localization-en.json", "localization-uk.json"]
    en = json.loads((config.output_dir / "localization-en.json").read_text(encoding="utf-8"))
    uk = json.loads((config.output_dir / "localization-uk.json").read_text(encoding="utf-8"))
    assert en["greeting_hello"] == "Hi"
    assert uk["greeting_hello"] == "Привіт"
    assert list(en) == ["greeting_hello", "greeting_bye", "menu_title"]
    assert "greeting__id" not in en


@pytest.mark.asyncio
async def test_android_files(make_config, make_store, greeting_collections):
    config = make_config("android")

    await ExportPipeline(config, make_store(greeting_collections)).run()

    content = (config.output_dir / "localization-uk.xml").read_text(encoding="utf-8")
    assert '<string name="menu_title">Меню</string>' in content
    assert (config.output_dir / "localization-en.xml").exists()


@pytest.mark.asyncio
async def test_ios_files(make_config, make_store, greeting_collections):
    config = make_config("ios")

    artifacts = await ExportPipeline(config, make_store(greeting_collections)).run()

    assert [a.file_name for a in artifacts] == ["Localizable_EN.strings", "Localizable_UK.strings"]
    content = (config.output_dir / "Localizable_EN.strings").read_text(encoding="utf-8")
    assert content.startswith("/*\n\tLocalizable.strings\n\tDucky\n")
    assert '"greeting_hello" = Hi' in content


@pytest.mark.asyncio
async def test_order_follows_collections_not_completion(make_config, make_store):
    collections = {
        "slow": [{"lang": "en", "a": "1"}, {"lang": "ua", "a": "1"}],
        "fast": [{"lang": "en", "b": "2"}, {"lang": "ua", "b": "2"}],
    }
    store = make_store(collections, delays={"slow": 0.05})

    entries = await ExportPipeline(make_config(), store).collect()

    assert store.fetched == ["fast", "slow"]
    assert [e.key for e in entries["en"]] == ["slow_a", "fast_b"]


@pytest.mark.asyncio
async def test_empty_collections_are_skipped(make_config, make_store, greeting_collections):
    greeting_collections["drafts"] = []

    entries = await ExportPipeline(make_config(), make_store(greeting_collections)).collect()

    assert len(entries["en"]) == 3
    assert len(entries["ua"]) == 3


@pytest.mark.asyncio
async def test_missing_lang_writes_nothing(make_config, make_store, greeting_collections):
    greeting_collections["menu"].append({"title": "orphan"})
    config = make_config("android")

    with pytest.raises(MissingLanguageField):
        await ExportPipeline(config, make_store(greeting_collections)).run()

    assert not config.output_dir.exists()


@pytest.mark.asyncio
async def test_missing_language_variant(make_config, make_store):
    store = make_store({"greeting": [{"lang": "en", "hello": "Hi"}]})

    with pytest.raises(NoMatchingDocument):
        await ExportPipeline(make_config(), store).run()


@pytest.mark.asyncio
async def test_shape_mismatch(make_config, make_store):
    store = make_store({
        "greeting": [
            {"lang": "en", "hello": "Hi", "bye": "Bye"},
            {"lang": "ua", "hello": "Привіт"},
        ]
    })

    with pytest.raises(ShapeMismatch):
        await ExportPipeline(make_config(), store).run()


@pytest.mark.asyncio
async def test_dry_run_does_not_write(make_config, make_store, greeting_collections):
    config = make_config("web")

    artifacts = await ExportPipeline(config, make_store(greeting_collections)).run(dry_run=True)

    assert len(artifacts) == 2
    assert artifacts[0].entry_count == 3
    assert not config.output_dir.exists()


@pytest.mark.asyncio
async def test_injected_emitter_and_writer(make_config, make_store, greeting_collections, tmp_path):
    config = make_config("ios")
    writer = ArtifactWriter(tmp_path / "custom")
    emitter = IosStringsEmitter(app_name="Demo")

    await ExportPipeline(config, make_store(greeting_collections), writer=writer, emitter=emitter).run()

    content = (tmp_path / "custom" / "Localizable_UK.strings").read_text(encoding="utf-8")
    assert "\tDemo\n" in content


@pytest.mark.asyncio
async def test_store_failure_writes_nothing(make_config, make_store, greeting_collections):
    config = make_config("web")
    store = make_store(greeting_collections, failures={"menu": StoreError("connection reset")})

    with pytest.raises(StoreError, match="connection reset"):
        await ExportPipeline(config, store).run()

    assert not config.output_dir.exists()


@pytest.mark.asyncio
async def test_failure_cancels_pending_reads(make_config, make_store, greeting_collections):
    greeting_collections["slow"] = [{"lang": "en", "a": "1"}, {"lang": "ua", "a": "1"}]
    store = make_store(
        greeting_collections,
        delays={"slow": 10},
        failures={"menu": StoreError("connection reset")},
    )

    with pytest.raises(StoreError):
        await ExportPipeline(make_config(), store).collect()

    assert store.cancelled == ["slow"]
    assert "slow" not in store.fetched
