"""Pairing of per-language documents inside a collection."""

from typing import Any, Mapping, Sequence

from ..errors import MissingLanguageField, NoMatchingDocument, ShapeMismatch
from ..models.documents import LanguageDocument

LANG_FIELD = "lang"


def select_by_language(
    collection_name: str,
    documents: Sequence[Mapping[str, Any]],
    language_code: str,
) -> LanguageDocument:
    """
    Pick the document of a collection written in `language_code`.

    Every document is checked for a `lang` field, not only the matching ones.
    When several documents share the language the last one wins.

    Args:
        collection_name: Name of the collection, used in error messages
        documents: All documents of the collection, in store order
        language_code: Value of the `lang` field to look for

    Returns:
        LanguageDocument with the `lang` field stripped

    Raises:
        MissingLanguageField: a document has no (or an empty) `lang` field
        NoMatchingDocument: no document has the requested language
    """
    match = None
    for doc in documents:
        if not doc.get(LANG_FIELD):
            raise MissingLanguageField(collection_name, doc)
        if doc[LANG_FIELD] == language_code:
            match = doc

    if match is None:
        raise NoMatchingDocument(collection_name, language_code)

    fields = {key: value for key, value in match.items() if key != LANG_FIELD}
    return LanguageDocument(collection=collection_name, lang=language_code, fields=fields)


def assert_same_shape(doc_a: LanguageDocument, doc_b: LanguageDocument) -> None:
    """
    Check that two language variants expose the same number of keys.

    Only the counts are compared, so variants with different key names but
    equal sizes pass.
    """
    if doc_a.key_count != doc_b.key_count:
        raise ShapeMismatch(
            doc_a.collection,
            {doc_a.lang: doc_a.key_count, doc_b.lang: doc_b.key_count},
        )
