"""Document pairing and flattening."""

from .matcher import LANG_FIELD, select_by_language, assert_same_shape
from .flattener import ID_FIELD, flatten

__all__ = ["LANG_FIELD", "ID_FIELD", "select_by_language", "assert_same_shape", "flatten"]
