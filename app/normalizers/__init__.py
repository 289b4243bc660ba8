from .rules import get_default_normalizer, normalize, RuleNormalizer
from .names import find_human_name
from .extract import extract_string, looks_like_code, coerce_id
from .types import Employee, ManagerRef, RawRecord
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize",
    "RuleNormalizer",
    "find_human_name",
    "extract_string",
    "looks_like_code",
    "coerce_id",
    "Employee",
    "ManagerRef",
    "RawRecord",
    "Normalizer",
]
