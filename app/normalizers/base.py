# app/normalizers/base.py
from typing import Protocol
from .types import Employee, RawRecord

class Normalizer(Protocol):
    def normalize_record(self, rec: RawRecord) -> Employee:
        """Return a NEW Employee built from `rec`. Do not mutate `rec`."""
        ...
