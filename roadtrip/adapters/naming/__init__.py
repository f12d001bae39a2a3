"""Naming adapters - Implementations of NameNormalizerPort."""

from .table_normalizer import TableNameNormalizer

__all__ = ["TableNameNormalizer"]
