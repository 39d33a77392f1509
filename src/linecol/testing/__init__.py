from __future__ import annotations

from .corpus import generate_corpus_files, generate_texts, position_table, snapshot_digest

__all__ = ["generate_corpus_files", "generate_texts", "position_table", "snapshot_digest"]
