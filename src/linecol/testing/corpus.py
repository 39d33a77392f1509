from __future__ import annotations

import hashlib
import random

from ..api import offsets_to_positions


# Pieces are picked whole so CRLF stays a pair unless a lone CR is drawn.
_PIECES = [
    *"abcxyzABC019_ ",
    "\t",
    "\n",
    "\r\n",
    "\r",
    "é",
    "ß",
    "你",
    "好",
    "😀",
    "❓",
]


def generate_texts(*, seed: int, count: int, max_pieces: int = 40) -> list[str]:
    r = random.Random(seed)
    return [_gen_one(r, max_pieces) for _ in range(count)]


def generate_corpus_files(*, seed: int, count: int) -> list[tuple[str, str]]:
    """Pair each generated text with a stable name, `case_000000.txt` onwards.

    Texts are returned untouched: CRLF pairs and lone CRs must be written
    back byte for byte (no newline translation) to keep their positions.
    """
    texts = generate_texts(seed=seed, count=count)
    return [(f"case_{i:06d}.txt", text) for i, text in enumerate(texts)]


def position_table(text: str) -> str:
    """One `offset line:column` row per byte offset of `text`, end of text included."""
    raw = text.encode("utf-8")
    rows = offsets_to_positions(raw, range(len(raw) + 1))
    return "".join(f"{o} {line}:{column}\n" for o, (line, column) in enumerate(rows))


def snapshot_digest(*, seed: int, count: int) -> str:
    h = hashlib.sha256()
    for text in generate_texts(seed=seed, count=count):
        h.update(position_table(text).encode("ascii"))
        h.update(b"---\n")
    return h.hexdigest()


def _gen_one(r: random.Random, max_pieces: int) -> str:
    # Bias towards line breaks so multi-line texts are common.
    out: list[str] = []
    for _ in range(r.randint(0, max_pieces)):
        if r.random() < 0.15:
            out.append(r.choice(["\n", "\r\n"]))
        else:
            out.append(r.choice(_PIECES))
    return "".join(out)
