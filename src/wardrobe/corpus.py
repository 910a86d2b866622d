"""
Corpus writer: id allocation and persistence of the updated outfit corpus.
"""

import json
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

from core.logging import get_logger
from wardrobe.models import CorpusOutfit, OutfitCandidate, OutfitCorpusDocument

logger = get_logger(__name__)

OUTFIT_ID_PREFIX = "o-"
OUTFIT_ID_WIDTH = 3

_DIGITS_RE = re.compile(r"\d+")


class OutfitIdSequence:
    """
    Monotonic outfit id counter.

    Seeded once from the highest numeric part found among existing ids
    (first run of digits in each id; ids without digits count as 0).
    """

    def __init__(
        self,
        last: int = 0,
        prefix: str = OUTFIT_ID_PREFIX,
        width: int = OUTFIT_ID_WIDTH,
    ) -> None:
        self._last = last
        self._prefix = prefix
        self._width = width

    @classmethod
    def from_ids(cls, ids: Iterable[str], **kwargs) -> "OutfitIdSequence":
        highest = 0
        for outfit_id in ids:
            match = _DIGITS_RE.search(outfit_id or "")
            if match:
                highest = max(highest, int(match.group()))
        return cls(last=highest, **kwargs)

    @property
    def last(self) -> int:
        return self._last

    def next_id(self) -> str:
        self._last += 1
        return f"{self._prefix}{str(self._last).zfill(self._width)}"


def append_outfits(
    doc: OutfitCorpusDocument,
    candidates: Iterable[OutfitCandidate],
    sequence: OutfitIdSequence,
) -> List[CorpusOutfit]:
    """Convert selected candidates into corpus outfits and append them to *doc*."""
    appended: List[CorpusOutfit] = []
    for cand in candidates:
        outfit = CorpusOutfit(id=sequence.next_id(), items=list(cand.items), tuck=cand.tuck)
        doc.outfits.append(outfit)
        appended.append(outfit)
    return appended


def dump_corpus(doc: OutfitCorpusDocument) -> str:
    """
    Serialize the corpus the way it is stored on disk (2-space JSON).

    Only fields present in the source document or set by this run are
    written, so existing outfits round-trip without gaining defaults.
    """
    data = doc.model_dump(mode="json", exclude_unset=True)
    data["outfits"] = [o.model_dump(mode="json", exclude_unset=True) for o in doc.outfits]
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_corpus(path: Union[str, Path], doc: OutfitCorpusDocument) -> None:
    """
    Persist the full corpus in one operation.

    Writes to a temporary file beside *path* and renames it into place, so
    a failure leaves the previous corpus untouched.
    """
    target = Path(path)
    body = dump_corpus(doc)
    fd, tmp_name = tempfile.mkstemp(
        dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(body)
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    logger.info("Wrote outfit corpus", path=str(target), outfits=len(doc.outfits))
