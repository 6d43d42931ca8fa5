import logging
import threading
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor


logger = logging.getLogger(__name__)

# length == 0 means no common substring
Match = namedtuple('Match', 'length spos dpos')

NO_MATCH = Match(0, 0, 0)


class LongestMatch:
    """
    Running record of the longest common substring seen so far.

    `offer()` is an atomic compare-and-set. A candidate replaces the record
    when it is longer, or equally long and found earlier in scan order
    (smaller source position, then smaller target position). Scans that
    offer their candidates in any order therefore end with the same record
    as a single left-to-right scan.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.length = 0
        self.spos = 0
        self.dpos = 0

    def offer(self, length: int, spos: int, dpos: int) -> bool:
        with self._lock:
            if length > self.length or (
                length == self.length and length > 0 and (spos, dpos) < (self.spos, self.dpos)
            ):
                self.length, self.spos, self.dpos = length, spos, dpos
                return True
            return False

    @property
    def best(self) -> Match:
        with self._lock:
            return Match(self.length, self.spos, self.dpos)


def _index_chars(target: str) -> dict[str, list[int]]:
    # every position of each character, in ascending order
    t2j: dict[str, list[int]] = {}
    for j, c in enumerate(target):
        t2j.setdefault(c, []).append(j)
    return t2j


def _scan(source: str, target: str, t2j: dict[str, list[int]], start: int, stop: int,
          record: LongestMatch) -> None:
    """Scan source positions [start, stop) against every occurrence in target."""
    slen = len(source)
    dlen = len(target)
    trace = logger.isEnabledFor(logging.DEBUG)
    nothing: list[int] = []

    for spos in range(start, stop):
        srest = slen - spos
        if srest <= record.length:
            # later start positions only have less to offer
            break
        for dpos in t2j.get(source[spos], nothing):
            drest = dlen - dpos
            if drest <= record.length:
                break
            rest = min(srest, drest)
            if trace:
                logger.debug(f"lcss: search {source[spos]!r} from {spos} against {dpos} length {rest}")
            k = 1
            while k < rest and source[spos + k] == target[dpos + k]:
                k += 1
            if record.offer(k, spos, dpos) and trace:
                logger.debug(f"lcss: longest: {source[spos:spos + k]!r} ({k})")


def find_longest_match(source: str, target: str, workers: int | None = None) -> Match:
    """
    Find the longest substring that appears in both `source` and `target`.

    Returns Match(length, spos, dpos) with 0-based positions in each string,
    or NO_MATCH when the strings share no character (or either is empty).

    When several common substrings have the maximal length, the one at the
    smallest source position wins, then the one at the smallest target
    position. Outputs of the diff depend on this choice, keep it stable.

    This is a plain O(n*m*k) scan (k: average match length), bounded only by
    pruning candidates that cannot beat the current record. It is the cost
    centre of a comparison.

    If `workers` is greater than 1 the source positions are split into
    contiguous chunks scanned by a thread pool. Each chunk keeps its own
    record, the chunk results are then folded into one with the same
    ordering, so the result equals the sequential one.
    """
    if not source or not target:
        return NO_MATCH

    t2j = _index_chars(target)
    slen = len(source)

    if not workers or workers <= 1 or slen < 2 * workers:
        record = LongestMatch()
        _scan(source, target, t2j, 0, slen, record)
    else:
        chunk = -(-slen // workers)
        bounds = [(lo, min(lo + chunk, slen)) for lo in range(0, slen, chunk)]
        records = [LongestMatch() for _ in bounds]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(_scan, source, target, t2j, lo, hi, rec)
                for (lo, hi), rec in zip(bounds, records)
            ]
            for future in futures:
                future.result()
        record = LongestMatch()
        for rec in records:
            record.offer(*rec.best)

    result = record.best
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"lcss: {source[result.spos:result.spos + result.length]!r}"
                     f"{result.spos}+{result.length} at {result.dpos}")
    return result


# short name, as used by the split-into-three code
lcss = find_longest_match
