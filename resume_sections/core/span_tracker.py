from typing import List, Optional


class SpanTracker:
    """
    Substrings of the input already attributed to a field during one parse.

    Created fresh at the start of every parser call and passed explicitly to
    each extraction phase; never shared between calls.

    Containment direction matters:
      is_claimed(line) -> some claimed text appears inside `line`
      covers(text)     -> `text` appears inside some claimed text
    A short claimed token such as "CA" only blocks lines that contain it, it
    never blocks an unrelated longer line merely because the line contains a
    claimed token elsewhere.
    """

    def __init__(self) -> None:
        self._claimed: List[str] = []

    def claim(self, text: str) -> None:
        text = (text or "").strip()
        if text and text not in self._claimed:
            self._claimed.append(text)

    def is_claimed(self, candidate: str) -> bool:
        return any(claimed in candidate for claimed in self._claimed)

    def covers(self, candidate: str) -> bool:
        candidate = candidate.strip()
        return bool(candidate) and any(candidate in claimed for claimed in self._claimed)

    def first_index(self, candidate: str) -> Optional[int]:
        """Position of the earliest claimed text inside `candidate`, or None."""
        positions = [candidate.find(claimed) for claimed in self._claimed if claimed in candidate]
        return min(positions) if positions else None

    def __len__(self) -> int:
        return len(self._claimed)

    def __iter__(self):
        return iter(self._claimed)
