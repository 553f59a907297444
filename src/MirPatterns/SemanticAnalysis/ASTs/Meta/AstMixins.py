from __future__ import annotations
from typing import List


class PlaceProjections:
    """
    The flat MIR view of a nested place: the root local plus the projections applied to it, innermost first. Every
    projection node wraps the place it projects in its "place" attribute.
    """

    def local(self) -> "PlaceLocalAst":
        return self.place.local()

    def projections(self) -> List["PlaceAst"]:
        return self.place.projections() + [self]


__all__ = ["PlaceProjections"]
