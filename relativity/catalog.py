"""
Immutable body records and the ordered catalog that holds them.

Bodies are created once from the raw entries in data/bodies.py and never
mutated. Lookup is by id; listing preserves declaration order.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from collections import OrderedDict, namedtuple
from enum import Enum


class BodyKind(Enum):
    """Body classification. Black holes get horizon-relative observers."""
    NORMAL = "normal"
    BLACK_HOLE = "black-hole"


_BodyBase = namedtuple("Body", ["id", "name", "mass_kg", "radius_m", "kind"])


class Body(_BodyBase):
    """
    A named gravitating body.

    Parameters
    ----------
    id : str
        Unique catalog key.
    name : str
        Display label.
    mass_kg : float
        Mass in kilograms (> 0).
    radius_m : float
        Mean radius in meters (> 0). Display-only for black holes.
    kind : BodyKind, optional
        Defaults to BodyKind.NORMAL.
    """

    __slots__ = ()

    def __new__(cls, id, name, mass_kg, radius_m, kind=BodyKind.NORMAL):
        return super().__new__(cls, id, name, float(mass_kg),
                               float(radius_m), BodyKind(kind))

    @property
    def is_black_hole(self):
        return self.kind is BodyKind.BLACK_HOLE

    @classmethod
    def from_entry(cls, entry):
        """Build a Body from a raw catalog dict."""
        return cls(
            id=entry["id"],
            name=entry["name"],
            mass_kg=entry["mass_kg"],
            radius_m=entry["radius_m"],
            kind=entry.get("kind", BodyKind.NORMAL.value),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "mass_kg": self.mass_kg,
            "radius_m": self.radius_m,
            "kind": self.kind.value,
        }


class BodyCatalog:
    """
    Read-only, ordered lookup of Body records.

    Raises ValueError on duplicate ids at construction; after that the
    catalog cannot change.
    """

    def __init__(self, bodies):
        self._bodies = OrderedDict()
        for body in bodies:
            if body.id in self._bodies:
                raise ValueError(
                    "Body '{}' is already in the catalog".format(body.id)
                )
            self._bodies[body.id] = body

    @classmethod
    def from_entries(cls, entries):
        return cls(Body.from_entry(e) for e in entries)

    def get(self, body_id):
        """Return the Body for body_id, or None if unknown."""
        return self._bodies.get(body_id)

    def list_bodies(self):
        """Return all bodies in declaration order."""
        return tuple(self._bodies.values())

    def __contains__(self, body_id):
        return body_id in self._bodies

    def __iter__(self):
        return iter(self._bodies.values())

    def __len__(self):
        return len(self._bodies)
