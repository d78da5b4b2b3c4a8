"""
Tests for the body catalog and the read-only physics configuration.
"""

import pytest

from relativity.catalog import Body, BodyCatalog, BodyKind
from relativity.config import DilationConfig, default_config
from relativity.constants import DEFAULT_CONSTANTS, M_SUN
from data.bodies import get_body_entries


EXPECTED_ORDER = [
    "earth", "moon", "mars", "venus", "mercury", "jupiter", "sun",
    "neutron_star", "r136a1", "bh10", "sgr_a",
]


class TestBody:

    def test_default_kind_normal(self):
        b = Body("x", "X", 1.0, 1.0)
        assert b.kind is BodyKind.NORMAL
        assert not b.is_black_hole

    def test_kind_from_string(self):
        b = Body("x", "X", 1.0, 1.0, kind="black-hole")
        assert b.kind is BodyKind.BLACK_HOLE
        assert b.is_black_hole

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            Body("x", "X", 1.0, 1.0, kind="wormhole")

    def test_immutable(self):
        b = Body("x", "X", 1.0, 1.0)
        with pytest.raises(AttributeError):
            b.mass_kg = 2.0

    def test_to_dict(self):
        d = Body("x", "X", 2, 3, kind="black-hole").to_dict()
        assert d == {"id": "x", "name": "X", "mass_kg": 2.0,
                     "radius_m": 3.0, "kind": "black-hole"}


class TestDefaultCatalog:

    def test_declaration_order(self, catalog):
        assert [b.id for b in catalog.list_bodies()] == EXPECTED_ORDER

    def test_listing_stable(self, catalog):
        assert catalog.list_bodies() == catalog.list_bodies()

    def test_black_holes(self, catalog):
        holes = [b.id for b in catalog if b.is_black_hole]
        assert holes == ["bh10", "sgr_a"]

    def test_lookup(self, catalog):
        earth = catalog.get("earth")
        assert earth.mass_kg == 5.972e24
        assert earth.radius_m == 6.371e6

    def test_unknown_id(self, catalog):
        assert catalog.get("pluto") is None
        assert "pluto" not in catalog

    def test_masses_and_radii_positive(self, catalog):
        for b in catalog:
            assert b.mass_kg > 0, b.id
            assert b.radius_m > 0, b.id

    def test_sgr_a_mass(self, catalog):
        assert catalog.get("sgr_a").mass_kg == pytest.approx(4.3e6 * M_SUN)

    def test_entries_copy(self):
        entries = get_body_entries()
        entries.clear()
        assert len(get_body_entries()) == len(EXPECTED_ORDER)


class TestBodyCatalog:

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="already"):
            BodyCatalog([Body("a", "A", 1, 1), Body("a", "A2", 2, 2)])

    def test_from_entries(self):
        cat = BodyCatalog.from_entries([
            {"id": "a", "name": "A", "mass_kg": 1.0, "radius_m": 1.0},
            {"id": "b", "name": "B", "mass_kg": 1.0, "radius_m": 1.0, "kind": "black-hole"},
        ])
        assert len(cat) == 2
        assert cat.get("b").is_black_hole


class TestDilationConfig:

    def test_default_is_shared(self):
        assert default_config() is default_config()

    def test_reference_body_earth(self, config):
        assert config.reference_body.id == "earth"

    def test_constants(self, config):
        assert config.constants is DEFAULT_CONSTANTS

    def test_missing_reference_rejected(self):
        cat = BodyCatalog([Body("a", "A", 1, 1)])
        with pytest.raises(ValueError, match="Reference body"):
            DilationConfig(DEFAULT_CONSTANTS, cat)

    def test_custom_reference(self):
        cat = BodyCatalog([Body("home", "Home", 1e24, 1e6)])
        cfg = DilationConfig(DEFAULT_CONSTANTS, cat, reference_body_id="home")
        assert cfg.reference_body.id == "home"
        assert cfg.to_dict()["reference_body"] == "home"

    def test_read_only(self, config):
        with pytest.raises(AttributeError):
            config.catalog = None
