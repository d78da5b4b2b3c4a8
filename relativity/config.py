"""
Read-only physics configuration.

DilationConfig bundles the physical constants, the body catalog and the id
of the reference body (Earth). It is built once at startup and passed
explicitly to the comparison pipeline, so tests can inject synthetic
catalogs or constants.
"""

from relativity.constants import DEFAULT_CONSTANTS
from relativity.catalog import BodyCatalog
from data.bodies import get_body_entries

REFERENCE_BODY_ID = "earth"


class DilationConfig:
    """
    Constants + catalog + reference body.

    Parameters
    ----------
    constants : PhysicalConstants
        Immutable constant bundle.
    catalog : BodyCatalog
        Bodies available for comparison.
    reference_body_id : str, optional
        Id of the surface-at-rest reference body (default "earth").

    Raises
    ------
    ValueError
        If the reference body is not in the catalog.
    """

    def __init__(self, constants, catalog, reference_body_id=REFERENCE_BODY_ID):
        if reference_body_id not in catalog:
            raise ValueError(
                "Reference body '{}' is not in the catalog".format(reference_body_id)
            )
        self._constants = constants
        self._catalog = catalog
        self._reference_body_id = reference_body_id

    @property
    def constants(self):
        return self._constants

    @property
    def catalog(self):
        return self._catalog

    @property
    def reference_body(self):
        return self._catalog.get(self._reference_body_id)

    def to_dict(self):
        """Serialize for the constants endpoint."""
        return {
            "G": self._constants.g,
            "C": self._constants.c,
            "M_SUN": self._constants.m_sun,
            "R_SUN": self._constants.r_sun,
            "reference_body": self._reference_body_id,
        }


_DEFAULT = None


def default_config():
    """Return the process-wide default config (built on first call)."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = DilationConfig(
            DEFAULT_CONSTANTS,
            BodyCatalog.from_entries(get_body_entries()),
        )
    return _DEFAULT
