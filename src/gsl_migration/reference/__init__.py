"""Static constants for the two species stories and the study region.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from gsl_migration.reference.geography import GREAT_SALT_LAKE as GREAT_SALT_LAKE
from gsl_migration.reference.geography import PARTITIONS as PARTITIONS
from gsl_migration.reference.species import GREBE as GREBE
from gsl_migration.reference.species import PELICAN as PELICAN
from gsl_migration.reference.species import SPECIES as SPECIES
from gsl_migration.reference.species import SpeciesDataset as SpeciesDataset
