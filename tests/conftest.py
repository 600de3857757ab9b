import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_codec.models import GedcomFamily, GedcomPerson, GedcomSource  # noqa: E402

EXPORT_DAY = date(2024, 5, 1)


@pytest.fixture
def smith_family():
    """Two deceased parents, one deceased child, one living child."""
    census = GedcomSource(
        id="src-1",
        source_name="1880 Census",
        source_url="https://example.org/census/1880",
        content="Household of John Smith",
    )
    people = [
        GedcomPerson(
            id="p-1",
            name_full="John Smith",
            name_given="John",
            name_surname="Smith",
            sex="male",
            birth_date="1850-02-12",
            birth_place="Boston, Massachusetts",
            death_date="1920-11-03",
            death_place="Salem, Massachusetts",
            sources=[census],
        ),
        GedcomPerson(
            id="p-2",
            name_full="Mary Jones",
            name_given="Mary",
            name_surname="Jones",
            sex="female",
            christening_date="1855-03-01",
            burial_place="Old North Cemetery",
            sources=[census],
        ),
        GedcomPerson(
            id="p-3",
            name_full="Thomas Smith",
            name_given="Thomas",
            name_surname="Smith",
            sex="M",
            birth_date="1878-07-04",
        ),
        GedcomPerson(
            id="p-4",
            name_full="Alice Smith",
            name_given="Alice",
            name_surname="Smith",
            sex="F",
            birth_date="1990-01-15",
            living=True,
        ),
    ]
    families = [
        GedcomFamily(
            id="f-1",
            husband_id="p-1",
            wife_id="p-2",
            marriage_date="1876-06-14",
            marriage_place="Boston, Massachusetts",
            children_ids=["p-3", "p-4"],
        ),
    ]
    return people, families
