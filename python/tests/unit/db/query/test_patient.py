from dataclasses import dataclass
from datetime import datetime

import pytest
from sqlalchemy.orm import Session as Database

from ehr.db.models.patient import DbPatient
from ehr.db.queries.patient import get_patients_with_uid
from tests.util.database import create_test_database


@dataclass
class Setup:
    db: Database
    patient_1: DbPatient
    patient_2: DbPatient


@pytest.fixture
def setup():
    db = create_test_database()

    patient_1 = DbPatient(
        uid         = '9f1c5a52-0b7e-4c55-a0d4-6f1b7bb0c001',
        name        = 'Asha Rao',
        created_at  = datetime(2024, 1, 10, 9, 0),
        last_edited = datetime(2024, 1, 10, 9, 0),
        email       = 'asha@example.org',
    )

    patient_2 = DbPatient(
        uid         = '9f1c5a52-0b7e-4c55-a0d4-6f1b7bb0c002',
        name        = 'Ravi Kumar',
        created_at  = datetime(2024, 2, 3, 14, 30),
        last_edited = datetime(2024, 2, 4, 8, 15),
    )

    db.add(patient_1)
    db.add(patient_2)

    return Setup(db, patient_1, patient_2)


def test_get_patients_with_uid(setup: Setup):
    patients = get_patients_with_uid(setup.db, '9f1c5a52-0b7e-4c55-a0d4-6f1b7bb0c002')
    assert list(patients) == [setup.patient_2]


def test_get_patients_with_uid_none(setup: Setup):
    assert list(get_patients_with_uid(setup.db, '9f1c5a52-0b7e-4c55-a0d4-6f1b7bb0c003')) == []
