import pytest

from lifelanguages.models.factory import PersonFactory


def _record(**overrides):
    record = {
        "fullName": "A",
        "mover": 90,
        "doer": 10,
        "influencer": 50,
        "responder": 50,
        "shaper": 50,
        "producer": 50,
        "contemplator": 50,
        "overallIntensity": 70,
    }
    record.update(overrides)
    return record


def _ci_fields(**overrides):
    fields = {
        "acceptanceLevel": 20,
        "interactiveStyle": "80.4E",
        "internalControl": 50,
        "intrusionLevel": 70,
        "projectiveLevel": 40,
        "susceptibilityToStress": 60,
        "learningPreferenceAuditory": 70,
        "learningPreferenceVisual": 70,
        "learningPreferencePhysical": 40,
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def ci_fields():
    return _ci_fields


@pytest.fixture
def factory():
    return PersonFactory()
