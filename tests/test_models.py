"""Tests for Person, CommunicationIndicators, and the person factory."""

import pytest

from lifelanguages.config import LocaleConfig
from lifelanguages.errors import ValidationError
from lifelanguages.keys import CI_KEYS, LL_KEYS
from lifelanguages.models.factory import IdSequence, PersonFactory
from lifelanguages.models.indicators import (
    INDICATOR_FIELDS,
    CommunicationIndicators,
    required_indicator_fields,
)
from lifelanguages.models.person import PERSON_FIELDS, Person, rank_scores
from lifelanguages.scoring.interactive_style import Band


class TestPerson:
    def test_example_profile(self, factory, make_record):
        person = factory.build(make_record())
        assert person.sorted_scores[0].key == "mover"
        assert person.sorted_scores[0].value == 90
        assert person.sorted_scores[6].key == "doer"
        assert person.sorted_scores[6].value == 10
        assert person.range == 80
        assert person.range_level == 3
        assert person.overall_intensity_level == 3

    def test_distinct_scores_sorted(self, factory, make_record):
        scores = dict(mover=80, doer=72, influencer=60, responder=55,
                      shaper=40, producer=30, contemplator=20)
        person = factory.build(make_record(**scores))
        values = [s.value for s in person.sorted_scores]
        assert values == sorted(values, reverse=True)
        assert person.range == max(values) - min(values)
        assert [s.gap for s in person.sorted_scores] == [0, 8, 12, 5, 15, 10, 10]
        assert [s.gap_level for s in person.sorted_scores] == [0, 1, 2, 1, 2, 1, 1]

    def test_sorted_scores_is_permutation(self, factory, make_record):
        person = factory.build(make_record())
        assert sorted(s.key for s in person.sorted_scores) == sorted(LL_KEYS)

    def test_ties_keep_category_order(self):
        scores = {k: 50 for k in LL_KEYS}
        scores.update(shaper=70, producer=70)
        first = [s.key for s in rank_scores(scores)]
        assert first[:2] == ["shaper", "producer"]
        assert first[2:] == ["mover", "doer", "influencer", "responder", "contemplator"]
        assert [s.key for s in rank_scores(scores)] == first

    def test_value_levels(self, factory, make_record):
        person = factory.build(make_record())
        levels = {s.key: s.value_level for s in person.sorted_scores}
        assert levels["mover"] == 4
        assert levels["doer"] == 0
        assert levels["shaper"] == 2

    def test_shorthand(self, factory, make_record):
        person = factory.build(make_record())
        assert person.shorthand() == "M-IRSPC-d"
        scores = dict(mover=80, doer=72, influencer=60, responder=55,
                      shaper=40, producer=30, contemplator=20)
        assert factory.build(make_record(**scores)).shorthand() == "M·D-I·R-s·p·c"

    def test_defaults(self, factory, make_record):
        person = factory.build(make_record())
        assert person.company_name == ""
        assert person.state is True
        assert person.ci is None
        assert not person.has_indicators

    def test_state_and_company_from_record(self, factory, make_record):
        person = factory.build(make_record(companyName="Acme", state=False))
        assert person.company_name == "Acme"
        assert person.state is False
        person.state = True
        assert person.state is True

    def test_scores_read_only(self, factory, make_record):
        person = factory.build(make_record())
        with pytest.raises(TypeError):
            person.scores["mover"] = 1
        with pytest.raises(AttributeError):
            person.range = 0

    def test_language_scores_in_category_order(self, factory, make_record):
        person = factory.build(make_record())
        assert [k for k, _ in person.language_scores()] == LL_KEYS

    def test_missing_field(self, factory, make_record):
        record = make_record()
        del record["mover"]
        with pytest.raises(ValidationError) as exc:
            factory.build(record)
        assert "mover" in str(exc.value)
        assert exc.value.field == ["mover"]
        assert exc.value.subject == "A"

    def test_missing_fields_all_reported(self, factory, make_record):
        record = make_record()
        del record["mover"]
        del record["overallIntensity"]
        with pytest.raises(ValidationError) as exc:
            factory.build(record)
        assert exc.value.field == ["mover", "overallIntensity"]

    def test_missing_fields_reported_with_indicators(self, factory, make_record, ci_fields):
        record = make_record(**ci_fields())
        del record["mover"]
        del record["acceptanceLevel"]
        with pytest.raises(ValidationError) as exc:
            factory.build(record)
        assert exc.value.field == ["mover", "acceptanceLevel"]
        assert "[mover, acceptanceLevel]" in str(exc.value)

    def test_out_of_range(self, factory, make_record):
        with pytest.raises(ValidationError) as exc:
            factory.build(make_record(influencer=300))
        assert "between 0 and 100" in str(exc.value)
        assert "300" in str(exc.value)

    def test_wrong_type(self, factory, make_record):
        with pytest.raises(ValidationError, match="expected number but found string"):
            factory.build(make_record(doer="ten"))

    @pytest.mark.parametrize("company", [0, False, 12, ["Acme"]])
    def test_company_name_type(self, factory, make_record, company):
        with pytest.raises(ValidationError, match="companyName"):
            factory.build(make_record(companyName=company))

    def test_company_name_null(self, factory, make_record):
        assert factory.build(make_record(companyName=None)).company_name == ""

    def test_empty_name(self, factory, make_record):
        with pytest.raises(ValidationError):
            factory.build(make_record(fullName="  "))

    def test_indicator_without_ci(self, factory, make_record):
        person = factory.build(make_record())
        with pytest.raises(ValueError):
            person.indicator("acceptanceLevel")

    def test_localized_shorthand(self, factory, make_record):
        shorthand = {"mover": "B", "doer": "H", "influencer": "I", "responder": "R",
                     "shaper": "F", "producer": "P", "contemplator": "K"}
        person = factory.build(make_record())
        assert person.shorthand(LocaleConfig(shorthand=shorthand)) == "B-IRFPK-h"


class TestCommunicationIndicators:
    def test_built_when_present(self, factory, make_record, ci_fields):
        person = factory.build(make_record(**ci_fields()))
        assert person.has_indicators
        assert person.ci.acceptance_level == 20
        assert person.ci.interactive_style == pytest.approx(280.4)
        assert person.indicator("intrusionLevel") == 70

    def test_all_forms_of_interactive_style(self, ci_fields):
        combined = CommunicationIndicators.from_record(ci_fields(interactiveStyle="35I"))
        fields = ci_fields()
        del fields["interactiveStyle"]
        split = CommunicationIndicators.from_record(
            {**fields, "interactiveStyleScore": 35, "interactiveStyleType": "I"}
        )
        normalized = CommunicationIndicators.from_record(ci_fields(interactiveStyle=65))
        assert combined.interactive_style == split.interactive_style == normalized.interactive_style == 65

    def test_missing_fields_listed(self, factory, make_record):
        with pytest.raises(ValidationError) as exc:
            factory.build(make_record(acceptanceLevel=50))
        assert exc.value.field == [k for k in CI_KEYS if k != "acceptanceLevel"]

    def test_split_style_alone_triggers_indicators(self, factory, make_record):
        with pytest.raises(ValidationError):
            factory.build(make_record(interactiveStyleScore=50, interactiveStyleType="B"))

    def test_out_of_range(self, ci_fields):
        with pytest.raises(ValidationError, match="susceptibilityToStress"):
            CommunicationIndicators.from_record(ci_fields(susceptibilityToStress=101))

    def test_preferred_learning_style_tie(self, ci_fields):
        ci = CommunicationIndicators.from_record(ci_fields())
        assert ci.preferred_learning_style == (
            "learningPreferenceAuditory", "learningPreferenceVisual",
        )
        assert ci.learning_style_tied

    def test_preferred_learning_style_single(self, ci_fields):
        ci = CommunicationIndicators.from_record(ci_fields(learningPreferencePhysical=90))
        assert ci.preferred_learning_style == ("learningPreferencePhysical",)
        assert not ci.learning_style_tied

    def test_preferred_learning_style_three_way(self, ci_fields):
        ci = CommunicationIndicators.from_record(ci_fields(
            learningPreferenceAuditory=50, learningPreferenceVisual=50, learningPreferencePhysical=50,
        ))
        assert len(ci.preferred_learning_style) == 3

    def test_levels(self, ci_fields):
        ci = CommunicationIndicators.from_record(ci_fields(acceptanceLevel=34, internalControl=35))
        assert ci.level("acceptanceLevel") == 0
        assert ci.level("internalControl") == 1
        assert ci.level("intrusionLevel") == 2
        assert ci.level("interactiveStyle") == 2  # magnitude 80.4

    def test_interactive_style_parts(self, ci_fields):
        ci = CommunicationIndicators.from_record(ci_fields())
        magnitude, symbol = ci.interactive_style_parts()
        assert magnitude == pytest.approx(80.4)
        assert symbol == "E"
        assert ci.interactive_style_band is Band.EXTROVERT

    def test_items_in_fixed_order(self, ci_fields):
        ci = CommunicationIndicators.from_record(ci_fields())
        assert [k for k, _ in ci.items()] == CI_KEYS
        with pytest.raises(KeyError):
            ci["talkativeness"]


class TestPersonFactory:
    def test_ids_follow_construction_order(self, make_record):
        factory = PersonFactory()
        ids = [factory.build(make_record()).id for _ in range(3)]
        assert ids == [0, 1, 2]

    def test_failed_build_consumes_no_id(self, make_record):
        factory = PersonFactory()
        factory.build(make_record())
        with pytest.raises(ValidationError):
            factory.build(make_record(mover=-1))
        assert factory.build(make_record()).id == 1

    def test_reset(self, make_record):
        ids = IdSequence(start=10)
        factory = PersonFactory(ids)
        factory.build(make_record())
        factory.build(make_record())
        ids.reset()
        assert factory.build(make_record()).id == 10

    def test_independent_factories(self, make_record):
        assert PersonFactory().build(make_record()).id == PersonFactory().build(make_record()).id

    def test_direct_construction(self, make_record):
        person = Person.from_record(make_record(), person_id=42)
        assert person.id == 42


class TestFieldTables:
    def test_person_fields(self):
        assert [s.name for s in PERSON_FIELDS] == ["fullName"] + LL_KEYS + ["overallIntensity"]
        assert all((s.low, s.high) == (0, 100) for s in PERSON_FIELDS[1:])

    def test_indicator_fields_leave_interactive_style_to_codec(self):
        assert "interactiveStyle" not in [s.name for s in INDICATOR_FIELDS]
        assert len(INDICATOR_FIELDS) == len(CI_KEYS) - 1

    def test_required_indicator_fields(self):
        assert required_indicator_fields({}) == CI_KEYS
        split = {"interactiveStyleScore": 40, "interactiveStyleType": "B"}
        assert "interactiveStyle" not in required_indicator_fields(split)
        assert "interactiveStyle" in required_indicator_fields({"interactiveStyleScore": 40})
