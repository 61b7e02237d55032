"""
Tests for the dashboard statistics fold.
"""
import itertools
from types import SimpleNamespace

import pytest

from trainings.services import list_trainings
from trainings.stats import DashboardStats, calculate_stats, trainer_stats


def record(mode="on_campus", male=0, female=0, sc=0, st=0, gen=0, obc=0, trainer_id=1):
    return SimpleNamespace(
        training_mode=mode,
        total_farmers_male=male,
        total_farmers_female=female,
        demographics_sc=sc,
        demographics_st=st,
        demographics_gen=gen,
        demographics_obc=obc,
        trainer_id=trainer_id,
    )


class TestCalculateStats:
    def test_empty_input_is_all_zero(self):
        assert calculate_stats([]) == DashboardStats()
        assert calculate_stats([]).as_dict()["demographics_breakdown"] == {"sc": 0, "st": 0, "gen": 0, "obc": 0}

    def test_single_on_campus_record(self):
        stats = calculate_stats([record(male=25, female=15, sc=10, st=8, gen=12, obc=10)])
        assert stats.as_dict() == {
            "total_trainings": 1,
            "total_farmers": 40,
            "male_farmers": 25,
            "female_farmers": 15,
            "on_campus_trainings": 1,
            "off_campus_trainings": 0,
            "demographics_breakdown": {"sc": 10, "st": 8, "gen": 12, "obc": 10},
        }

    def test_unknown_mode_counts_as_off_campus(self):
        stats = calculate_stats([record(mode="on_campus"), record(mode="off_campus"), record(mode="field_day")])
        assert stats.on_campus_trainings == 1
        assert stats.off_campus_trainings == 2
        assert stats.on_campus_trainings + stats.off_campus_trainings == stats.total_trainings

    def test_missing_counts_are_zero(self):
        stats = calculate_stats([record(male=None, female=None, sc=None)])
        assert stats.total_farmers == 0
        assert stats.demographics_breakdown.sc == 0

    def test_total_farmers_is_male_plus_female(self):
        stats = calculate_stats([record(male=3, female=4), record(male=10, female=0)])
        assert stats.total_farmers == stats.male_farmers + stats.female_farmers == 17

    def test_order_does_not_matter(self):
        records = [
            record(male=5, female=2, sc=1, mode="off_campus"),
            record(male=1, female=9, obc=4),
            record(male=0, female=3, gen=3, mode="off_campus"),
        ]
        expected = calculate_stats(records)
        for perm in itertools.permutations(records):
            assert calculate_stats(list(perm)) == expected

    def test_accepts_a_generator(self):
        stats = calculate_stats(record(male=1) for _ in range(3))
        assert stats.total_trainings == 3
        assert stats.male_farmers == 3


class TestTrainerStats:
    def test_filters_by_trainer(self):
        records = [record(male=5, trainer_id=1), record(male=7, trainer_id=2), record(male=1, trainer_id=1)]
        stats = trainer_stats(records, 1)
        assert stats.total_trainings == 2
        assert stats.male_farmers == 6

    @pytest.mark.django_db
    def test_works_on_model_instances(self, trainer, other_trainer, make_training):
        make_training(trainer, total_farmers_male=4, training_mode="off_campus")
        make_training(other_trainer, total_farmers_female=6)

        stats = trainer_stats(list_trainings(), trainer.pk)
        assert stats.total_trainings == 1
        assert stats.total_farmers == 4
        assert stats.off_campus_trainings == 1
