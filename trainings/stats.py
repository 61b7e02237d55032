# stats.py
"""
Dashboard statistics.

DashboardStats is never stored; it is recomputed from whatever training
records the caller passes in, every time a dashboard is rendered.
"""
from dataclasses import dataclass, field

ON_CAMPUS = "on_campus"


@dataclass
class Demographics:
    sc: int = 0
    st: int = 0
    gen: int = 0
    obc: int = 0

    def as_dict(self):
        return {"sc": self.sc, "st": self.st, "gen": self.gen, "obc": self.obc}


@dataclass
class DashboardStats:
    total_trainings: int = 0
    total_farmers: int = 0
    male_farmers: int = 0
    female_farmers: int = 0
    on_campus_trainings: int = 0
    off_campus_trainings: int = 0
    demographics_breakdown: Demographics = field(default_factory=Demographics)

    def as_dict(self):
        return {
            "total_trainings": self.total_trainings,
            "total_farmers": self.total_farmers,
            "male_farmers": self.male_farmers,
            "female_farmers": self.female_farmers,
            "on_campus_trainings": self.on_campus_trainings,
            "off_campus_trainings": self.off_campus_trainings,
            "demographics_breakdown": self.demographics_breakdown.as_dict(),
        }


def _count(record, attr):
    return int(getattr(record, attr, 0) or 0)


def calculate_stats(trainings):
    """
    Fold a sequence of training records into a DashboardStats.

    Records only need the attributes of the Training model (total_farmers_male,
    total_farmers_female, training_mode, demographics_sc/st/gen/obc). Any mode
    other than on_campus counts as off-campus.
    """
    stats = DashboardStats()

    for t in trainings:
        male = _count(t, "total_farmers_male")
        female = _count(t, "total_farmers_female")

        stats.total_trainings += 1
        stats.male_farmers += male
        stats.female_farmers += female
        stats.total_farmers += male + female

        if getattr(t, "training_mode", None) == ON_CAMPUS:
            stats.on_campus_trainings += 1
        else:
            stats.off_campus_trainings += 1

        demo = stats.demographics_breakdown
        demo.sc += _count(t, "demographics_sc")
        demo.st += _count(t, "demographics_st")
        demo.gen += _count(t, "demographics_gen")
        demo.obc += _count(t, "demographics_obc")

    return stats


def trainer_stats(trainings, trainer_id):
    """Stats for the subset of `trainings` recorded by one trainer."""
    return calculate_stats(t for t in trainings if getattr(t, "trainer_id", None) == trainer_id)
