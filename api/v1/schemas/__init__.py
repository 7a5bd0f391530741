"""Re-export individual schema modules for easy imports."""

from .profile import ProfileIn, ProfileOut, MetricsOut
from .plan import PlanOut
from .tracking import MealLogIn, WeightIn, WeightEntryOut, MealLogEntryOut, SessionOut

__all__ = [
    "ProfileIn",
    "ProfileOut",
    "MetricsOut",
    "PlanOut",
    "MealLogIn",
    "WeightIn",
    "WeightEntryOut",
    "MealLogEntryOut",
    "SessionOut",
]
