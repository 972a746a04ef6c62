"""DietPreference value object - dietary style for meal suggestions."""

from enum import Enum


class DietPreference(str, Enum):
    """Dietary preference used to pick meals from the catalog."""

    NON_VEG = "non-veg"
    VEG = "veg"
    VEGAN = "vegan"
