"""Domain layer for health metrics.

Business logic for BMI/BMR/TDEE calculation, weight projection and diet
recommendation, decoupled from presentation and infrastructure.
"""
