"""Unit tests for BMIService."""

import pytest

from domain.health_metrics.calculation.bmi_service import BMIService


class TestBMIService:
    """Test BMI calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMIService()

    def test_reference_case(self):
        """Test 70 kg at 170 cm."""
        bmi = self.service.calculate(height_cm=170.0, weight_kg=70.0)

        assert bmi == pytest.approx(24.2214, abs=1e-4)

    def test_exact_values(self):
        """Test heights that give exact BMIs."""
        assert self.service.calculate(height_cm=200.0, weight_kg=100.0) == 25.0
        assert self.service.calculate(height_cm=200.0, weight_kg=74.0) == 18.5
        assert self.service.calculate(height_cm=200.0, weight_kg=120.0) == 30.0
