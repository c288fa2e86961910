import unittest
import uuid

from garage.models.validation import ValidationError
from garage.models.vehicle import Vehicle, FuelType, DEPRECIATION_RATES


class TestVehicle(unittest.TestCase):
    """Test suite for vehicle construction and derived values."""

    def setUp(self):
        """Set up the fields of a valid vehicle."""
        self.fields = {
            "make": "Toyota",
            "model": "Corolla",
            "color": "Blue",
            "year": 2020,
            "price": 20000.0,
            "vin": "JTDBR32E000000001",
            "fuel_type": FuelType.GASOLINE,
            "horse_power": 139,
        }

    def make_vehicle(self, **overrides):
        fields = dict(self.fields)
        fields.update(overrides)
        return Vehicle(**fields)

    def test_construct_valid_vehicle(self):
        """Test that every supplied field is kept as given."""
        vehicle = self.make_vehicle()

        for name, value in self.fields.items():
            self.assertEqual(getattr(vehicle, name), value)
        self.assertIsInstance(vehicle.id, uuid.UUID)

    def test_generated_ids_are_unique(self):
        """Test that omitted ids are generated and differ between vehicles."""
        self.assertNotEqual(self.make_vehicle().id, self.make_vehicle().id)

    def test_explicit_id_is_kept(self):
        """Test that an explicit id is not replaced."""
        vehicle_id = uuid.uuid4()
        self.assertEqual(self.make_vehicle(id=vehicle_id).id, vehicle_id)

    def test_vehicle_is_immutable(self):
        """Test that fields cannot be reassigned after construction."""
        vehicle = self.make_vehicle()
        with self.assertRaises(AttributeError):
            vehicle.price = 1.0

    def test_invalid_fields_fail_construction(self):
        """Test each bound with a value that violates it."""
        cases = [
            ("make", "", "Make"),
            ("make", None, "Make"),
            ("model", "   ", "Model"),
            ("year", 1899, "Year"),
            ("price", -0.01, "Price"),
            ("vin", "", "VIN"),
            ("fuel_type", None, "Fuel type"),
            ("horse_power", -1, "Horse power"),
        ]
        for field, value, label in cases:
            with self.subTest(field=field, value=value):
                with self.assertRaises(ValidationError) as context:
                    self.make_vehicle(**{field: value})
                self.assertIn(label, str(context.exception))

    def test_boundary_values_are_accepted(self):
        """Test the lowest values allowed by each bound."""
        vehicle = self.make_vehicle(year=1900, price=0.0, horse_power=0)
        self.assertEqual(vehicle.year, 1900)

    def test_full_description(self):
        """Test the single-line description format."""
        self.assertEqual(
            self.make_vehicle().full_description,
            "Toyota Corolla (2020) - Blue - GASOLINE - 139HP - $20000.00"
        )

    def test_is_electric(self):
        """Test that only electric and hybrid vehicles are electric."""
        expected = {
            FuelType.ELECTRIC: True,
            FuelType.HYBRID: True,
            FuelType.GASOLINE: False,
            FuelType.DIESEL: False,
            FuelType.HYDROGEN: False,
        }
        for fuel_type, is_electric in expected.items():
            with self.subTest(fuel_type=fuel_type):
                self.assertEqual(self.make_vehicle(fuel_type=fuel_type).is_electric, is_electric)

    def test_estimated_value_at_zero_age_is_price(self):
        """Test that a vehicle keeps its full price in its year of manufacture."""
        vehicle = self.make_vehicle()
        self.assertEqual(vehicle.estimated_value(vehicle.year), vehicle.price)

    def test_estimated_value_depreciates_per_fuel_type(self):
        """Test the yearly depreciation rates."""
        gasoline = self.make_vehicle(fuel_type=FuelType.GASOLINE)
        electric = self.make_vehicle(fuel_type=FuelType.ELECTRIC)

        self.assertAlmostEqual(gasoline.estimated_value(2022), 20000.0 * 0.85 ** 2)
        self.assertAlmostEqual(electric.estimated_value(2022), 20000.0 * 0.90 ** 2)
        self.assertGreater(electric.estimated_value(2025), gasoline.estimated_value(2025))

    def test_estimated_value_before_manufacture_appreciates(self):
        """Test that a year before manufacture yields a higher value."""
        vehicle = self.make_vehicle()
        self.assertAlmostEqual(vehicle.estimated_value(2019), 20000.0 / 0.85)

    def test_every_fuel_type_has_a_depreciation_rate(self):
        """Test that the rate table covers every fuel category."""
        self.assertEqual(set(DEPRECIATION_RATES), set(FuelType))
        self.assertEqual(DEPRECIATION_RATES[FuelType.HYDROGEN], 0.08)
        self.assertEqual(DEPRECIATION_RATES[FuelType.DIESEL], 0.13)
        self.assertEqual(DEPRECIATION_RATES[FuelType.HYBRID], 0.12)
