import unittest
import json
import os
import tempfile
import shutil

from click.testing import CliRunner

from garage.cli_module.commands.cars_commands import list_cars


class TestCarsCommands(unittest.TestCase):
    """Test suite for the cars commands."""

    def setUp(self):
        """Set up the CLI runner and a scratch directory."""
        self.runner = CliRunner()
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Remove the scratch directory."""
        shutil.rmtree(self.temp_dir)

    def test_list_cars(self):
        """Test the table of bundled cars."""
        result = self.runner.invoke(list_cars, ["--as-of-year", "2022"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("5 car(s), values estimated for 2022", result.output)
        self.assertIn("Ford Mustang", result.output)
        self.assertIn("HYDROGEN", result.output)
        self.assertIn("$52,000.00", result.output)

    def test_list_electric_cars(self):
        """Test restricting the table to electric and hybrid cars."""
        result = self.runner.invoke(list_cars, ["--electric", "--as-of-year", "2022"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("2 car(s)", result.output)
        self.assertIn("Tesla Model Y", result.output)
        self.assertIn("Toyota Prius", result.output)
        self.assertNotIn("Ford Mustang", result.output)

    def test_list_cars_empty_fixture(self):
        """Test listing a fixture with no cars."""
        path = os.path.join(self.temp_dir, "cars.json")
        with open(path, "w") as f:
            json.dump([], f)

        result = self.runner.invoke(list_cars, ["--file", path])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("No cars found.", result.output)

    def test_list_cars_as_of_year_zero(self):
        """Test that year zero is used as given rather than replaced by today."""
        result = self.runner.invoke(list_cars, ["--as-of-year", "0"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("values estimated for 0:", result.output)

    def test_list_cars_missing_file(self):
        """Test that an unreadable fixture is reported."""
        path = os.path.join(self.temp_dir, "missing.json")

        result = self.runner.invoke(list_cars, ["--file", path])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Error: Could not read", result.output)
