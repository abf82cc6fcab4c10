import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from rkz.cli import app
from rkz.substances import SUBSTANCES


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_list_gas(self):
        result = self.runner.invoke(app, ["list-gas"])
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.splitlines()
        self.assertEqual(lines[0], "Gases referenced by RKZ:")
        self.assertEqual(lines[1], "    ID      Name")
        self.assertIn("    H2      Hydrogen", lines)
        self.assertEqual(len(lines), 2 + len(SUBSTANCES))

    def test_scalar_z(self):
        result = self.runner.invoke(
            app, ["z", "-g", "H2", "-T", "15", "-P", "701.01325", "--eos", "vdw"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertAlmostEqual(float(result.output.strip()), 1.6818452, delta=1e-5)

    def test_default_eos_is_redlich_kwong(self):
        result = self.runner.invoke(app, ["z", "-g", "H2", "-T", "15", "-P", "701.01325"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertAlmostEqual(float(result.output.strip()), 1.506842, delta=1e-5)

    def test_table(self):
        result = self.runner.invoke(
            app,
            [
                "z",
                "--gas",
                "80%N2+O2",
                "--temperature=-10:30:20",
                "--pressure",
                "1:3",
                "--eos",
                "pr",
            ],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.splitlines()
        self.assertEqual(lines[0], "P \\ T\t-10\t10\t30")
        self.assertEqual(len(lines), 4)
        for line, pressure in zip(lines[1:], ("1", "2", "3")):
            fields = line.split("\t")
            self.assertEqual(fields[0], pressure)
            self.assertEqual(len(fields), 4)
            for value in fields[1:]:
                self.assertAlmostEqual(float(value), 1.0, delta=0.01)

    def test_table_labels_keep_full_precision(self):
        result = self.runner.invoke(
            app,
            ["z", "-g", "N2", "-T", "15.123456789:16.2", "-P", "1000000:1000001", "-e", "vdw"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.splitlines()
        self.assertEqual(lines[0].split("\t")[1:], [repr(15.123456789), repr(15.123456789 + 1.0)])
        self.assertEqual([line.split("\t")[0] for line in lines[1:]], ["1000000", "1000001"])

    def test_unknown_gas(self):
        result = self.runner.invoke(app, ["z", "-g", "XX", "-T", "15", "-P", "1"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("substance not referenced", result.output)

    def test_bad_mixture(self):
        result = self.runner.invoke(app, ["z", "-g", "80%N2+30%O2", "-T", "15", "-P", "1"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("total molar fraction is too high", result.output)

    def test_bad_range(self):
        result = self.runner.invoke(app, ["z", "-g", "N2", "-T", "30:10", "-P", "1"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Range stop must be higher than start", result.output)

    def test_unknown_eos(self):
        result = self.runner.invoke(app, ["z", "-g", "N2", "-T", "15", "-P", "1", "-e", "bwr"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unknown equation of state", result.output)

    def test_missing_parameters(self):
        result = self.runner.invoke(app, ["z", "-g", "N2"])
        self.assertNotEqual(result.exit_code, 0)

    def test_verbose(self):
        result = self.runner.invoke(app, ["--verbose", "z", "-g", "N2", "-T", "15", "-P", "1"])
        self.assertEqual(result.exit_code, 0, result.output)

    def test_run_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            config_file = Path(tmp) / "config.json"
            output_file = Path(tmp) / "out.json"
            config_file.write_text(
                json.dumps(
                    {"gas": "CH4+10%CO2", "eos": "srk", "pressure": "10:50:20", "temperature": 25}
                )
            )

            result = self.runner.invoke(
                app, ["run", str(config_file), "--output", str(output_file)]
            )
            self.assertEqual(result.exit_code, 0, result.output)

            data = json.loads(output_file.read_text())
            self.assertEqual(data["eos"], "srk")
            self.assertEqual(data["gas"], "90%CH4+10%CO2")
            self.assertEqual(data["pressure_bar"], [10.0, 30.0, 50.0])
            self.assertEqual(data["temperature_c"], [25.0])
            self.assertEqual(len(data["z"]), 3)
            self.assertTrue(all(len(row) == 1 for row in data["z"]))
            self.assertGreater(data["z"][0][0], data["z"][2][0])

    def test_run_bad_gas(self):
        with tempfile.TemporaryDirectory() as tmp:
            config_file = Path(tmp) / "config.json"
            config_file.write_text(json.dumps({"gas": "XX", "pressure": 1, "temperature": 15}))
            result = self.runner.invoke(app, ["run", str(config_file)])
            self.assertEqual(result.exit_code, 1)


if __name__ == '__main__':
    unittest.main()
