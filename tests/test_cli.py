"""
Unit tests for the genevo command-line runner.
"""

from genevo.cli import format_individual, main, parse_arguments
from genevo.optimization import CheckpointRecord


class TestParseArguments:
    """Test suite for argument parsing."""

    def test_defaults(self):
        """Test optional arguments default to None."""
        args = parse_arguments(["--problem", "sum7"])

        assert args.problem == "sum7"
        assert args.config is None
        assert args.iterations is None
        assert args.seed is None
        assert args.resume is False


class TestFormatIndividual:
    """Test suite for terminal rendering."""

    def test_characters_joined(self):
        """Test single-character genes render as a string."""
        assert format_individual(tuple("hello")) == "hello"

    def test_floats_rounded(self):
        """Test real genes render with four decimals."""
        assert format_individual((1.0, 0.5)) == "[1.0000, 0.5000]"


class TestMain:
    """Test suite for the console entry point."""

    def test_run_sum7(self, capsys):
        """Test a short seeded run prints a summary."""
        exit_code = main(["--problem", "sum7", "--iterations", "3", "--seed", "1"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Problem:     sum7" in out
        assert "Best score:" in out

    def test_checkpoint_and_resume(self, tmp_path):
        """Test a resumed run continues from the saved generation."""
        checkpoint = tmp_path / "sum7.pkl"
        base = ["--problem", "sum7", "--seed", "2", "--checkpoint", str(checkpoint), "--interval", "2"]

        assert main(base + ["--iterations", "2"]) == 0
        first = CheckpointRecord.load(checkpoint).generation

        assert main(base + ["--iterations", "2", "--resume"]) == 0
        second = CheckpointRecord.load(checkpoint).generation

        assert first >= 2
        assert second > first

    def test_config_file(self, tmp_path, capsys):
        """Test values from a YAML config are used."""
        config = tmp_path / "evolution.yaml"
        config.write_text("evolution:\n  population_size: 12\n  keep_n: 2\n  iteration_limit: 2\n")

        assert main(["--problem", "phrase", "--config", str(config), "--seed", "3"]) == 0
        assert "Problem:     phrase" in capsys.readouterr().out

    def test_invalid_config_fails(self, tmp_path):
        """Test a configuration error gives exit code 1."""
        config = tmp_path / "bad.yaml"
        config.write_text("evolution:\n  population_size: 0\n")

        assert main(["--problem", "sum7", "--config", str(config)]) == 1

    def test_unknown_config_key_fails(self, tmp_path, caplog):
        """Test a misspelled config key gives exit code 1 instead of a traceback."""
        config = tmp_path / "typo.yaml"
        config.write_text("evolution:\n  populaton_size: 20\n")

        assert main(["--problem", "sum7", "--config", str(config)]) == 1
        assert "Unknown configuration keys: populaton_size" in caplog.text

    def test_unreadable_config_fails(self, tmp_path):
        """Test a missing config file gives exit code 1."""
        assert main(["--problem", "sum7", "--config", str(tmp_path / "missing.yaml")]) == 1

    def test_output_dir(self, tmp_path):
        """Test run logs are written under --output-dir."""
        assert main([
            "--problem", "sum7", "--iterations", "1", "--seed", "4", "--output-dir", str(tmp_path)
        ]) == 0

        run_dirs = list(tmp_path.glob("run_sum7_*"))
        assert len(run_dirs) == 1
        assert (run_dirs[0] / "final_best.json").exists()
