import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ts_to_records.ts_to_records import ts_to_records

USER_EXAMPLE_DIR = Path(__file__).parent / "test_data" / "user_example"


@pytest.fixture
def runner():
    return CliRunner()


def write_json(path, data):
    path.write_text(json.dumps(data))
    return path


class TestCli:
    def test_user_example_matches_reference_files(self, runner, tmp_path):
        result = runner.invoke(
            ts_to_records,
            [
                str(USER_EXAMPLE_DIR / "results.json"),
                str(tmp_path),
                "-c",
                str(USER_EXAMPLE_DIR / "config.json"),
            ],
        )

        assert result.exit_code == 0, result.output
        for language, file_name in [("swift", "Results.swift"), ("kotlin", "Results.kt")]:
            generated = (tmp_path / language / file_name).read_text(encoding="utf-8")
            expected = (USER_EXAMPLE_DIR / "expected" / file_name).read_text(encoding="utf-8")
            assert generated.strip() == expected.strip()
            assert f"Generated {language} code at: " in result.output

    def test_single_language(self, runner, tmp_path):
        document = write_json(tmp_path / "user-models.json", [{"kind": "interface", "name": "User", "properties": []}])
        config = write_json(tmp_path / "config.json", {"kotlin": {"packageName": "com.example"}})
        output = tmp_path / "out"

        result = runner.invoke(ts_to_records, [str(document), str(output), "-c", str(config), "-l", "kotlin"])

        assert result.exit_code == 0, result.output
        assert (output / "kotlin" / "UserModels.kt").exists()
        assert not (output / "swift").exists()

    def test_missing_package_name(self, runner, tmp_path):
        document = write_json(tmp_path / "results.json", [])
        config = write_json(tmp_path / "config.json", {})

        result = runner.invoke(ts_to_records, [str(document), str(tmp_path / "out"), "-c", str(config), "-l", "swift"])

        assert result.exit_code == 1
        assert "Error: Config must specify kotlin.packageName" in result.output
        assert not (tmp_path / "out").exists()

    def test_generation_errors_are_reported(self, runner, tmp_path):
        document = write_json(
            tmp_path / "results.json",
            [
                {"kind": "interface", "name": "A", "properties": [{"name": "b", "type": "B"}]},
                {"kind": "interface", "name": "B", "properties": [{"name": "a", "type": "A"}]},
            ],
        )
        config = write_json(tmp_path / "config.json", {"kotlin": {"packageName": "com.example"}})

        result = runner.invoke(ts_to_records, [str(document), str(tmp_path / "out"), "-c", str(config)])

        assert result.exit_code == 1
        assert "Error: Circular dependency detected involving A" in result.output

    def test_config_is_required(self, runner, tmp_path):
        document = write_json(tmp_path / "results.json", [])

        result = runner.invoke(ts_to_records, [str(document), str(tmp_path / "out")])

        assert result.exit_code == 2


if __name__ == "__main__":
    pytest.main([__file__])
