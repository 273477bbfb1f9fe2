"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from click.testing import CliRunner
from es_diff_suppress.cli import cli, main
from es_diff_suppress.results_writing import CHECKS_SHEET_NAME, RUN_INFO_SHEET_NAME
from openpyxl import load_workbook

_STORED_TEMPLATE = {
    "logs": {
        "order": 0,
        "index_patterns": ["logs-*"],
        "settings": {"index": {"number_of_shards": "1"}},
        "mappings": {},
        "aliases": {},
    }
}


def _write_json(path: Path, value: object) -> Path:
    path.write_text(json.dumps(value), encoding="utf-8")
    return path


def _compare_args(old_path: Path, new_path: Path, *extra: str) -> list[str]:
    return [
        "compare",
        "--resource",
        "elasticsearch_index_template",
        "--attribute",
        "template",
        "--old",
        str(old_path),
        "--new",
        str(new_path),
        *extra,
    ]


def test_compare_reports_equivalent_template(tmp_path: Path) -> None:
    old_path = _write_json(tmp_path / "stored.json", _STORED_TEMPLATE)
    new_path = _write_json(
        tmp_path / "configured.json",
        {"index_patterns": ["logs-*"], "settings": {"index.number_of_shards": "1"}},
    )

    result = CliRunner().invoke(cli, _compare_args(old_path, new_path, "--identifier", "logs"))

    assert result.exit_code == 0
    assert result.output.strip() == "equivalent"


def test_compare_reports_different_template(tmp_path: Path) -> None:
    old_path = _write_json(tmp_path / "stored.json", _STORED_TEMPLATE)
    new_path = _write_json(tmp_path / "configured.json", {"index_patterns": ["metrics-*"]})

    result = CliRunner().invoke(cli, _compare_args(old_path, new_path, "--identifier", "logs"))

    assert result.exit_code == 0
    assert result.output.strip() == "different"


def test_compare_fail_on_diff_returns_error_exit_code(tmp_path: Path, capsys) -> None:
    old_path = _write_json(tmp_path / "stored.json", _STORED_TEMPLATE)
    new_path = _write_json(tmp_path / "configured.json", {"index_patterns": ["metrics-*"]})

    exit_code = main(_compare_args(old_path, new_path, "--identifier", "logs", "--fail-on-diff"))
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "different" in captured.out
    assert "documents differ" in captured.err


def test_compare_template_requires_identifier(tmp_path: Path, capsys) -> None:
    old_path = _write_json(tmp_path / "stored.json", _STORED_TEMPLATE)

    exit_code = main(_compare_args(old_path, old_path))
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "--identifier is required" in captured.err


def test_compare_license_ignores_signature(tmp_path: Path) -> None:
    old_path = _write_json(tmp_path / "stored.json", {"uid": "u1", "signature": "a"})
    new_path = _write_json(
        tmp_path / "configured.json", {"license": {"uid": "u1", "signature": "b"}}
    )

    result = CliRunner().invoke(
        cli,
        [
            "compare",
            "--resource",
            "elasticsearch_license",
            "--attribute",
            "license",
            "--old",
            str(old_path),
            "--new",
            str(new_path),
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "equivalent"


def test_normalize_prints_defaulted_and_flattened_document(tmp_path: Path) -> None:
    new_path = _write_json(tmp_path / "configured.json", {"settings": {"index.codec": "best"}})

    result = CliRunner().invoke(
        cli,
        [
            "normalize",
            "--resource",
            "elasticsearch_index_template",
            "--attribute",
            "template",
            "--new",
            str(new_path),
        ],
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "aliases": {},
        "mappings": {},
        "order": 0,
        "settings": {"index": {"codec": "best"}},
    }


def test_normalize_prints_numbers_exactly_as_compared(tmp_path: Path) -> None:
    new_path = tmp_path / "configured.json"
    new_path.write_text(
        '{"settings": {"index.x": 0.10000000000000000000001, "index.y": 1e400}}',
        encoding="utf-8",
    )

    result = CliRunner().invoke(
        cli,
        [
            "normalize",
            "--resource",
            "elasticsearch_index_template",
            "--attribute",
            "template",
            "--new",
            str(new_path),
        ],
    )

    assert result.exit_code == 0
    rendered = json.loads(result.output, parse_float=Decimal)
    assert rendered["settings"]["index"] == {
        "x": Decimal("0.10000000000000000000001"),
        "y": Decimal("1E+400"),
    }


def test_normalize_prints_huge_exponents_without_failing(tmp_path: Path, capsys) -> None:
    new_path = tmp_path / "configured.json"
    new_path.write_text('{"order": 1e5000}', encoding="utf-8")

    exit_code = main(
        [
            "normalize",
            "--resource",
            "elasticsearch_index_template",
            "--attribute",
            "template",
            "--new",
            str(new_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert '"order": 1E+5000' in captured.out
    assert "Traceback" not in captured.err


def test_normalize_rejects_license_attribute(tmp_path: Path, capsys) -> None:
    new_path = _write_json(tmp_path / "configured.json", {"license": {}})

    exit_code = main(
        [
            "normalize",
            "--resource",
            "elasticsearch_license",
            "--attribute",
            "license",
            "--new",
            str(new_path),
        ]
    )

    assert exit_code == 1
    assert "no document normalization" in capsys.readouterr().err


def test_list_attributes_prints_catalog() -> None:
    result = CliRunner().invoke(cli, ["list-attributes"])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 17
    assert "elasticsearch_index_template.template\tindex_template (identifier required)" in lines
    assert "elasticsearch_license.license\tlicense" in lines


def test_generate_config_writes_manifest_template(tmp_path: Path) -> None:
    output_path = tmp_path / "drift-checks.yaml"

    result = CliRunner().invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert str(output_path.resolve()) in result.output


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "drift-checks.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])

    assert exit_code == 1
    assert output_path.read_text(encoding="utf-8") == "existing"
    assert capsys.readouterr().err


def test_run_command_writes_results_workbook(tmp_path: Path) -> None:
    stored_path = _write_json(tmp_path / "stored.json", _STORED_TEMPLATE)
    config_path = tmp_path / "checks.yaml"
    config_path.write_text(
        f"""
checks:
  - name: logs
    resource: elasticsearch_index_template
    attribute: template
    identifier: logs
    old:
      path: {stored_path.name}
    new:
      inline:
        index_patterns: ["logs-*"]
        settings:
          index.number_of_shards: "1"
  - name: pipeline
    resource: elasticsearch_ingest_pipeline
    attribute: body
    old: '{{"processors": []}}'
    new: '{{"processors": [{{"drop": {{}}}}]}}'
""",
        encoding="utf-8",
    )
    output_dir = tmp_path / "results"

    result = CliRunner().invoke(
        cli, ["run", "--config", str(config_path), "--output-dir", str(output_dir)]
    )

    assert result.exit_code == 0
    output_path = Path(result.output.strip())
    assert output_path.parent == output_dir.resolve()
    workbook = load_workbook(output_path)
    rows = workbook[CHECKS_SHEET_NAME].iter_rows(min_row=2, values_only=True)
    statuses = [row[4] for row in rows]
    assert statuses == ["EQUIVALENT", "DIFFERENT"]
    info = {row[0]: row[1] for row in workbook[RUN_INFO_SHEET_NAME].iter_rows(values_only=True)}
    assert info["different"] == 1


def test_run_command_fail_on_diff(tmp_path: Path, capsys) -> None:
    config_path = _write_json(
        tmp_path / "checks.json",
        {
            "checks": [
                {
                    "resource": "elasticsearch_role",
                    "attribute": "metadata",
                    "old": '{"a": 1}',
                    "new": '{"a": 2}',
                }
            ]
        },
    )

    exit_code = main(["--log-level", "info", "run", "--config", str(config_path), "--fail-on-diff"])

    assert exit_code == 1
    assert "1 check(s) reported differences" in capsys.readouterr().err
