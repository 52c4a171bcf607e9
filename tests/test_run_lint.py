"""Tests for the workflow-validate command line."""

import json
from textwrap import dedent

import pytest

from workflow_validator.linter import validate_files
from workflow_validator.linter.run_lint import find_yaml_files, main

VALID_V1 = dedent(
    """\
    version: '1.0'
    steps:
      test:
        image: alpine
        commands:
          - make test
    """
)

INVALID_V2 = dedent(
    """\
    version: '2.0'
    stages:
      - build
    steps:
      push:
        stage: deploy
    """
)


def _run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestFindYamlFiles:
    """Test workflow file discovery."""

    def test_directory_search(self, tmp_path, write_workflow):
        write_workflow("a.yml", VALID_V1)
        write_workflow("b.yaml", VALID_V1)
        write_workflow("notes.txt", "")

        assert [p.name for p in find_yaml_files([str(tmp_path)])] == ["a.yml", "b.yaml"]

    def test_missing_path_is_skipped(self, tmp_path, capsys):
        assert find_yaml_files([str(tmp_path / "missing")]) == []
        assert "does not exist" in capsys.readouterr().err


class TestValidateFiles:
    """Test validate_files."""

    def test_results_per_file(self, write_workflow):
        good = write_workflow("good.yml", VALID_V1)
        bad = write_workflow("bad.yml", INVALID_V2)

        good_result, bad_result = validate_files([good, bad])

        assert good_result.ok
        assert good_result.version == "1.0"
        assert bad_result.version == "2.0"
        (error,) = bad_result.errors
        assert error["key"] == "stage"
        assert error["line"] == 6

    def test_unsupported_version(self, write_workflow):
        path = write_workflow("future.yml", "version: '3.7'\nsteps: {}\n")

        (result,) = validate_files([path])
        (error,) = result.errors
        assert error["key"] == "version"
        assert "3.7" in error["message"]

    def test_parse_error_is_reported(self, write_workflow):
        path = write_workflow("broken.yml", "steps: [unclosed")

        (result,) = validate_files([path])
        assert not result.ok

    def test_legacy_version_warning(self, write_workflow):
        path = write_workflow("legacy.yml", VALID_V1.replace("'1.0'", "'1.1'"))

        (result,) = validate_files([path])
        assert result.ok
        assert result.warnings[0]["key"] == "version"


class TestMain:
    """Test the CLI entry point."""

    def test_valid_file(self, write_workflow, capsys):
        path = write_workflow("workflow.yml", VALID_V1)

        assert _run([str(path)]) == 0
        assert "Validation succeeded" in capsys.readouterr().out

    def test_invalid_file_human(self, write_workflow, capsys):
        path = write_workflow("workflow.yml", INVALID_V2)

        assert _run([str(path)]) == 1
        out = capsys.readouterr().out
        assert "ERROR: Step 'push' uses undeclared stage 'deploy'" in out
        assert f"(source= {path}:6 yaml_path=/steps/push/stage)" in out

    def test_json_format(self, write_workflow, capsys):
        path = write_workflow("workflow.yml", INVALID_V2)

        assert _run([str(path), "--format", "json"]) == 1
        output = json.loads(capsys.readouterr().out)
        assert output["files"] == 1
        assert output["errors"] == 1
        assert output["results"][0]["version"] == "2.0"

    def test_github_actions_format(self, write_workflow, capsys):
        path = write_workflow("workflow.yml", INVALID_V2)

        assert _run([str(path), "--format", "github-actions"]) == 1
        assert f"::error file={path},line=6::" in capsys.readouterr().out

    def test_context_file(self, write_workflow, capsys):
        path = write_workflow("workflow.yml", "steps:\n  notify:\n    type: slack-notifier\n")
        context = write_workflow("context.yml", "step_types:\n  - slack-notifier\n")

        assert _run([str(path), "--context", str(context)]) == 0
        assert _run([str(path), "--context", str(write_workflow("empty.yml", "{}"))]) == 1

    def test_list_versions(self, capsys):
        assert _run(["--list-versions"]) == 0
        assert capsys.readouterr().out.split() == ["1.0", "2.0"]

    def test_print_schemas(self, capsys):
        assert _run(["--print-schemas", "1.1"]) == 0
        assert "workflow" in json.loads(capsys.readouterr().out)

    def test_print_schemas_unsupported(self, capsys):
        assert _run(["--print-schemas", "3.7"]) == 1
        assert "3.7" in capsys.readouterr().err

    def test_no_files(self, tmp_path, capsys):
        assert _run([str(tmp_path)]) == 1
        assert "No workflow files found" in capsys.readouterr().err
