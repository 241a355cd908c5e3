"""
Tests for the CLI entry point and the GraduationAdvisor orchestrator.
"""
import json

import pytest

from factories import NATIVE_GRADUATE, make_catalog

from gradaudit.advisor import GraduationAdvisor
from gradaudit.cli import main
from gradaudit.config import DATA_DIR


def _run(argv):
    with pytest.raises(SystemExit) as ctx:
        main(argv)
    return ctx.value.code


@pytest.fixture
def enrollment_file(tmp_path):
    path = tmp_path / "enrollments.json"
    path.write_text(json.dumps({"enrollments": [
        {"code": "H1", "status": "completed", "year": 1},
        {"code": "A1", "status": "planned", "year": 2},
        {"code": "B1", "status": "planned", "year": 2},
    ]}))
    return path


class TestCLI:
    def test_command_required(self):
        assert _run([]) != 0

    def test_check_json(self, data_dir, enrollment_file, capsys):
        code = _run(["--data-dir", str(data_dir), "--json", "check", str(enrollment_file)])
        data = json.loads(capsys.readouterr().out)
        assert code == 1
        assert data["can_graduate"] is False
        assert data["total_credits"] == {"current": 2, "required": 4, "is_completed": False}
        assert data["summary"]["total"] == {"completed": 2, "planned": 2, "all": 4}
        assert [c["name"] for c in data["category_checks"]] == ["language", "humanities"]

    def test_non_native_flag(self, data_dir, enrollment_file, capsys):
        _run(["--data-dir", str(data_dir), "--non-native", "--json", "summary", str(enrollment_file)])
        data = json.loads(capsys.readouterr().out)
        assert data["by_subcategory"]["lang_b"]["planned"] == 2
        assert data["by_subcategory"]["lang_a"]["planned"] == 0

    def test_plan_json(self, data_dir, enrollment_file, capsys):
        code = _run(["--data-dir", str(data_dir), "--json", "plan", str(enrollment_file)])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["is_valid"] is True
        assert data["yearly_credits"] == {"2": 4}
        assert data["can_graduate"] is False

    def test_recommend_table(self, data_dir, enrollment_file, capsys):
        assert _run(["--data-dir", str(data_dir), "recommend", str(enrollment_file)]) == 0
        assert "RECOMMENDED COURSES" in capsys.readouterr().out

    def test_audit_with_sample_data(self, capsys):
        code = _run(["audit", str(DATA_DIR / "enrollments.json")])
        out = capsys.readouterr().out
        assert code == 1
        assert "GRADUATION CHECK" in out
        assert "STUDY PLAN" in out

    def test_missing_enrollment_file(self, data_dir, tmp_path, capsys):
        code = _run(["--data-dir", str(data_dir), "check", str(tmp_path / "nope.json")])
        assert code == 2
        assert "Error" in capsys.readouterr().out

    def test_malformed_catalog(self, data_dir, enrollment_file, capsys):
        (data_dir / "catalog.json").write_text('[{"code": "A1"}]')
        assert _run(["--data-dir", str(data_dir), "check", str(enrollment_file)]) == 2

    def test_enrollments_as_bare_codes(self, data_dir, tmp_path, capsys):
        path = tmp_path / "enrollments.json"
        path.write_text(json.dumps(["H1", "A1"]))
        code = _run(["--data-dir", str(data_dir), "--json", "check", str(path)])
        data = json.loads(capsys.readouterr().out)
        assert code == 1
        assert data["summary"]["total"]["all"] == 0

    def test_enrollment_file_not_utf8(self, data_dir, tmp_path, capsys):
        path = tmp_path / "enrollments.json"
        path.write_bytes(b"\xff\xfe[")
        assert _run(["--data-dir", str(data_dir), "check", str(path)]) == 2
        assert "Error" in capsys.readouterr().out

    def test_audit_json(self, data_dir, enrollment_file, capsys):
        code = _run(["--data-dir", str(data_dir), "--json", "audit", str(enrollment_file)])
        data = json.loads(capsys.readouterr().out)
        assert code == 1
        assert set(data) == {"summary", "check", "plan", "recommendations"}
        assert data["summary"]["total"] == {"completed": 2, "planned": 2, "all": 4}
        assert data["check"]["can_graduate"] is False
        assert data["plan"]["yearly_credits"] == {"2": 4}
        assert [r["category"] for r in data["recommendations"]] == ["language"]


class TestAdvisor:
    def test_uses_given_catalog(self):
        advisor = GraduationAdvisor(catalog=make_catalog(), is_native_speaker=True)
        from factories import completed

        records = completed(*NATIVE_GRADUATE)
        assert advisor.check(records).can_graduate is True
        assert advisor.validate_plan(records).is_valid is True
        assert advisor.recommend(records) == []
        assert advisor.summarize(records).total.completed == 20

    def test_run_audit_returns_results(self, enrollment_file, capsys):
        advisor = GraduationAdvisor(catalog=make_catalog(), is_native_speaker=False)
        result = advisor.run_audit(enrollment_file)
        assert result["check"].can_graduate is False
        assert result["summary"].total.planned == 2
        assert result["recommendations"]
        assert "LEARNER" in capsys.readouterr().out

    def test_audit_prints_nothing(self, capsys):
        advisor = GraduationAdvisor(catalog=make_catalog(), is_native_speaker=True)
        result = advisor.audit([])
        assert result["check"].can_graduate is False
        assert result["plan"].is_valid is True
        assert result["recommendations"]
        assert capsys.readouterr().out == ""
