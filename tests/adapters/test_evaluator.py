from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

import pytest

from constraintfix.adapters.evaluator import ConstraintsFileError, RuleFileEvaluator
from constraintfix.domain.model import DependencyType, Ident
from tests.helpers.workspaces import make_project, make_workspace


def _write_rules(path: Path, rules: dict[str, object]) -> Path:
    path.write_text(json.dumps(rules), encoding="utf-8")
    return path


def test_enforced_rule_applies_to_declaring_workspaces_only(tmp_path: Path) -> None:
    a = make_workspace("a", dependencies={"left-pad": "^2.0.0"})
    b = make_workspace("b", dependencies={"react": "^16.0.0"})
    c = make_workspace("c", dependencies={"left-pad": "^1.0.0"})
    rules = _write_rules(
        tmp_path / "constraints.json",
        {"enforced": [{"workspace": "*", "dependency": "left-pad", "range": "^1.0.0"}]},
    )

    result = RuleFileEvaluator(rules).evaluate(make_project(a, b, c))

    assert [entry.workspace for entry in result.enforced_dependency_ranges] == [a, c]
    assert all(
        entry.dependency_range == "^1.0.0" for entry in result.enforced_dependency_ranges
    )
    assert result.invalid_dependencies == ()


def test_null_range_and_invalid_rules(tmp_path: Path) -> None:
    a = make_workspace("a", dev_dependencies={"tslint": "^5.0.0"})
    b = make_workspace("b", relative_cwd="tools/b", dependencies={"lodash": "^4.0.0"})
    rules = _write_rules(
        tmp_path / "constraints.json",
        {
            "enforced": [
                {"workspace": "a", "dependency": "tslint", "type": "devDependencies", "range": None}
            ],
            "invalid": [
                {"workspace": "tools/b", "dependency": "lodash", "reason": "banned package"}
            ],
        },
    )

    result = RuleFileEvaluator(rules).evaluate(make_project(a, b))

    (enforced,) = result.enforced_dependency_ranges
    assert enforced.dependency_range is None
    assert enforced.dependency_type is DependencyType.DEV_DEPENDENCIES
    (invalid,) = result.invalid_dependencies
    assert invalid.workspace is b
    assert invalid.dependency_ident == Ident(name="lodash")
    assert invalid.reason == "banned package"


def test_missing_rule_file_is_empty(tmp_path: Path) -> None:
    result = RuleFileEvaluator(tmp_path / "constraints.json").evaluate(make_project())

    assert result.is_empty


@pytest.mark.parametrize(
    "rules",
    [
        {"enforced": [{"dependency": "left-pad"}]},
        {"enforced": [{"dependency": "left-pad", "range": "1", "type": "bundledDependencies"}]},
        {"unknown": []},
        {"invalid": [{"dependency": "not a name", "reason": "x"}]},
        {"invalid": [{"workspace": "ghost", "dependency": "lodash", "reason": "x"}]},
    ],
)
def test_malformed_rules_raise(tmp_path: Path, rules: dict[str, object]) -> None:
    path = _write_rules(tmp_path / "constraints.json", rules)

    with pytest.raises(ConstraintsFileError):
        RuleFileEvaluator(path).evaluate(make_project(make_workspace("a")))


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "constraints.json"
    path.write_text("{nope", encoding="utf-8")

    with pytest.raises(ConstraintsFileError, match="not valid JSON"):
        RuleFileEvaluator(path).evaluate(make_project())
