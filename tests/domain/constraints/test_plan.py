from __future__ import annotations

import pytest

from constraintfix.domain.constraints import (
    ApplyResult,
    EditKind,
    EnforcedDependencyRange,
    ProposedEdit,
    apply_edit,
    plan_enforcement,
)
from constraintfix.domain.model import DependencyType, Descriptor, Ident, parse_ident
from tests.helpers.workspaces import declared, make_workspace


def test_plan_replaces_only_mismatching_range() -> None:
    workspace = make_workspace("a", dependencies={"left-pad": "^2.0.0", "react": "^16.0.0"})
    entry = EnforcedDependencyRange(
        workspace=workspace,
        dependency_ident=Ident(name="left-pad"),
        dependency_range="^1.0.0",
        dependency_type=DependencyType.DEPENDENCIES,
    )

    (edit,) = plan_enforcement(entry)

    assert edit.kind is EditKind.REPLACE
    assert edit.current == Descriptor(ident=Ident(name="left-pad"), range="^2.0.0")
    assert edit.replacement == Descriptor(ident=Ident(name="left-pad"), range="^1.0.0")


def test_plan_does_not_mutate_manifest() -> None:
    workspace = make_workspace("a", dependencies={"left-pad": "^2.0.0"})
    entry = EnforcedDependencyRange(
        workspace=workspace,
        dependency_ident=Ident(name="left-pad"),
        dependency_range=None,
        dependency_type=DependencyType.DEPENDENCIES,
    )

    edits = plan_enforcement(entry)

    assert [edit.kind for edit in edits] == [EditKind.REMOVE]
    assert declared(workspace, DependencyType.DEPENDENCIES) == {"left-pad": "^2.0.0"}


def test_scoped_ident_message() -> None:
    workspace = make_workspace("@acme/app", relative_cwd="packages/app", dependencies={
        "@babel/core": "7.0.0",
    })
    entry = EnforcedDependencyRange(
        workspace=workspace,
        dependency_ident=parse_ident("@babel/core"),
        dependency_range="^7.4.0",
        dependency_type=DependencyType.DEPENDENCIES,
    )

    (edit,) = plan_enforcement(entry)

    assert edit.message == (
        "@acme/app@workspace:packages/app: Change @babel/core in dependencies into ^7.4.0?"
    )


def test_proposed_edit_rejects_foreign_replacement() -> None:
    workspace = make_workspace("a", dependencies={"left-pad": "^2.0.0"})

    with pytest.raises(ValueError, match="ident of the current"):
        ProposedEdit(
            workspace=workspace,
            dependency_type=DependencyType.DEPENDENCIES,
            current=Descriptor(ident=Ident(name="left-pad"), range="^2.0.0"),
            replacement=Descriptor(ident=Ident(name="right-pad"), range="^1.0.0"),
        )


def test_apply_edit_counts_replacements_and_removals() -> None:
    workspace = make_workspace("a", dependencies={"left-pad": "^2.0.0", "lodash": "^4.0.0"})
    left_pad = Descriptor(ident=Ident(name="left-pad"), range="^2.0.0")
    lodash = Descriptor(ident=Ident(name="lodash"), range="^4.0.0")
    result = ApplyResult()

    apply_edit(
        ProposedEdit(
            workspace=workspace,
            dependency_type=DependencyType.DEPENDENCIES,
            current=left_pad,
            replacement=left_pad.with_range("^1.0.0"),
        ),
        result,
    )
    apply_edit(
        ProposedEdit(
            workspace=workspace,
            dependency_type=DependencyType.DEPENDENCIES,
            current=lodash,
        ),
        result,
    )

    assert declared(workspace, DependencyType.DEPENDENCIES) == {"left-pad": "^1.0.0"}
    assert (result.replaced, result.removed, result.applied) == (1, 1, 2)
    assert result.modified is True
