"""End-to-end tests for the migration orchestrator with fake collaborators."""

from __future__ import annotations

import json
from typing import Dict, List

import pytest

from biomeup.config import MigrationConfig
from biomeup.errors import CommandError, ManifestError
from biomeup.models import CommandResult, ProjectArchetype
from biomeup.orchestrator import Migrator
from biomeup.prompts import Prompter
from biomeup.runner import CommandRunner
from tests._fixtures.project_builder import ProjectBuilder


class FakeShell:
    """Records commands and simulates package manager side effects."""

    def __init__(self, project: ProjectBuilder, fail_on: str | None = None) -> None:
        self.project = project
        self.fail_on = fail_on
        self.commands: List[str] = []

    def __call__(self, command: str) -> CommandResult:
        self.commands.append(command)
        if self.fail_on and command.startswith(self.fail_on):
            return CommandResult(command=command, returncode=1)
        if " remove " in f"{command} " or " uninstall " in f"{command} ":
            manifest = self.project.read_manifest()
            packages = command.split()[2:]
            for group in ("dependencies", "devDependencies"):
                deps: Dict[str, str] = manifest.get(group, {})
                for name in packages:
                    deps.pop(name, None)
            self.project.write_manifest(manifest)
        return CommandResult(command=command, returncode=0)


def _answers(*values: str) -> Prompter:
    queue = list(values)
    return Prompter(input_func=lambda prompt: queue.pop(0))


def _migrator(project: ProjectBuilder, shell: FakeShell, prompter: Prompter, **config) -> Migrator:
    return Migrator(
        project.path(),
        runner=CommandRunner(runner=shell),
        prompter=prompter,
        config=MigrationConfig(root=project.path(), **config),
        echo=lambda text: None,
    )


def test_full_migration_with_legacy_removal(project: ProjectBuilder) -> None:
    project.write_manifest(
        {
            "name": "web",
            "packageManager": "pnpm@9.0.0",
            "scripts": {"dev": "next dev"},
            "dependencies": {"react": "^18.0.0"},
            "devDependencies": {"eslint": "^8.0.0", "eslint-config-foo": "^1.0.0", "typescript": "^5"},
            "eslintConfig": {"extends": "foo"},
            "prettier": {"semi": False},
        }
    )
    project.write({"yarn.lock": "", "src/app.tsx": "// eslint-disable-next-line\nexport {};\n"})
    shell = FakeShell(project)

    summary = _migrator(project, shell, _answers("y", "y")).run()

    assert shell.commands == [
        "pnpm remove eslint eslint-config-foo",
        "pnpm add -D -E @biomejs/biome@2.3.8",
        "pnpm lint:fix",
    ]
    manifest = project.read_manifest()
    assert "eslintConfig" not in manifest
    assert "prettier" not in manifest
    assert manifest["devDependencies"] == {"typescript": "^5"}
    assert manifest["scripts"]["dev"] == "next dev"
    assert manifest["scripts"]["type-check"] == "tsc -b --noEmit"
    assert manifest["scripts"]["lint"].endswith("&& pnpm type-check")

    biome = json.loads(project.read("biome.json"))
    assert biome["css"]["parser"]["tailwindDirectives"] is True
    assert project.read("src/app.tsx") == "export {};\n"

    assert summary.archetype is ProjectArchetype.REACT
    assert summary.package_manager.id == "pnpm"
    assert summary.legacy_packages == ["eslint", "eslint-config-foo"]
    assert summary.legacy_removed is True
    assert summary.typescript is True
    assert summary.report.directives_removed == 1


def test_react_project_without_typescript(project: ProjectBuilder) -> None:
    project.write_manifest({"name": "web", "dependencies": {"react": "^18.0.0"}})
    shell = FakeShell(project)

    summary = _migrator(project, shell, _answers("n")).run()

    scripts = project.read_manifest()["scripts"]
    assert summary.archetype is ProjectArchetype.REACT
    assert summary.typescript is False
    assert "type-check" not in scripts
    assert scripts["lint"] == "biome lint --diagnostic-level=error --no-errors-on-unmatched"
    assert shell.commands == ["npm install -D -E @biomejs/biome@2.3.8", "npm run lint:fix"]
    assert summary.report.files_scanned == 0


def test_declining_legacy_removal_keeps_packages(project: ProjectBuilder, caplog) -> None:
    project.write_manifest(
        {"devDependencies": {"prettier": "^3"}, "prettier": {"semi": False}}
    )
    project.write({"bun.lockb": ""})
    shell = FakeShell(project)

    with caplog.at_level("WARNING", logger="biomeup"):
        summary = _migrator(project, shell, _answers("n", "n")).run()

    manifest = project.read_manifest()
    assert manifest["prettier"] == {"semi": False}
    assert manifest["devDependencies"] == {"prettier": "^3"}
    assert shell.commands[0] == "bun add -D -E @biomejs/biome@2.3.8"
    assert summary.legacy_removed is False
    assert "Keeping existing ESLint/Prettier packages as requested." in caplog.messages


def test_existing_biome_config_is_not_overwritten(project: ProjectBuilder) -> None:
    project.write_manifest({"name": "lib"})
    project.write({"biome.json": '{"custom": true}\n'})

    summary = _migrator(project, FakeShell(project), _answers("n")).run()

    assert project.read("biome.json") == '{"custom": true}\n'
    assert summary.config_written is False


def test_config_answers_skip_prompts_and_fix(project: ProjectBuilder) -> None:
    project.write_manifest({"devDependencies": {"eslint": "^8"}})
    project.write({"index.js": "/* eslint-env node */\nmodule.exports = {};\n"})
    shell = FakeShell(project)

    def _never(prompt: str) -> str:
        raise AssertionError("no prompt expected")

    summary = _migrator(
        project,
        shell,
        Prompter(input_func=_never),
        remove_legacy=False,
        clean_comments=True,
        run_fix=False,
        biome_version="2.4.0",
    ).run()

    assert shell.commands == ["npm install -D -E @biomejs/biome@2.4.0"]
    assert summary.report.directives_removed == 1
    assert json.loads(project.read("biome.json"))["$schema"].endswith("/2.4.0/schema.json")


def test_missing_manifest_is_user_error(project: ProjectBuilder) -> None:
    shell = FakeShell(project)

    with pytest.raises(ManifestError):
        _migrator(project, shell, _answers()).run()
    assert shell.commands == []


def test_failed_install_aborts_before_writing_config(project: ProjectBuilder) -> None:
    project.write_manifest({"name": "lib"})
    shell = FakeShell(project, fail_on="npm install")

    with pytest.raises(CommandError, match=r"Command failed: npm install -D -E @biomejs/biome@2.3.8 \(exit code 1\)"):
        _migrator(project, shell, _answers("n")).run()

    assert not (project.path() / "biome.json").exists()
