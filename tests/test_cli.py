"""Testy end-to-end komend CLI autotestid."""

from pathlib import Path

import pytest

from autotestid import _config
from autotestid.cli import build_parser, main

COMPONENT = '<div class="container">\n    <h1>Hello</h1>\n</div>\n'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Izolacja od .env i zmiennych AUTOTESTID_* środowiska deweloperskiego."""
    for name in ("AUTOTESTID_EXTENSION", "AUTOTESTID_EXCLUDE"):
        # setenv + delenv: monkeypatch przywróci stan także po load_dotenv()
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def write(path: Path, text: str = COMPONENT) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def exit_code(argv: list[str]) -> int:
    try:
        main(argv)
    except SystemExit as e:
        return int(e.code or 0)
    return 0


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_folder_defaults(self):
        args = build_parser().parse_args(["folder", "src"])
        assert args.recursive is True
        assert args.pattern is None
        assert args.exclude == []
        assert args.dry_run is False

    def test_folder_no_recursive_and_excludes(self):
        args = build_parser().parse_args(
            ["folder", "src", "--no-recursive", "-e", "bin", "--exclude", "obj"]
        )
        assert args.recursive is False
        assert args.exclude == ["bin", "obj"]

    def test_solution_options(self):
        args = build_parser().parse_args(
            ["solution", "App.sln", "-i", "Web", "-e", "Legacy", "-t", "-d"]
        )
        assert args.include_project == ["Web"]
        assert args.exclude_project == ["Legacy"]
        assert args.include_tests is True
        assert args.dry_run is True


class TestFileCommand:
    """Tests for `autotestid file`."""

    def test_updates_file(self, tmp_path):
        path = write(tmp_path / "MyComponent.razor")
        assert exit_code(["file", str(path)]) == 0
        assert read(path).startswith('<div data-testid="MyComponent" class="container">')

    def test_custom_test_id(self, tmp_path):
        path = write(tmp_path / "MyComponent.razor")
        assert exit_code(["file", str(path), "--test-id", "custom"]) == 0
        assert 'data-testid="custom"' in read(path)

    def test_dry_run_shows_preview(self, tmp_path, capsys):
        path = write(tmp_path / "MyComponent.razor")
        assert exit_code(["file", str(path), "--dry-run"]) == 0
        assert read(path) == COMPONENT
        assert "Podgląd" in capsys.readouterr().out

    def test_no_changes_needed(self, tmp_path, capsys):
        path = write(tmp_path / "Code.razor", "@code {\n    int x;\n}")
        assert exit_code(["file", str(path)]) == 0
        assert read(path) == "@code {\n    int x;\n}"
        assert "Brak zmian" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        assert exit_code(["file", str(tmp_path / "Nope.razor")]) == 1

    def test_wrong_extension(self, tmp_path):
        path = write(tmp_path / "page.html")
        assert exit_code(["file", str(path)]) == 1
        assert read(path) == COMPONENT

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "Bad.razor"
        path.write_bytes(b"<div>\xff</div>")
        assert exit_code(["file", str(path)]) == 1

    def test_extension_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AUTOTESTID_EXTENSION", "cshtml")
        path = write(tmp_path / "Index.cshtml")
        assert exit_code(["file", str(path)]) == 0
        assert 'data-testid="Index"' in read(path)


class TestFolderCommand:
    """Tests for `autotestid folder`."""

    def test_processes_razor_files_recursively(self, tmp_path):
        a = write(tmp_path / "src" / "Component1.razor", "<div>Component 1</div>")
        b = write(tmp_path / "src" / "Components" / "Component2.razor", "<span>Component 2</span>")
        c = write(tmp_path / "src" / "NotARazorFile.txt", "<div>Not a razor file</div>")

        assert exit_code(["folder", str(tmp_path / "src")]) == 0

        assert 'data-testid="Component1"' in read(a)
        assert 'data-testid="Component2"' in read(b)
        assert "data-testid" not in read(c)

    def test_no_recursive(self, tmp_path):
        a = write(tmp_path / "A.razor")
        b = write(tmp_path / "sub" / "B.razor")
        assert exit_code(["folder", str(tmp_path), "--no-recursive"]) == 0
        assert "data-testid" in read(a)
        assert read(b) == COMPONENT

    def test_exclude(self, tmp_path):
        a = write(tmp_path / "A.razor")
        b = write(tmp_path / "Generated" / "B.razor")
        assert exit_code(["folder", str(tmp_path), "-e", "generated"]) == 0
        assert "data-testid" in read(a)
        assert read(b) == COMPONENT

    def test_exclude_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AUTOTESTID_EXCLUDE", "legacy, vendor")
        a = write(tmp_path / "A.razor")
        b = write(tmp_path / "vendor" / "B.razor")
        assert exit_code(["folder", str(tmp_path)]) == 0
        assert "data-testid" in read(a)
        assert read(b) == COMPONENT

    def test_custom_pattern(self, tmp_path):
        page = write(tmp_path / "Index.cshtml")
        assert exit_code(["folder", str(tmp_path), "--pattern", "*.cshtml"]) == 0
        assert 'data-testid="Index"' in read(page)

    def test_dry_run(self, tmp_path):
        a = write(tmp_path / "A.razor")
        assert exit_code(["folder", str(tmp_path), "--dry-run"]) == 0
        assert read(a) == COMPONENT

    def test_error_does_not_stop_batch(self, tmp_path):
        bad = tmp_path / "Bad.razor"
        bad.write_bytes(b"<div>\xff</div>")
        good = write(tmp_path / "Good.razor")

        assert exit_code(["folder", str(tmp_path)]) == 1
        assert 'data-testid="Good"' in read(good)

    def test_empty_folder(self, tmp_path, capsys):
        assert exit_code(["folder", str(tmp_path)]) == 0
        assert "Brak plików" in capsys.readouterr().out

    def test_missing_folder(self, tmp_path):
        assert exit_code(["folder", str(tmp_path / "nope")]) == 1


class TestProjectCommand:
    """Tests for `autotestid project`."""

    def test_processes_project_and_skips_build_dirs(self, tmp_path):
        proj = write(tmp_path / "App" / "App.csproj", "<Project />")
        page = write(tmp_path / "App" / "Pages" / "Index.razor")
        built = write(tmp_path / "App" / "obj" / "Debug" / "Index.razor")

        assert exit_code(["project", str(proj)]) == 0
        assert 'data-testid="Index"' in read(page)
        assert read(built) == COMPONENT

    def test_user_exclude(self, tmp_path):
        proj = write(tmp_path / "App.csproj", "<Project />")
        page = write(tmp_path / "wwwroot" / "Demo.razor")
        assert exit_code(["project", str(proj), "--exclude", "wwwroot"]) == 0
        assert read(page) == COMPONENT

    def test_wrong_extension(self, tmp_path):
        other = write(tmp_path / "App.fsproj", "<Project />")
        assert exit_code(["project", str(other)]) == 1

    def test_missing_project(self, tmp_path):
        assert exit_code(["project", str(tmp_path / "App.csproj")]) == 1

    def test_no_components(self, tmp_path):
        proj = write(tmp_path / "App.csproj", "<Project />")
        assert exit_code(["project", str(proj)]) == 0


SLN = """
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Web", "Web\\Web.csproj", "{11111111-1111-1111-1111-111111111111}"
EndProject
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Web.Tests", "Web.Tests\\Web.Tests.csproj", "{22222222-2222-2222-2222-222222222222}"
EndProject
"""


class TestSolutionCommand:
    """Tests for `autotestid solution`."""

    @pytest.fixture
    def solution(self, tmp_path):
        write(tmp_path / "Web" / "Web.csproj", "<Project />")
        write(tmp_path / "Web.Tests" / "Web.Tests.csproj", "<Project />")
        return write(tmp_path / "App.sln", SLN)

    def test_skips_test_projects(self, tmp_path, solution):
        web = write(tmp_path / "Web" / "Counter.razor")
        test = write(tmp_path / "Web.Tests" / "Fixture.razor")

        assert exit_code(["solution", str(solution)]) == 0
        assert 'data-testid="Counter"' in read(web)
        assert read(test) == COMPONENT

    def test_include_tests(self, tmp_path, solution):
        test = write(tmp_path / "Web.Tests" / "Fixture.razor")
        assert exit_code(["solution", str(solution), "--include-tests"]) == 0
        assert 'data-testid="Fixture"' in read(test)

    def test_exclude_project(self, tmp_path, solution):
        web = write(tmp_path / "Web" / "Counter.razor")
        assert exit_code(["solution", str(solution), "-e", "web"]) == 0
        assert read(web) == COMPONENT

    def test_dry_run(self, tmp_path, solution):
        web = write(tmp_path / "Web" / "Counter.razor")
        assert exit_code(["solution", str(solution), "--dry-run"]) == 0
        assert read(web) == COMPONENT

    def test_missing_project_reported_and_others_processed(self, tmp_path):
        sln = write(tmp_path / "App.sln", SLN.replace("Web.Tests", "Admin"))
        write(tmp_path / "Web" / "Web.csproj", "<Project />")
        web = write(tmp_path / "Web" / "Counter.razor")

        assert exit_code(["solution", str(sln)]) == 1
        assert 'data-testid="Counter"' in read(web)

    def test_wrong_extension(self, tmp_path):
        other = write(tmp_path / "App.slnx", SLN)
        assert exit_code(["solution", str(other)]) == 1

    def test_missing_solution(self, tmp_path):
        assert exit_code(["solution", str(tmp_path / "App.sln")]) == 1


class TestConfig:
    """Tests for autotestid._config."""

    def test_defaults(self):
        assert _config.file_extension() == ".razor"
        assert _config.default_pattern() == "*.razor"
        assert _config.extra_excludes() == []

    def test_env_file_loaded(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("AUTOTESTID_EXTENSION=.cshtml\n", encoding="utf-8")
        _config.load_env()
        assert _config.file_extension() == ".cshtml"

    def test_shell_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AUTOTESTID_EXTENSION", ".razor")
        (tmp_path / ".env").write_text("AUTOTESTID_EXTENSION=.cshtml\n", encoding="utf-8")
        _config.load_env()
        assert _config.file_extension() == ".razor"
